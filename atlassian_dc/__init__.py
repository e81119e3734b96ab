"""HTTP transport and Bitbucket Data Center request types."""

__version__ = "0.1.0"