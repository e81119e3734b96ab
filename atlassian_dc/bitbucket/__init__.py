"""Bitbucket Data Center request types and endpoint mixins."""