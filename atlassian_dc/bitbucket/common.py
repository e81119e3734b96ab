"""Input fields and request helpers shared by many Bitbucket operations."""

from dataclasses import dataclass
from typing import Any

from atlassian_dc.transport import set_query_param


@dataclass(kw_only=True)
class CommonInput:
    """Identifies a repository by project key and repository slug."""

    project_key: str
    repo_slug: str


@dataclass(kw_only=True)
class PaginationInput:
    """Paging window; zero means the server default."""

    start: int = 0
    limit: int = 0


def _repo_path(request: CommonInput, *tail: str, api: str = "api") -> list[str]:
    """Path segments below a repository for the given REST API family."""
    return ["rest", api, "latest", "projects", request.project_key, "repos", request.repo_slug, *tail]


def _query(*entries: tuple[str, Any, Any]) -> dict[str, list[str]]:
    """Build query parameters from ``(key, value, default)`` entries."""
    params: dict[str, list[str]] = {}
    for key, value, default in entries:
        set_query_param(params, key, value, default)
    return params