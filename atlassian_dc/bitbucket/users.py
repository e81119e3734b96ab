"""Bitbucket user operations."""

from dataclasses import dataclass
from typing import Any, Optional

from atlassian_dc.bitbucket.common import CommonInput, PaginationInput
from atlassian_dc.transport import set_query_param


@dataclass(kw_only=True)
class GetUsersInput:
    """Filters for listing users."""

    filter: str = ""
    permission: str = ""
    group: str = ""
    permission_filters: Optional[dict[str, str]] = None


@dataclass(kw_only=True)
class GetUserInput:
    """Names one user by slug."""

    username: str


@dataclass(kw_only=True)
class GetUserProjectsInput(PaginationInput):
    """Filters for a user's projects."""

    username: str
    permission: str = ""


@dataclass(kw_only=True)
class GetUserRepositoriesInput(PaginationInput):
    """Filters for a user's repositories."""

    username: str
    project_key: str = ""
    permission: str = ""


@dataclass(kw_only=True)
class GetUserRepositoryInput(CommonInput):
    """Names one repository of a user."""

    username: str


class UsersMixin:
    """User endpoints; needs ``execute_request`` from the client."""

    def get_current_user(self) -> Any:
        """Fetch the authenticated user."""
        return self.execute_request("GET", ["rest", "api", "latest", "users"], params=None)

    def get_user(self, request: GetUserInput) -> Any:
        """Fetch one user by slug."""
        return self.execute_request("GET", ["rest", "api", "latest", "users", request.username], params=None)

    def get_users(self, request: GetUsersInput) -> Any:
        """List users; non-empty permission filters are passed through as-is."""
        params: dict[str, list[str]] = {}
        set_query_param(params, "filter", request.filter, "")
        set_query_param(params, "permission", request.permission, "")
        set_query_param(params, "group", request.group, "")
        for key, value in (request.permission_filters or {}).items():
            if key and value:
                params[key] = [value]
        return self.execute_request("GET", ["rest", "api", "latest", "users"], params=params)