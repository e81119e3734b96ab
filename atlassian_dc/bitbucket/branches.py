"""Bitbucket branch operations."""

from dataclasses import dataclass
from typing import Any

from atlassian_dc.bitbucket.common import CommonInput, PaginationInput, _query, _repo_path


@dataclass(kw_only=True)
class GetBranchesInput(CommonInput, PaginationInput):
    """Filters for listing branches."""

    base: str = ""
    details: bool = False
    filter_text: str = ""
    order_by: str = ""
    context: str = ""
    boost_matches: bool = False


@dataclass(kw_only=True)
class GetBranchInput(CommonInput, PaginationInput):
    """Looks up branches containing a commit."""

    commit_id: str


@dataclass(kw_only=True)
class GetDefaultBranchInput(CommonInput):
    """Identifies the repository whose default branch is wanted."""


class BranchesMixin:
    """Branch endpoints; needs ``execute_request`` from the client."""

    def get_branches(self, request: GetBranchesInput) -> Any:
        """List branches with optional filtering."""
        params = _query(
            ("base", request.base, ""),
            ("details", request.details, False),
            ("filterText", request.filter_text, ""),
            ("orderBy", request.order_by, ""),
            ("context", request.context, ""),
            ("boostMatches", request.boost_matches, False),
            ("limit", request.limit, 0),
            ("start", request.start, 0),
        )
        return self.execute_request("GET", _repo_path(request, "branches"), params=params)

    def get_default_branch(self, request: GetDefaultBranchInput) -> Any:
        """Fetch the repository's default branch."""
        return self.execute_request("GET", _repo_path(request, "default-branch"), params=None)

    def get_branch(self, request: GetBranchInput) -> Any:
        """Fetch branch information for a commit."""
        params = _query(("start", request.start, 0), ("limit", request.limit, 0))
        return self.execute_request(
            "GET",
            _repo_path(request, "branches", "info", request.commit_id, api="branch-utils"),
            params=params,
        )