"""Bitbucket tag operations."""

from dataclasses import dataclass
from typing import Any

from atlassian_dc.bitbucket.common import CommonInput, PaginationInput, _query, _repo_path


@dataclass(kw_only=True)
class GetTagsInput(CommonInput, PaginationInput):
    """Filters for listing tags."""

    filter_text: str = ""
    order_by: str = ""


@dataclass(kw_only=True)
class GetTagInput(CommonInput):
    """Names one tag."""

    name: str


class TagsMixin:
    """Tag endpoints; needs ``execute_request`` from the client."""

    def get_tags(self, request: GetTagsInput) -> Any:
        """List tags with optional filtering."""
        params = _query(
            ("filterText", request.filter_text, ""),
            ("orderBy", request.order_by, ""),
            ("limit", request.limit, 0),
            ("start", request.start, 0),
        )
        return self.execute_request("GET", _repo_path(request, "tags"), params=params)

    def get_tag(self, request: GetTagInput) -> Any:
        """Fetch one tag by name."""
        return self.execute_request("GET", _repo_path(request, "tags", request.name), params=None)