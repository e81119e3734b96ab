"""Bitbucket pull request operations."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional

from atlassian_dc.bitbucket.common import CommonInput, PaginationInput
from atlassian_dc.transport import set_query_param, set_required_path_query_param


@dataclass(kw_only=True)
class GetPullRequestsInput(CommonInput, PaginationInput):
    """Filters for listing a repository's pull requests."""

    state: str = ""
    with_attributes: bool = False
    at: str = ""
    with_properties: bool = False
    draft: str = ""
    filter_text: str = ""
    order: str = ""
    direction: str = ""


@dataclass(kw_only=True)
class GetPullRequestInput(CommonInput):
    """Names one pull request."""

    pull_request_id: int


@dataclass(kw_only=True)
class GetPullRequestActivitiesInput(CommonInput, PaginationInput):
    """Filters for a pull request's activity stream."""

    pull_request_id: int
    from_type: str = ""
    from_id: str = ""


@dataclass(kw_only=True)
class GetPullRequestChangesInput(CommonInput, PaginationInput):
    """Selects the changes of a pull request."""

    pull_request_id: int


@dataclass(kw_only=True)
class GetPullRequestCommentsInput(CommonInput, PaginationInput):
    """Filters for listing a pull request's comments."""

    pull_request_id: int
    path: str = ""
    from_hash: str = ""
    anchor_state: str = ""
    to_hash: str = ""
    state: str = ""
    diff_type: str = ""
    diff_types: str = ""
    states: str = ""


@dataclass(kw_only=True)
class GetPullRequestCommitsInput(CommonInput, PaginationInput):
    """Selects the commits of a pull request."""

    pull_request_id: int


@dataclass(kw_only=True)
class GetPullRequestDiffInput(CommonInput):
    """Selects the diff of a pull request."""

    pull_request_id: int
    path: str = ""
    context: int = 0
    since: str = ""


@dataclass(kw_only=True)
class GetPullRequestMergeStatusInput(CommonInput):
    """Names the pull request whose merge status is wanted."""

    pull_request_id: int


@dataclass(kw_only=True)
class AddPullRequestCommentInput(CommonInput):
    """A comment to add to a pull request."""

    pull_request_id: int
    comment_text: str


@dataclass(kw_only=True)
class ApprovePullRequestInput(CommonInput):
    """Names the pull request to approve."""

    pull_request_id: int


@dataclass(kw_only=True)
class DeclinePullRequestInput(CommonInput):
    """Names the pull request to decline, with an optional comment."""

    pull_request_id: int
    version: int = 0
    comment: Optional[str] = None


@dataclass(kw_only=True)
class MergePullRequestInput(CommonInput):
    """Names the pull request to merge and how to merge it."""

    pull_request_id: int
    version: int
    auto_merge: Optional[bool] = None
    auto_subject: Optional[str] = None
    message: Optional[str] = None
    strategy_id: Optional[str] = None


@dataclass(kw_only=True)
class GetPullRequestParticipantsInput(CommonInput, PaginationInput):
    """Selects the participants of a pull request."""

    pull_request_id: int


@dataclass(kw_only=True)
class GetPullRequestStatusInput(CommonInput):
    """Selects the status of a pull request."""

    pull_request_id: int
    ref_revision: str = ""


@dataclass(kw_only=True)
class GetPullRequestSuggestionsInput:
    """Filters for pull request suggestions."""

    changes_since: str = ""
    limit: int = 0


@dataclass(kw_only=True)
class GetPullRequestJiraIssuesInput(CommonInput):
    """Names the pull request whose linked Jira issues are wanted."""

    pull_request_id: int


@dataclass(kw_only=True)
class GetPullRequestsForUserInput(PaginationInput):
    """Filters for the current user's pull request dashboard."""

    closed_since: str = ""
    role: str = ""
    participant_status: str = ""
    state: str = ""
    user: str = ""
    order: str = ""


@dataclass(kw_only=True)
class GetPullRequestCommentInput(CommonInput):
    """Names one comment on a pull request."""

    pull_request_id: int
    comment_id: str


def _drop_missing(fields: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None}


@dataclass(kw_only=True)
class MergePullRequestOptions:
    """Body of a merge request; unset options are left out."""

    version: Optional[int] = None
    auto_merge: Optional[bool] = None
    auto_subject: Optional[str] = None
    message: Optional[str] = None
    strategy_id: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON object sent to the server."""
        return _drop_missing(
            {
                "version": self.version,
                "autoMerge": self.auto_merge,
                "autoSubject": self.auto_subject,
                "message": self.message,
                "strategyId": self.strategy_id,
            }
        )


@dataclass(kw_only=True)
class DeclinePullRequestOptions:
    """Body of a decline request; an unset comment is left out."""

    comment: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON object sent to the server."""
        return _drop_missing({"comment": self.comment})


def _encode(payload: dict[str, Any]) -> bytes:
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _pr_path(request: CommonInput, pull_request_id: int, *tail: str) -> list[str]:
    return [
        "rest", "api", "latest", "projects", request.project_key,
        "repos", request.repo_slug, "pull-requests", str(pull_request_id), *tail,
    ]


class PullRequestsMixin:
    """Pull request endpoints; needs ``execute_request`` from the client."""

    def get_pull_request(self, request: GetPullRequestInput) -> Any:
        """Fetch one pull request."""
        return self.execute_request("GET", _pr_path(request, request.pull_request_id), params=None)

    def get_pull_request_activities(self, request: GetPullRequestActivitiesInput) -> Any:
        """List a pull request's activities."""
        params: dict[str, list[str]] = {}
        set_query_param(params, "fromType", request.from_type, "")
        set_query_param(params, "fromId", request.from_id, "")
        set_query_param(params, "start", request.start, 0)
        set_query_param(params, "limit", request.limit, 0)
        return self.execute_request(
            "GET", _pr_path(request, request.pull_request_id, "activities"), params=params
        )

    def add_pull_request_comment(self, request: AddPullRequestCommentInput) -> Any:
        """Add a comment to a pull request."""
        return self.execute_request(
            "POST",
            _pr_path(request, request.pull_request_id, "comments"),
            params=None,
            body=_encode({"text": request.comment_text}),
        )

    def merge_pull_request(self, request: MergePullRequestInput) -> Any:
        """Merge a pull request; a zero version is not sent."""
        options = MergePullRequestOptions(
            version=request.version or None,
            auto_merge=request.auto_merge,
            auto_subject=request.auto_subject,
            message=request.message,
            strategy_id=request.strategy_id,
        )
        return self.execute_request(
            "POST",
            _pr_path(request, request.pull_request_id, "merge"),
            params=None,
            body=_encode(options.to_payload()),
        )

    def decline_pull_request(self, request: DeclinePullRequestInput) -> Any:
        """Decline a pull request; a non-zero version goes in the query."""
        options = DeclinePullRequestOptions(comment=request.comment)
        params: dict[str, list[str]] = {}
        if request.version != 0:
            params["version"] = [str(request.version)]
        return self.execute_request(
            "POST",
            _pr_path(request, request.pull_request_id, "decline"),
            params=params,
            body=_encode(options.to_payload()),
        )

    def get_pull_requests(self, request: GetPullRequestsInput) -> Any:
        """List a repository's pull requests.

        ``withAttributes`` and ``withProperties`` are always sent.
        """
        params: dict[str, list[str]] = {}
        set_query_param(params, "state", request.state, "")
        set_query_param(params, "withAttributes", _bool_text(request.with_attributes), "")
        set_query_param(params, "at", request.at, "")
        set_query_param(params, "withProperties", _bool_text(request.with_properties), "")
        set_query_param(params, "draft", request.draft, "")
        set_query_param(params, "filterText", request.filter_text, "")
        set_query_param(params, "order", request.order, "")
        set_query_param(params, "direction", request.direction, "")
        set_query_param(params, "limit", request.limit, 0)
        set_query_param(params, "start", request.start, 0)
        return self.execute_request(
            "GET",
            ["rest", "api", "latest", "projects", request.project_key, "repos", request.repo_slug, "pull-requests"],
            params=params,
        )

    def get_pull_request_suggestions(self, request: GetPullRequestSuggestionsInput) -> Any:
        """Fetch pull request suggestions for recent changes."""
        params: dict[str, list[str]] = {}
        set_query_param(params, "changesSince", request.changes_since, "")
        set_query_param(params, "limit", request.limit, 0)
        return self.execute_request(
            "GET", ["rest", "api", "latest", "dashboard", "pull-request-suggestions"], params=params
        )

    def get_pull_request_jira_issues(self, request: GetPullRequestJiraIssuesInput) -> Any:
        """List the Jira issues linked to a pull request."""
        return self.execute_request(
            "GET",
            [
                "rest", "jira", "latest", "projects", request.project_key,
                "repos", request.repo_slug, "pull-requests", str(request.pull_request_id), "issues",
            ],
            params=None,
        )

    def get_pull_requests_for_user(self, request: GetPullRequestsForUserInput) -> Any:
        """List pull requests from the user's dashboard."""
        params: dict[str, list[str]] = {}
        set_query_param(params, "closedSince", request.closed_since, "")
        set_query_param(params, "role", request.role, "")
        set_query_param(params, "participantStatus", request.participant_status, "")
        set_query_param(params, "state", request.state, "")
        set_query_param(params, "user", request.user, "")
        set_query_param(params, "order", request.order, "")
        set_query_param(params, "start", request.start, 0)
        set_query_param(params, "limit", request.limit, 0)
        return self.execute_request(
            "GET", ["rest", "api", "latest", "dashboard", "pull-requests"], params=params
        )

    def get_pull_request_comment(self, request: GetPullRequestCommentInput) -> Any:
        """Fetch one comment on a pull request."""
        return self.execute_request(
            "GET",
            _pr_path(request, request.pull_request_id, "comments", request.comment_id),
            params=None,
        )

    def get_pull_request_comments(self, request: GetPullRequestCommentsInput) -> Any:
        """List a pull request's comments; ``path`` is always sent."""
        params: dict[str, list[str]] = {}
        set_required_path_query_param(params, request.path)
        set_query_param(params, "fromHash", request.from_hash, "")
        set_query_param(params, "anchorState", request.anchor_state, "")
        set_query_param(params, "toHash", request.to_hash, "")
        set_query_param(params, "state", request.state, "")
        set_query_param(params, "diffType", request.diff_type, "")
        set_query_param(params, "diffTypes", request.diff_types, "")
        set_query_param(params, "states", request.states, "")
        set_query_param(params, "limit", request.limit, 0)
        set_query_param(params, "start", request.start, 0)
        return self.execute_request(
            "GET", _pr_path(request, request.pull_request_id, "comments"), params=params
        )