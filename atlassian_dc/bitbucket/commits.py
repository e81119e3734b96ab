"""Bitbucket commit, diff and commit comment operations."""

from dataclasses import dataclass
from typing import Any

from atlassian_dc.bitbucket.common import CommonInput, PaginationInput, _query, _repo_path


@dataclass(kw_only=True)
class GetCommitsInput(CommonInput, PaginationInput):
    """Filters for listing a repository's commits."""

    until: str = ""
    since: str = ""
    path: str = ""
    merges: str = ""
    follow_renames: bool = False
    ignore_missing: bool = False
    with_counts: bool = False


@dataclass(kw_only=True)
class GetCommitInput(CommonInput):
    """Names one commit, optionally narrowed to a file path."""

    commit_id: str
    path: str = ""


@dataclass(kw_only=True)
class GetCommitChangesInput(CommonInput, PaginationInput):
    """Selects the changes made by one commit."""

    commit_id: str
    with_comments: str = ""
    since: str = ""


@dataclass(kw_only=True)
class GetCommitDiffStatsSummaryInput(CommonInput):
    """Selects the diff statistics of a file in a commit."""

    commit_id: str
    path: str
    src_path: str = ""
    auto_src_path: str = ""
    whitespace: str = ""
    since: str = ""


@dataclass(kw_only=True)
class GetDiffBetweenCommitsInput(CommonInput):
    """Selects the diff between two commits or refs."""

    path: str = ""
    from_ref: str = ""
    to_ref: str = ""
    context_lines: int = 0
    src_path: str = ""
    whitespace: str = ""
    from_repo: str = ""


@dataclass(kw_only=True)
class GetDiffBetweenRevisionsInput(CommonInput):
    """Selects the diff of a file in one commit."""

    commit_id: str
    path: str
    context_lines: int = 0
    since: str = ""
    src_path: str = ""
    whitespace: str = ""
    filter: str = ""
    auto_src_path: str = ""
    with_comments: str = ""


@dataclass(kw_only=True)
class GetCommitCommentInput(CommonInput):
    """Names one comment on a commit."""

    commit_id: str
    comment_id: int


@dataclass(kw_only=True)
class GetCommitCommentsInput(CommonInput, PaginationInput):
    """Filters for listing the comments on a commit."""

    commit_id: str
    path: str = ""
    since: str = ""


@dataclass(kw_only=True)
class GetJiraIssueCommitsInput(PaginationInput):
    """Selects the commits linked to a Jira issue."""

    issue_key: str
    max_changes: int = 0


@dataclass(kw_only=True)
class GetDiffBetweenRevisionsForPathInput(CommonInput):
    """Selects the diff of a path between two revisions."""

    path: str
    context_lines: int = 0
    since: str = ""
    until: str = ""
    src_path: str = ""
    whitespace: str = ""


class CommitsMixin:
    """Commit endpoints; needs ``execute_request`` from the client."""

    def get_commits(self, request: GetCommitsInput) -> Any:
        """List commits with optional filtering."""
        params = _query(
            ("until", request.until, ""),
            ("since", request.since, ""),
            ("path", request.path, ""),
            ("limit", request.limit, 0),
            ("start", request.start, 0),
            ("merges", request.merges, ""),
            ("followRenames", request.follow_renames, False),
            ("ignoreMissing", request.ignore_missing, False),
            ("withCounts", request.with_counts, False),
        )
        return self.execute_request("GET", _repo_path(request, "commits"), params=params)

    def get_commit(self, request: GetCommitInput) -> Any:
        """Fetch one commit."""
        params = _query(("path", request.path, ""))
        return self.execute_request("GET", _repo_path(request, "commits", request.commit_id), params=params)

    def get_commit_changes(self, request: GetCommitChangesInput) -> Any:
        """List the changes made by a commit."""
        params = _query(
            ("limit", request.limit, 0),
            ("start", request.start, 0),
            ("withComments", request.with_comments, ""),
            ("since", request.since, ""),
        )
        return self.execute_request(
            "GET", _repo_path(request, "commits", request.commit_id, "changes"), params=params
        )

    def get_commit_diff_stats_summary(self, request: GetCommitDiffStatsSummaryInput) -> Any:
        """Fetch the diff statistics summary of a path in a commit."""
        params = _query(
            ("srcPath", request.src_path, ""),
            ("autoSrcPath", request.auto_src_path, ""),
            ("whitespace", request.whitespace, ""),
            ("since", request.since, ""),
        )
        return self.execute_request(
            "GET",
            _repo_path(request, "commits", request.commit_id, "diff-stats-summary", request.path),
            params=params,
        )

    def get_diff_between_commits(self, request: GetDiffBetweenCommitsInput) -> str:
        """Fetch the diff between two commits as text."""
        params = _query(
            ("contextLines", request.context_lines, 0),
            ("from", request.from_ref, ""),
            ("to", request.to_ref, ""),
            ("srcPath", request.src_path, ""),
            ("whitespace", request.whitespace, ""),
            ("fromRepo", request.from_repo, ""),
        )
        return self.execute_request(
            "GET", _repo_path(request, "compare", "diff" + request.path), params=params, response="text"
        )

    def get_diff_between_revisions(self, request: GetDiffBetweenRevisionsInput) -> str:
        """Fetch the diff of a path in a commit as text."""
        params = _query(
            ("contextLines", request.context_lines, 0),
            ("since", request.since, ""),
            ("srcPath", request.src_path, ""),
            ("whitespace", request.whitespace, ""),
            ("filter", request.filter, ""),
            ("autoSrcPath", request.auto_src_path, ""),
            ("withComments", request.with_comments, ""),
        )
        return self.execute_request(
            "GET",
            _repo_path(request, "commits", request.commit_id, "diff", request.path),
            params=params,
            response="text",
        )

    def get_commit_comment(self, request: GetCommitCommentInput) -> Any:
        """Fetch one comment on a commit."""
        return self.execute_request(
            "GET",
            _repo_path(request, "commits", request.commit_id, "comments", str(request.comment_id)),
            params=None,
        )

    def get_commit_comments(self, request: GetCommitCommentsInput) -> Any:
        """List the comments on a commit."""
        params = _query(
            ("limit", request.limit, 0),
            ("start", request.start, 0),
            ("path", request.path, ""),
            ("since", request.since, ""),
        )
        return self.execute_request(
            "GET", _repo_path(request, "commits", request.commit_id, "comments"), params=params
        )

    def get_jira_issue_commits(self, request: GetJiraIssueCommitsInput) -> Any:
        """List the commits linked to a Jira issue."""
        params = _query(
            ("limit", request.limit, 0),
            ("start", request.start, 0),
            ("maxChanges", request.max_changes, 0),
        )
        return self.execute_request(
            "GET", ["rest", "jira", "latest", "issues", request.issue_key, "commits"], params=params
        )

    def get_diff_between_revisions_for_path(self, request: GetDiffBetweenRevisionsForPathInput) -> str:
        """Fetch the diff of a path between revisions as text."""
        params = _query(
            ("contextLines", request.context_lines, 0),
            ("since", request.since, ""),
            ("until", request.until, ""),
            ("srcPath", request.src_path, ""),
            ("whitespace", request.whitespace, ""),
        )
        return self.execute_request(
            "GET", _repo_path(request, "diff", request.path), params=params, response="text"
        )