import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from atlassian_dc.bitbucket.commits import (
    CommitsMixin,
    GetCommitChangesInput,
    GetCommitCommentInput,
    GetCommitCommentsInput,
    GetCommitDiffStatsSummaryInput,
    GetCommitInput,
    GetCommitsInput,
    GetDiffBetweenCommitsInput,
    GetDiffBetweenRevisionsForPathInput,
    GetDiffBetweenRevisionsInput,
    GetJiraIssueCommitsInput,
)
from atlassian_dc.transport import ApiClient, ServiceConfig, build_url

REPO = ["rest", "api", "latest", "projects", "PRJ", "repos", "repo"]


class Recorder(CommitsMixin):
    def __init__(self, reply=None):
        self.calls = []
        self.reply = reply

    def execute_request(self, method, path_segments, params=None, body=None, response="json"):
        self.calls.append(
            {
                "method": method,
                "path": list(path_segments),
                "params": params,
                "body": body,
                "response": response,
            }
        )
        return self.reply


def test_get_commits_defaults_send_no_params():
    client = Recorder(reply={"values": []})
    result = client.get_commits(GetCommitsInput(project_key="PRJ", repo_slug="repo"))
    assert result == {"values": []}
    call = client.calls[0]
    assert call["method"] == "GET"
    assert call["path"] == REPO + ["commits"]
    assert call["params"] == {}


def test_get_commits_all_filters():
    client = Recorder()
    client.get_commits(
        GetCommitsInput(
            project_key="PRJ",
            repo_slug="repo",
            until="main",
            since="abc",
            path="src",
            merges="exclude",
            follow_renames=True,
            ignore_missing=True,
            with_counts=True,
            start=5,
            limit=10,
        )
    )
    assert client.calls[0]["params"] == {
        "until": ["main"],
        "since": ["abc"],
        "path": ["src"],
        "limit": ["10"],
        "start": ["5"],
        "merges": ["exclude"],
        "followRenames": ["true"],
        "ignoreMissing": ["true"],
        "withCounts": ["true"],
    }


def test_get_commit_with_path():
    client = Recorder(reply={"id": "abc"})
    assert client.get_commit(
        GetCommitInput(project_key="PRJ", repo_slug="repo", commit_id="abc", path="a.txt")
    ) == {"id": "abc"}
    call = client.calls[0]
    assert call["path"] == REPO + ["commits", "abc"]
    assert call["params"] == {"path": ["a.txt"]}


def test_get_commit_changes():
    client = Recorder()
    client.get_commit_changes(
        GetCommitChangesInput(
            project_key="PRJ", repo_slug="repo", commit_id="abc", with_comments="true", limit=3
        )
    )
    call = client.calls[0]
    assert call["path"] == REPO + ["commits", "abc", "changes"]
    assert call["params"] == {"limit": ["3"], "withComments": ["true"]}


def test_get_commit_diff_stats_summary():
    client = Recorder()
    client.get_commit_diff_stats_summary(
        GetCommitDiffStatsSummaryInput(
            project_key="PRJ", repo_slug="repo", commit_id="abc", path="src/a.py", whitespace="ignore-all"
        )
    )
    call = client.calls[0]
    assert call["path"] == REPO + ["commits", "abc", "diff-stats-summary", "src/a.py"]
    assert call["params"] == {"whitespace": ["ignore-all"]}


def test_diff_between_commits_without_path():
    client = Recorder(reply="diff text")
    result = client.get_diff_between_commits(
        GetDiffBetweenCommitsInput(project_key="PRJ", repo_slug="repo", from_ref="a", to_ref="b", context_lines=2)
    )
    assert result == "diff text"
    call = client.calls[0]
    assert call["path"] == REPO + ["compare", "diff"]
    assert call["params"] == {"contextLines": ["2"], "from": ["a"], "to": ["b"]}
    assert call["response"] == "text"


def test_diff_between_commits_appends_path_to_diff_segment():
    client = Recorder(reply="")
    client.get_diff_between_commits(
        GetDiffBetweenCommitsInput(project_key="PRJ", repo_slug="repo", path="/src/a.py")
    )
    segments = client.calls[0]["path"]
    assert segments[-1] == "diff/src/a.py"
    url = build_url("https://bitbucket.example.com", segments)
    assert url.endswith("/compare/diff/src/a.py")


def test_diff_between_revisions():
    client = Recorder(reply="x")
    client.get_diff_between_revisions(
        GetDiffBetweenRevisionsInput(
            project_key="PRJ", repo_slug="repo", commit_id="abc", path="f.c", filter="foo", auto_src_path="true"
        )
    )
    call = client.calls[0]
    assert call["path"] == REPO + ["commits", "abc", "diff", "f.c"]
    assert call["params"] == {"filter": ["foo"], "autoSrcPath": ["true"]}
    assert call["response"] == "text"


def test_get_commit_comment_uses_string_id():
    client = Recorder()
    client.get_commit_comment(
        GetCommitCommentInput(project_key="PRJ", repo_slug="repo", commit_id="abc", comment_id=42)
    )
    call = client.calls[0]
    assert call["path"] == REPO + ["commits", "abc", "comments", "42"]
    assert call["params"] is None


def test_get_commit_comments():
    client = Recorder()
    client.get_commit_comments(
        GetCommitCommentsInput(project_key="PRJ", repo_slug="repo", commit_id="abc", path="f.c", since="s1")
    )
    call = client.calls[0]
    assert call["path"] == REPO + ["commits", "abc", "comments"]
    assert call["params"] == {"path": ["f.c"], "since": ["s1"]}


def test_get_jira_issue_commits():
    client = Recorder()
    client.get_jira_issue_commits(GetJiraIssueCommitsInput(issue_key="ABC-1", max_changes=7))
    call = client.calls[0]
    assert call["path"] == ["rest", "jira", "latest", "issues", "ABC-1", "commits"]
    assert call["params"] == {"maxChanges": ["7"]}


def test_diff_between_revisions_for_path():
    client = Recorder()
    client.get_diff_between_revisions_for_path(
        GetDiffBetweenRevisionsForPathInput(project_key="PRJ", repo_slug="repo", path="f.c", since="a", until="b")
    )
    call = client.calls[0]
    assert call["path"] == REPO + ["diff", "f.c"]
    assert call["params"] == {"since": ["a"], "until": ["b"]}
    assert call["response"] == "text"


def test_required_fields_are_enforced():
    with pytest.raises(TypeError):
        GetCommitInput(project_key="PRJ", repo_slug="repo")
    with pytest.raises(TypeError):
        GetJiraIssueCommitsInput()


class _Handler(BaseHTTPRequestHandler):
    seen = []

    def do_GET(self):
        type(self).seen.append((self.path, self.headers.get("Authorization")))
        payload = b"--- a\n+++ b\n"
        self.send_response(200)
        self.send_header("Content-Type", "text/plain")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, *args):
        pass


class _LiveClient(CommitsMixin, ApiClient):
    pass


def test_diff_over_http_returns_text():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        base = f"http://127.0.0.1:{server.server_address[1]}"
        client = _LiveClient(ServiceConfig(url=base, token="token"), "bitbucket", 5.0)
        text = client.get_diff_between_revisions_for_path(
            GetDiffBetweenRevisionsForPathInput(project_key="PRJ", repo_slug="repo", path="f.c", since="a")
        )
    finally:
        server.shutdown()
        server.server_close()
    assert text == "--- a\n+++ b\n"
    path, auth = _Handler.seen[-1]
    assert path == "/rest/api/latest/projects/PRJ/repos/repo/diff/f.c?since=a"
    assert auth == "Bearer token"