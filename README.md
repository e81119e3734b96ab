# atlassian-dc

Request types and an HTTP transport for the REST API of Bitbucket Data
Center. Only the standard library is used. Requests go out over `urllib`
with a bearer token, and a request is retried when the failure is transient.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Transport

`atlassian_dc.transport` holds the parts that every service call uses:

- `ServiceConfig(url, token)`: the server's base URL and a personal access
  token.
- `ApiClient(config, service, timeout=30.0)`: sends requests to one service.
  `execute_request(method, path_segments, params=None, body=None,
  response="json")` builds the URL, adds `Authorization: Bearer <token>`
  when a token is set, and adds `Content-Type: application/json` when there
  is a body. `response` controls how the reply is read:
  - `"json"` decodes it and gives `None` for an empty body.
  - `"text"` gives a string.
  - `"bytes"` gives the raw content.
  - `None` discards the reply.
- `build_url(base_url, path_segments, params)`: escapes each path segment and
  splits segments that contain `/`. It joins the segments onto the base URL
  and appends the query with its keys sorted. An empty base URL raises
  `ValueError`.
- `set_query_param(params, key, value, default)`: sets a query parameter
  unless the value is `None` or equals the default. Booleans are sent as
  `true`/`false`, and lists as repeated values. Empty lists are not sent.
- `set_required_path_query_param(params, path)`: always sets `path`, even
  when it is empty.

Responses with status 429, 500, 502, 503 or 504, and connection failures, are
retried up to three times. The wait starts at one second and doubles after
each retry. Other error statuses raise at once.

## Errors

When a request fails, `ApiError` is raised. Its attributes are `service`,
`status` (the HTTP status, or `None` when the server did not answer) and
`body` (the response text). `ApiError` is also raised when a URL cannot be
built or a JSON reply cannot be decoded.

## Bitbucket operations

The modules under `atlassian_dc.bitbucket` each define request dataclasses
and a mixin class whose methods call `self.execute_request`:

| Module | Mixin | Methods |
| --- | --- | --- |
| `branches` | `BranchesMixin` | `get_branches`, `get_default_branch`, `get_branch` |
| `tags` | `TagsMixin` | `get_tags`, `get_tag` |
| `users` | `UsersMixin` | `get_current_user`, `get_user`, `get_users` |
| `attachments` | `AttachmentsMixin` | `get_attachment`, `get_attachment_metadata`, `delete_attachment`, `create_attachment` |
| `commits` | `CommitsMixin` | `get_commits`, `get_commit`, `get_commit_changes`, `get_commit_diff_stats_summary`, `get_diff_between_commits`, `get_diff_between_revisions`, `get_commit_comment`, `get_commit_comments`, `get_jira_issue_commits`, `get_diff_between_revisions_for_path` |
| `pullrequests` | `PullRequestsMixin` | `get_pull_request`, `get_pull_requests`, `get_pull_request_activities`, `add_pull_request_comment`, `merge_pull_request`, `decline_pull_request`, `get_pull_request_suggestions`, `get_pull_request_jira_issues`, `get_pull_requests_for_user`, `get_pull_request_comment`, `get_pull_request_comments` |
| `projects` | `ProjectsMixin` | `get_projects`, `get_project`, `get_project_primary_enhanced_entity_link`, `get_project_tasks`, `get_repository_tasks` |

The request dataclasses take keyword arguments only. Many of them have the
fields of `CommonInput` (`project_key`, `repo_slug`) and `PaginationInput`
(`start`, `limit`), both from `atlassian_dc.bitbucket.common`. A query
parameter left at its default value (an empty string, zero or `False`) is not
sent. There are some exceptions:

- `get_pull_requests` always sends `withAttributes` and `withProperties`.
- `get_pull_request_comments` always sends `path`.
- `merge_pull_request` leaves a zero `version` out of the body.
- `decline_pull_request` puts a non-zero `version` in the query.

The package provides no ready-made client class. To get one, combine the
mixins you need with `ApiClient`:

```python
from atlassian_dc.transport import ApiClient, ServiceConfig
from atlassian_dc.bitbucket.branches import BranchesMixin, GetBranchesInput
from atlassian_dc.bitbucket.pullrequests import PullRequestsMixin, GetPullRequestInput


class Bitbucket(BranchesMixin, PullRequestsMixin, ApiClient):
    pass


client = Bitbucket(ServiceConfig(url="https://bitbucket.example.com", token="token"), "bitbucket")

branches = client.get_branches(
    GetBranchesInput(project_key="PRJ", repo_slug="repo", filter_text="feature", limit=25)
)
pull_request = client.get_pull_request(
    GetPullRequestInput(project_key="PRJ", repo_slug="repo", pull_request_id=42)
)
```

## What the package does not do

- It has no operations for repositories, files, forks or readmes.
- It has no Confluence operations. The `atlassian_dc.confluence` sub-package
  is empty.
- It has no command-line program and no server.