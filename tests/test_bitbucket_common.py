import pytest

from atlassian_dc.bitbucket.common import CommonInput, PaginationInput, _query, _repo_path


def test_common_input_holds_values():
    request = CommonInput(project_key="PRJ", repo_slug="repo")
    assert (request.project_key, request.repo_slug) == ("PRJ", "repo")


def test_pagination_defaults_are_zero():
    page = PaginationInput()
    assert (page.start, page.limit) == (0, 0)


@pytest.mark.parametrize(
    "args, kwargs",
    [(("PRJ", "repo"), {}), ((), {"project_key": "PRJ"})],
)
def test_common_input_rejects_bad_construction(args, kwargs):
    with pytest.raises(TypeError):
        CommonInput(*args, **kwargs)


@pytest.mark.parametrize(
    "tail, api, expected",
    [
        ((), "api", ["rest", "api", "latest", "projects", "PRJ", "repos", "repo"]),
        (("tags", "v1"), "api", ["rest", "api", "latest", "projects", "PRJ", "repos", "repo", "tags", "v1"]),
        (("x",), "branch-utils", ["rest", "branch-utils", "latest", "projects", "PRJ", "repos", "repo", "x"]),
    ],
)
def test_repo_path(tail, api, expected):
    assert _repo_path(CommonInput(project_key="PRJ", repo_slug="repo"), *tail, api=api) == expected


def test_query_skips_defaults():
    params = _query(("name", "core", ""), ("empty", "", ""), ("limit", 10, 0), ("start", 0, 0), ("flag", True, False))
    assert params == {"name": ["core"], "limit": ["10"], "flag": ["true"]}


def test_query_without_entries_is_empty():
    assert _query() == {}