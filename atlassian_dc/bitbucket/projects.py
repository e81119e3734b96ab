"""Bitbucket project and task operations."""

from dataclasses import dataclass
from typing import Any

from atlassian_dc.bitbucket.common import CommonInput, PaginationInput
from atlassian_dc.transport import set_query_param


@dataclass(kw_only=True)
class GetProjectsInput(PaginationInput):
    """Filters for listing projects."""

    name: str = ""
    permission: str = ""


@dataclass(kw_only=True)
class GetProjectInput:
    """Names one project by key."""

    project_key: str


@dataclass(kw_only=True)
class GetProjectPrimaryEnhancedEntityLinkInput:
    """Names the project whose primary Jira entity link is wanted."""

    project_key: str


@dataclass(kw_only=True)
class GetProjectTasksInput(PaginationInput):
    """Selects the tasks of a project."""

    project_key: str
    markup: str = ""


@dataclass(kw_only=True)
class GetRepositoryTasksInput(CommonInput, PaginationInput):
    """Selects the tasks of a repository."""

    markup: str = ""


@dataclass(kw_only=True)
class GetProjectAvatarInput:
    """Names the project whose avatar is wanted."""

    project_key: str


@dataclass(kw_only=True)
class GetProjectBranchModelInput(CommonInput):
    """Names the repository whose branch model is wanted."""


@dataclass(kw_only=True)
class GetProjectBranchModelSettingsInput(CommonInput):
    """Names the repository whose branch model settings are wanted."""


@dataclass(kw_only=True)
class GetProjectBranchRestrictionsInput(CommonInput, PaginationInput):
    """Selects the branch restrictions of a repository."""


@dataclass(kw_only=True)
class GetProjectBranchingModelInput(CommonInput):
    """Names the repository whose branching model is wanted."""


@dataclass(kw_only=True)
class GetProjectCommitsInput(CommonInput, PaginationInput):
    """Filters for listing commits in a project repository."""

    until: str = ""
    since: str = ""
    path: str = ""
    merges: str = ""


@dataclass(kw_only=True)
class GetProjectGroupsInput(PaginationInput):
    """Filters for listing the groups of a project."""

    project_key: str
    filter: str = ""


@dataclass(kw_only=True)
class GetProjectPermissionsInput(PaginationInput):
    """Filters for listing the permissions of a project."""

    project_key: str
    filter: str = ""


@dataclass(kw_only=True)
class GetProjectRepoHookInput(CommonInput):
    """Names the repository whose hook is wanted."""


@dataclass(kw_only=True)
class GetProjectRepoHooksInput(CommonInput, PaginationInput):
    """Selects the hooks of a repository."""


@dataclass(kw_only=True)
class GetProjectRepoSettingsInput(CommonInput):
    """Names the repository whose settings are wanted."""


@dataclass(kw_only=True)
class GetProjectRepositoryInput(CommonInput):
    """Names one repository of a project."""


@dataclass(kw_only=True)
class GetProjectRepositoryAvatarInput(CommonInput):
    """Names the repository whose avatar is wanted."""


@dataclass(kw_only=True)
class GetProjectRepositoryBranchesInput(CommonInput, PaginationInput):
    """Filters for listing a project repository's branches."""

    base: str = ""
    details: bool = False


@dataclass(kw_only=True)
class GetProjectRepositoryBranchInput(CommonInput):
    """Names one branch of a project repository."""

    branch_name: str


@dataclass(kw_only=True)
class GetProjectRepositoryCommitsInput(CommonInput):
    """Filters for listing a project repository's commits."""

    until: str = ""
    since: str = ""
    path: str = ""
    start: int = 0
    limit: int = 0
    merges: str = ""


@dataclass(kw_only=True)
class GetProjectRepositoryTagsInput(CommonInput, PaginationInput):
    """Filters for listing a project repository's tags."""

    name: str = ""


@dataclass(kw_only=True)
class GetProjectRepositoryTagInput(CommonInput):
    """Names one tag of a project repository."""

    tag_name: str


@dataclass(kw_only=True)
class GetProjectRepositoryUsersInput(CommonInput, PaginationInput):
    """Filters for listing a project repository's users."""

    filter: str = ""


@dataclass(kw_only=True)
class GetProjectSettingsInput:
    """Names the project whose settings are wanted."""

    project_key: str


@dataclass(kw_only=True)
class GetProjectUsersInput(PaginationInput):
    """Filters for listing the users of a project."""

    project_key: str
    filter: str = ""


class ProjectsMixin:
    """Project endpoints; needs ``execute_request`` from the client."""

    def get_projects(self, request: GetProjectsInput) -> Any:
        """List projects, optionally filtered by name and permission."""
        params: dict[str, list[str]] = {}
        set_query_param(params, "limit", request.limit, 0)
        set_query_param(params, "start", request.start, 0)
        set_query_param(params, "name", request.name, "")
        set_query_param(params, "permission", request.permission, "")
        return self.execute_request("GET", ["rest", "api", "latest", "projects"], params=params)

    def get_project(self, request: GetProjectInput) -> Any:
        """Fetch one project by key."""
        return self.execute_request(
            "GET", ["rest", "api", "latest", "projects", request.project_key], params=None
        )

    def get_project_primary_enhanced_entity_link(
        self, request: GetProjectPrimaryEnhancedEntityLinkInput
    ) -> Any:
        """Fetch the project's primary enhanced Jira entity link."""
        return self.execute_request(
            "GET",
            ["rest", "jira", "latest", "projects", request.project_key, "primary-enhanced-entitylink"],
            params=None,
        )

    def get_project_tasks(self, request: GetProjectTasksInput) -> Any:
        """List the tasks of a project."""
        params: dict[str, list[str]] = {}
        set_query_param(params, "markup", request.markup, "")
        set_query_param(params, "limit", request.limit, 0)
        set_query_param(params, "start", request.start, 0)
        return self.execute_request(
            "GET",
            ["rest", "default-tasks", "latest", "projects", request.project_key, "tasks"],
            params=params,
        )

    def get_repository_tasks(self, request: GetRepositoryTasksInput) -> Any:
        """List the tasks of a repository."""
        params: dict[str, list[str]] = {}
        set_query_param(params, "markup", request.markup, "")
        set_query_param(params, "limit", request.limit, 0)
        set_query_param(params, "start", request.start, 0)
        return self.execute_request(
            "GET",
            [
                "rest", "default-tasks", "latest", "projects", request.project_key,
                "repos", request.repo_slug, "tasks",
            ],
            params=params,
        )