"""Bitbucket attachment operations."""

from dataclasses import dataclass
from typing import Any

from atlassian_dc.bitbucket.common import CommonInput, _query, _repo_path


@dataclass(kw_only=True)
class CreateAttachmentInput(CommonInput):
    """A file to attach to a pull request."""

    pull_request_id: int
    file_name: str
    file_attachment: bytes


@dataclass(kw_only=True)
class GetAttachmentInput(CommonInput):
    """Names one repository attachment."""

    attachment_id: str


@dataclass(kw_only=True)
class GetAttachmentMetadataInput(CommonInput):
    """Names the attachment whose metadata is wanted."""

    attachment_id: str


@dataclass(kw_only=True)
class DeleteAttachmentInput(CommonInput):
    """Names a pull request attachment to delete."""

    pull_request_id: int
    attachment_id: int


class AttachmentsMixin:
    """Attachment endpoints; needs ``execute_request`` from the client."""

    def get_attachment(self, request: GetAttachmentInput) -> bytes:
        """Download an attachment's raw content."""
        return self.execute_request(
            "GET", _repo_path(request, "attachments", request.attachment_id), params=None, response="bytes"
        )

    def get_attachment_metadata(self, request: GetAttachmentMetadataInput) -> Any:
        """Fetch an attachment's metadata."""
        return self.execute_request(
            "GET", _repo_path(request, "attachments", request.attachment_id, "metadata"), params=None
        )

    def delete_attachment(self, request: DeleteAttachmentInput) -> None:
        """Delete a pull request attachment."""
        path = _repo_path(
            request,
            "pull-requests", str(request.pull_request_id), "attachments", str(request.attachment_id),
            api="attachment",
        )
        self.execute_request("DELETE", path, params=None, response=None)

    def create_attachment(self, request: CreateAttachmentInput) -> Any:
        """Upload a file as a pull request attachment."""
        path = _repo_path(request, "pull-requests", str(request.pull_request_id), "attachments", api="attachment")
        return self.execute_request(
            "POST", path, params=_query(("filename", request.file_name, "")), body=request.file_attachment
        )