"""HTTP transport shared by the Atlassian Data Center service clients."""

from __future__ import annotations

import json
import time
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Literal, Mapping, Optional, Sequence
from urllib.parse import quote, urlencode

QueryParams = dict[str, list[str]]
ResponseKind = Optional[Literal["json", "text", "bytes"]]

_RETRYABLE_STATUSES = frozenset({429, 500, 502, 503, 504})
_SEGMENT_SAFE = "~:@!$&'()*+,;="


@dataclass
class ServiceConfig:
    """Location of a service and the personal access token used against it."""

    url: str = ""
    token: str = ""


class ApiError(Exception):
    """Raised when a request to a service cannot be completed."""

    def __init__(
        self,
        service: str,
        message: str,
        status: Optional[int] = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.service = service
        self.status = status
        self.body = body


def set_query_param(params: QueryParams, key: str, value: Any, default: Any) -> None:
    """Set ``key`` in ``params`` unless ``value`` is missing or equals ``default``.

    Booleans become ``true``/``false``; sequences become repeated values.
    """
    if value is None:
        return
    if type(value) is type(default) and value == default:
        return
    if isinstance(value, bool):
        params[key] = ["true" if value else "false"]
    elif isinstance(value, (list, tuple)):
        if not value:
            return
        params[key] = [str(item) for item in value]
    else:
        params[key] = [str(value)]


def set_required_path_query_param(params: QueryParams, path: str) -> None:
    """Always set the ``path`` query parameter, even when it is empty."""
    params["path"] = [path]


def build_url(
    base_url: str,
    path_segments: Sequence[str],
    params: Optional[Mapping[str, Sequence[str]]] = None,
) -> str:
    """Join escaped path segments onto ``base_url`` and append the sorted query."""
    if not base_url:
        raise ValueError("base URL is empty")
    parts = [
        quote(piece, safe=_SEGMENT_SAFE)
        for segment in path_segments
        for piece in str(segment).split("/")
        if piece
    ]
    url = base_url.rstrip("/")
    if parts:
        url = f"{url}/{'/'.join(parts)}"
    if params:
        query = urlencode(
            [(key, value) for key in sorted(params) for value in params[key]]
        )
        if query:
            url = f"{url}?{query}"
    return url


class ApiClient:
    """Sends authenticated requests to one service, retrying transient failures."""

    max_retries = 3
    retry_delay = 1.0

    def __init__(self, config: ServiceConfig, service: str, timeout: float = 30.0) -> None:
        self.config = config
        self.service = service
        self.timeout = timeout

    def execute_request(
        self,
        method: str,
        path_segments: Sequence[str],
        params: Optional[Mapping[str, Sequence[str]]] = None,
        body: Optional[bytes] = None,
        response: ResponseKind = "json",
    ) -> Any:
        """Perform a request and decode the reply as ``response`` says.

        ``response`` is ``"json"``, ``"text"``, ``"bytes"`` or ``None`` to
        discard the body.
        """
        try:
            url = build_url(self.config.url, path_segments, params)
        except ValueError as exc:
            raise ApiError(self.service, f"failed to build request: {exc}") from exc

        headers = {"Accept": "application/json"}
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        if body is not None:
            headers["Content-Type"] = "application/json"

        payload = self._send(method.upper(), url, headers, body)
        return self._decode(payload, response)

    def _send(self, method: str, url: str, headers: dict[str, str], body: Optional[bytes]) -> bytes:
        error: Optional[ApiError] = None
        for attempt in range(self.max_retries + 1):
            request = urllib.request.Request(url, data=body, headers=headers, method=method)
            try:
                with urllib.request.urlopen(request, timeout=self.timeout) as reply:
                    return reply.read()
            except urllib.error.HTTPError as exc:
                text = exc.read().decode("utf-8", errors="replace")
                error = ApiError(
                    self.service,
                    f"{self.service} API request failed with status {exc.code}: {text}",
                    status=exc.code,
                    body=text,
                )
                if exc.code not in _RETRYABLE_STATUSES:
                    raise error from None
            except (urllib.error.URLError, OSError) as exc:
                reason = getattr(exc, "reason", exc)
                error = ApiError(self.service, f"{self.service} API request failed: {reason}")
            if attempt < self.max_retries:
                time.sleep(self.retry_delay * (2**attempt))
        assert error is not None
        raise error

    def _decode(self, payload: bytes, response: ResponseKind) -> Any:
        if response is None:
            return None
        if response == "bytes":
            return payload
        if response == "text":
            return payload.decode("utf-8", errors="replace")
        if not payload.strip():
            return None
        try:
            return json.loads(payload)
        except ValueError as exc:
            raise ApiError(self.service, f"failed to decode {self.service} response: {exc}") from exc