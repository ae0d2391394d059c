"""HTTP client for the collaboration service's revision history."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

import httpx
from pydantic import ValidationError

from collab_history.history.models import RevisionData, RevisionsPage
from collab_history.history.protocols import RevisionsServiceError
from collab_history.history.session import SessionStatus


logger = logging.getLogger(__name__)

# HTTP status codes that describe the session rather than a failed request
_STATUS_FOR_HTTP_CODE: dict[int, SessionStatus] = {
    401: SessionStatus.LOGGED_OUT,
    403: SessionStatus.NO_SEAT,
    404: SessionStatus.COLLAB_DISABLED,
    503: SessionStatus.MAINTENANCE,
}


def _first(item: dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if item.get(key) is not None:
            return item[key]
    return default


def _parse_timestamp(raw: Any) -> datetime:
    if isinstance(raw, int | float):
        return datetime.fromtimestamp(raw, UTC)
    timestamp = datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    return timestamp


def parse_revision(item: dict[str, Any]) -> RevisionData:
    """Build a RevisionData from one revision payload (snake_case or camelCase).

    Raises:
        ValueError: If the payload is missing required fields.
    """
    raw_timestamp = _first(item, "timestamp", "timeStamp", "created_at", "createdAt")
    if raw_timestamp is None:
        raise ValueError(f"Revision payload has no timestamp: {item!r}")

    return RevisionData(
        index=_first(item, "index", default=0),
        timestamp=_parse_timestamp(raw_timestamp),
        is_current=bool(_first(item, "is_current", "isCurrent", "current", default=False)),
        is_obtained=bool(
            _first(item, "is_obtained", "isObtained", "obtained", default=False)
        ),
        revision_id=str(_first(item, "revision_id", "revisionId", "id", default="")),
        author_name=_first(item, "author_name", "authorName", "author", default=""),
        comment=_first(item, "comment", "message", default=""),
        build_available=bool(
            _first(item, "build_available", "buildAvailable", default=False)
        ),
    )


def parse_revisions_page(data: dict[str, Any] | list[Any]) -> RevisionsPage:
    """Build a RevisionsPage from a revisions response.

    Accepts `{"revisions": [...]}`, `{"results": [...]}` or a bare list.
    """
    if isinstance(data, list):
        raw_items: list[dict[str, Any]] = data
        meta: dict[str, Any] = {}
    else:
        raw_items = list(_first(data, "revisions", "results", "items", default=[]))
        meta = data

    items = [parse_revision(item) for item in raw_items]
    total = _first(meta, "total", "total_revisions", "totalRevisions", default=len(items))
    return RevisionsPage(
        items=items,
        tip=_first(meta, "tip", "tip_revision", "tipRevision"),
        total_revisions=total,
    )


class CollabRevisionsClient:
    """Revisions service backed by the collaboration REST API."""

    def __init__(
        self,
        server_url: str,
        api_key: str,
        project_id: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.server_url = server_url.rstrip("/")
        self.api_key = api_key
        self.project_id = project_id
        self._transport = transport
        self._headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.server_url,
            headers=self._headers,
            timeout=httpx.Timeout(connect=10.0, read=20.0, write=10.0, pool=10.0),
            transport=self._transport,
        )

    @property
    def _project_path(self) -> str:
        return f"/api/projects/{self.project_id}"

    async def get_revisions(self, page_index: int, page_size: int) -> RevisionsPage:
        path = f"{self._project_path}/revisions"
        params = {"page": page_index, "page_size": page_size}
        async with self._client() as client:
            try:
                response = await client.get(path, params=params)
                response.raise_for_status()
                data = response.json()
            except (httpx.HTTPError, ValueError) as e:
                raise RevisionsServiceError(
                    f"Request to {path!r} failed: {e}"
                ) from e

        try:
            return parse_revisions_page(data)
        except (ValidationError, ValueError, TypeError) as e:
            raise RevisionsServiceError(f"Malformed revisions payload: {e}") from e

    async def get_session_status(self) -> SessionStatus:
        path = f"{self._project_path}/session"
        async with self._client() as client:
            try:
                response = await client.get(path)
            except httpx.TransportError as e:
                logger.info(f"Collaboration service unreachable: {e}")
                return SessionStatus.OFFLINE

        if response.status_code in _STATUS_FOR_HTTP_CODE:
            return _STATUS_FOR_HTTP_CODE[response.status_code]
        if response.is_error:
            logger.warning(f"Session check failed with HTTP {response.status_code}")
            return SessionStatus.ERROR

        try:
            return SessionStatus(response.json().get("status"))
        except (ValueError, AttributeError) as e:
            logger.warning(f"Unexpected session payload: {e}")
            return SessionStatus.ERROR
