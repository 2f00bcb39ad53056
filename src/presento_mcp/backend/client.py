"""BackendClient -- async client for the Darbot Presento REST API.

Every call is a single attempt: no retry, no backoff, no caching.  Any
transport or HTTP failure surfaces as :class:`BackendError`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Literal
from urllib.parse import quote

import httpx

from presento_mcp.core.errors import BackendError

if TYPE_CHECKING:
    from presento_mcp.config.schema import PresentoConfig

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/v1/presentations/generate"
PRESENTATIONS_PATH = "/api/v1/presentations"

HttpMethod = Literal["GET", "POST"]


def _presentation_path(presentation_id: str, suffix: str = "") -> str:
    segment = quote(presentation_id, safe="")
    # "." and ".." would be collapsed as dot segments by URL normalization.
    if segment in (".", ".."):
        segment = segment.replace(".", "%2E")
    return f"{PRESENTATIONS_PATH}/{segment}{suffix}"


class BackendClient:
    """Client for the presentation-generation backend.

    Holds configuration and a connection pool only, so one instance can
    serve concurrent tool calls.

    Usage::

        async with BackendClient("http://localhost:8000") as client:
            data = await client.get_presentation("abc123")
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(
        cls,
        config: PresentoConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> BackendClient:
        base_url = config.backend.base_url or config.backend.default_base_url
        return cls(base_url, timeout=config.backend.timeout, transport=transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> BackendClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def call(
        self,
        path: str,
        method: HttpMethod = "GET",
        body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Issue one request and return the decoded JSON body.

        Raises:
            BackendError: On network failure, a non-2xx status, or a
                body that is not valid JSON.
        """
        url = f"{self._base_url}{path}"
        logger.debug("Backend request: %s %s", method, url)
        try:
            resp = await self._client.request(method, path, json=body, params=params)
        except httpx.RequestError as e:
            reason = str(e) or type(e).__name__
            logger.error("API request error for %s: %s", path, reason)
            msg = f"API request failed: {reason}"
            raise BackendError(msg) from e

        if not resp.is_success:
            logger.error(
                "API request error for %s: %s %s",
                path,
                resp.status_code,
                resp.reason_phrase,
            )
            msg = f"API request failed: {resp.status_code} {resp.reason_phrase}"
            raise BackendError(msg, status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            logger.error("API returned invalid JSON for %s", path)
            msg = f"API returned invalid JSON: {e}"
            raise BackendError(msg, status_code=resp.status_code) from e

    # -- Endpoints -------------------------------------------------------------

    async def generate(self, payload: dict[str, Any]) -> Any:
        return await self.call(GENERATE_PATH, "POST", body=payload)

    async def list_presentations(self, limit: int) -> Any:
        return await self.call(PRESENTATIONS_PATH, params={"limit": limit})

    async def export(self, presentation_id: str, fmt: str) -> Any:
        return await self.call(
            _presentation_path(presentation_id, "/export"),
            "POST",
            params={"format": fmt},
        )

    async def get_presentation(self, presentation_id: str) -> Any:
        return await self.call(_presentation_path(presentation_id))
