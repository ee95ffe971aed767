"""Local REST API Client — wraps httpx.AsyncClient with bearer auth and error mapping.

Invariants:
    - Every request carries "Authorization: Bearer <key>"
    - Transport failures (DNS, TLS, refused, timeout) map to RemoteTransportError
    - Non-2xx responses are returned, not raised — callers decide what a status means
    - Exactly one attempt per call: no retries at this layer
    - One client per invocation (async context manager); nothing survives the call

Design Decisions:
    - Wrapper over raw client: isolates auth/URL building from resolver logic (ADR: single responsibility)
    - Injectable transport: tests swap in httpx.MockTransport, no sockets opened
    - No explicit timeout: httpx transport defaults apply
"""

import logging

import httpx

from notebridge.config import RemoteApiConfig
from notebridge.core.domain_types import ContentType, HttpMethod, RemoteDocumentRef
from notebridge.core.errors import ErrorContext, RemoteTransportError
from notebridge.core.note_paths import vault_resource_path

logger = logging.getLogger(__name__)


def _transport_message(e: Exception) -> str:
    return str(e) or "Unknown error"


class LocalRestApiClient:
    """Authenticated access to one remote note-storage endpoint."""

    def __init__(
        self,
        config: RemoteApiConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "LocalRestApiClient":
        self._client = httpx.AsyncClient(
            headers={"Authorization": f"Bearer {self.config.api_key}"},
            verify=self.config.verify_tls,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def url_for(self, ref: RemoteDocumentRef) -> str:
        return f"{self.base_url}{vault_resource_path(ref)}"

    async def get_root(self) -> httpx.Response:
        return await self._send(HttpMethod.GET, f"{self.base_url}/")

    async def get_document(self, ref: RemoteDocumentRef) -> httpx.Response:
        return await self._send(
            HttpMethod.GET, self.url_for(ref),
            context=ErrorContext(vault=ref.vault, remote_path=ref.path),
        )

    async def write_document(
        self,
        method: HttpMethod,
        ref: RemoteDocumentRef,
        payload: str,
        content_type: ContentType,
    ) -> httpx.Response:
        return await self._send(
            method, self.url_for(ref),
            content=payload.encode("utf-8"),
            headers={"Content-Type": content_type.value},
            context=ErrorContext(vault=ref.vault, remote_path=ref.path),
        )

    async def _send(
        self,
        method: HttpMethod,
        url: str,
        *,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
        context: ErrorContext | None = None,
    ) -> httpx.Response:
        if self._client is None:
            raise RuntimeError("LocalRestApiClient used outside 'async with'")
        try:
            response = await self._client.request(
                method.value, url, content=content, headers=headers,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(
                f"Transport error on {method.value} {url}: {e!r}",
                extra={"method": method.value},
            )
            raise RemoteTransportError(_transport_message(e), context=context) from e
        logger.debug(
            f"{method.value} {url} -> {response.status_code}",
            extra={"method": method.value, "http_status": response.status_code},
        )
        return response
