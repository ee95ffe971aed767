"""Connectivity Prober — one authenticated GET against the service root.

Invariants:
    - Diagnostic only: never called from the placement pipeline
    - 2xx => success; other status => "HTTP <status>: <body>"; transport => its message
    - Closed Availability Gate => failure without any network I/O
"""

import logging

import httpx

from notebridge.config import RemoteApiConfig
from notebridge.core.enforce_availability import check_availability
from notebridge.core.errors import RemoteTransportError, RemoteUnavailableError
from notebridge.core.placement_plan import OperationResult
from notebridge.infrastructure.local_rest_client import LocalRestApiClient

logger = logging.getLogger(__name__)


async def test_connection(
    config: RemoteApiConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> OperationResult:
    reason = check_availability(config)
    if reason:
        err = RemoteUnavailableError(reason)
        return OperationResult.failed(err.message, err.code)

    async with LocalRestApiClient(config, transport=transport) as client:
        try:
            response = await client.get_root()
        except RemoteTransportError as e:
            return OperationResult.failed(e.message, e.code)

    if response.is_success:
        logger.info("Local REST API reachable", extra={"http_status": response.status_code})
        return OperationResult.ok()
    logger.warning(
        "Local REST API connection test rejected",
        extra={"http_status": response.status_code},
    )
    return OperationResult.failed(
        f"HTTP {response.status_code}: {response.text}", "REMOTE_REJECTED",
    )
