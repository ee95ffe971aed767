"""Existence Prober — asks the remote whether a document is present at a path.

Invariants:
    - 2xx => PRESENT; exactly 404 => ABSENT (the only authoritative negative)
    - Any other status, or a transport error => UNKNOWN, logged as a warning
    - Never raises for remote/transport problems; never caches across calls

Design Decisions:
    - Tri-state over bool: UNKNOWN is distinguishable in logs and lets strict
      mode abort, while exists() keeps the plain "present or not" contract
"""

import logging

from notebridge.core.domain_types import ExistenceState, RemoteDocumentRef
from notebridge.core.errors import RemoteTransportError
from notebridge.infrastructure.local_rest_client import LocalRestApiClient

logger = logging.getLogger(__name__)

_NOT_FOUND = 404


class ExistenceProber:
    """Probes remote paths through an open LocalRestApiClient."""

    def __init__(self, client: LocalRestApiClient):
        self.client = client

    async def probe(self, ref: RemoteDocumentRef) -> ExistenceState:
        try:
            response = await self.client.get_document(ref)
        except RemoteTransportError as e:
            logger.warning(
                f"Existence probe failed, treating '{ref.path}' as unknown: {e.message}",
                extra={
                    "vault": ref.vault, "remote_path": ref.path,
                    "existence": ExistenceState.UNKNOWN.value,
                },
            )
            return ExistenceState.UNKNOWN

        if response.is_success:
            return ExistenceState.PRESENT
        if response.status_code == _NOT_FOUND:
            return ExistenceState.ABSENT

        logger.warning(
            f"Existence probe got HTTP {response.status_code} for '{ref.path}', "
            f"treating as unknown",
            extra={
                "vault": ref.vault, "remote_path": ref.path,
                "http_status": response.status_code,
                "existence": ExistenceState.UNKNOWN.value,
            },
        )
        return ExistenceState.UNKNOWN

    async def exists(self, ref: RemoteDocumentRef) -> bool:
        return await self.probe(ref) is ExistenceState.PRESENT
