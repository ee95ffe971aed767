"""Placement Resolver — reconciles a document with the remote vault's current state.

Invariants:
    - Availability Gate evaluated first; closed gate => failure, zero network calls
    - Text that cannot be encoded as UTF-8 => INVALID_TEXT failure, zero network calls
    - Directory normalized and note name sanitized before any path is built
    - Daily behaviors target "<UTC YYYY-MM-DD>.md" at the vault root,
      ignoring the caller's directory
    - OVERWRITE never probes; merge behaviors probe their exact target once;
      CREATE goes through the Collision-Avoidance Namer
    - At most one mutating request per invocation, after all probes complete
    - place_note() never raises for configuration/remote/transport problems:
      every failure becomes an OperationResult

Design Decisions:
    - Shell around the pure decide_operation() table (ADR: functional core, imperative shell)
    - Clock injected (today, now_ms) so daily targets and the collision
      fallback are deterministic under test
    - Probe-then-act is best-effort, not atomic: the result carries the
      existence state the write assumed
"""

import logging
from collections.abc import Callable
from datetime import date, datetime, timezone

import httpx

from notebridge.config import RemoteApiConfig
from notebridge.core.domain_types import SaveBehavior
from notebridge.core.enforce_availability import check_availability
from notebridge.core.errors import (
    AmbiguousExistenceError, ErrorContext, InvalidTextError, RemoteUnavailableError,
)
from notebridge.core.note_paths import (
    build_note_ref, daily_note_ref, find_unencodable, normalize_directory,
    sanitize_file_name,
)
from notebridge.core.placement_plan import (
    OperationPlan, OperationResult, decide_operation,
)
from notebridge.infrastructure.local_rest_client import LocalRestApiClient
from notebridge.services.collision_namer import CollisionNamer, epoch_ms
from notebridge.services.existence_prober import ExistenceProber
from notebridge.services.request_executor import RequestExecutor

logger = logging.getLogger(__name__)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class PlacementResolver:
    """Computes and executes one placement through an open client."""

    def __init__(
        self,
        client: LocalRestApiClient,
        strict: bool = False,
        today: Callable[[], date] = utc_today,
        now_ms: Callable[[], int] = epoch_ms,
    ):
        self.prober = ExistenceProber(client)
        self.namer = CollisionNamer(self.prober, strict=strict, now_ms=now_ms)
        self.executor = RequestExecutor(client)
        self.strict = strict
        self.today = today

    async def resolve(
        self,
        body: str,
        note_name: str,
        directory: str | None,
        vault: str | None,
        behavior: SaveBehavior,
    ) -> OperationPlan:
        """Probe as the behavior requires and return the plan to execute.

        Raises AmbiguousExistenceError when strict mode refuses an UNKNOWN probe.
        """
        vault = vault or None
        directory = normalize_directory(directory)
        base_name = sanitize_file_name(note_name)

        if behavior.is_daily:
            target = daily_note_ref(vault, self.today())
            existence = await self.prober.probe(target)
        elif behavior is SaveBehavior.OVERWRITE:
            target = build_note_ref(vault, directory, base_name)
            existence = None
        elif behavior is SaveBehavior.CREATE:
            target, existence = await self.namer.reserve(vault, directory, base_name)
        else:
            target = build_note_ref(vault, directory, base_name)
            existence = await self.prober.probe(target)

        plan = decide_operation(behavior, target, body, existence, strict=self.strict)
        if plan is None:
            raise AmbiguousExistenceError(target.path)
        logger.info(
            f"Resolved {behavior.value} to {plan.method.value} '{target.path}'",
            extra={
                "vault": vault, "remote_path": target.path,
                "behavior": behavior.value, "method": plan.method.value,
                "existence": existence.value if existence else None,
            },
        )
        return plan

    async def place(
        self,
        body: str,
        note_name: str,
        directory: str | None,
        vault: str | None,
        behavior: SaveBehavior,
    ) -> OperationResult:
        try:
            plan = await self.resolve(body, note_name, directory, vault, behavior)
        except AmbiguousExistenceError as e:
            logger.warning(
                e.message,
                extra={"vault": vault, "behavior": behavior.value, "error_code": e.code},
            )
            return OperationResult.failed(e.message, e.code)
        return await self.executor.execute(plan)


async def place_note(
    body: str,
    note_name: str,
    directory: str | None,
    vault: str | None,
    behavior: SaveBehavior | str | None,
    *,
    config: RemoteApiConfig,
    transport: httpx.AsyncBaseTransport | None = None,
    today: Callable[[], date] = utc_today,
    now_ms: Callable[[], int] = epoch_ms,
) -> OperationResult:
    """Create or merge a note on the remote vault. Never raises for remote failures."""
    behavior = SaveBehavior.parse(behavior)
    reason = check_availability(config)
    if reason:
        err = RemoteUnavailableError(
            reason, ErrorContext(vault=vault, behavior=behavior.value),
        )
        logger.warning(err.message, extra={"behavior": behavior.value, "error_code": err.code})
        return OperationResult.failed(err.message, err.code)

    field_name = find_unencodable(
        body=body, note_name=note_name, directory=directory, vault=vault,
    )
    if field_name:
        err = InvalidTextError(field_name)
        logger.warning(err.message, extra={"behavior": behavior.value, "error_code": err.code})
        return OperationResult.failed(err.message, err.code)

    async with LocalRestApiClient(config, transport=transport) as client:
        resolver = PlacementResolver(
            client, strict=config.strict_existence, today=today, now_ms=now_ms,
        )
        return await resolver.place(body, note_name, directory, vault, behavior)
