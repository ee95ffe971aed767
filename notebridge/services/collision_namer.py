"""Collision-Avoidance Namer — finds a note path nothing currently occupies.

Invariants:
    - Candidates probed sequentially: "<base>.md", "<base> 1.md" ... "<base> 999.md"
    - First candidate not reported PRESENT wins (UNKNOWN counts as free
      unless strict mode, which raises AmbiguousExistenceError instead)
    - All 1000 taken => "<base> <epoch_ms>.md", returned without probing
    - Terminates after at most MAX_SUFFIX + 1 probes

Design Decisions:
    - Bounded loop + timestamp fallback over an open-ended search: bounded
      time regardless of how many prior collisions exist
"""

import logging
import time
from collections.abc import Callable

from notebridge.core.domain_types import ExistenceState, RemoteDocumentRef
from notebridge.core.errors import AmbiguousExistenceError
from notebridge.core.note_paths import collision_suffix, note_path
from notebridge.core.placement_plan import treat_as_absent
from notebridge.services.existence_prober import ExistenceProber

logger = logging.getLogger(__name__)

MAX_SUFFIX = 999


def epoch_ms() -> int:
    return int(time.time() * 1000)


class CollisionNamer:
    def __init__(
        self,
        prober: ExistenceProber,
        strict: bool = False,
        now_ms: Callable[[], int] = epoch_ms,
    ):
        self.prober = prober
        self.strict = strict
        self.now_ms = now_ms

    async def reserve(
        self, vault: str | None, directory: str, base_name: str,
    ) -> tuple[RemoteDocumentRef, ExistenceState | None]:
        """Return a free target and the probe state that made it free.

        directory must already be normalized and base_name sanitized. The
        state is None for the unprobed timestamp fallback.
        """
        for n in range(MAX_SUFFIX + 1):
            suffix = collision_suffix(n) if n else ""
            ref = RemoteDocumentRef(vault=vault, path=note_path(directory, base_name, suffix))
            state = await self.prober.probe(ref)
            free = treat_as_absent(state, self.strict)
            if free is None:
                raise AmbiguousExistenceError(ref.path)
            if free:
                if n:
                    logger.info(
                        f"'{note_path(directory, base_name)}' taken, using '{ref.path}'",
                        extra={"vault": vault, "remote_path": ref.path},
                    )
                return ref, state

        fallback = RemoteDocumentRef(
            vault=vault,
            path=note_path(directory, base_name, collision_suffix(self.now_ms())),
        )
        logger.warning(
            f"All {MAX_SUFFIX} suffixes taken for '{base_name}', "
            f"falling back to '{fallback.path}'",
            extra={"vault": vault, "remote_path": fallback.path},
        )
        return fallback, None
