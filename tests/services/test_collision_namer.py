"""Collision-Avoidance Namer — bounded suffix search with timestamp fallback.

Invariants:
    - Unsuffixed candidate first, then " 1" ... " 999"
    - First candidate not present wins
    - After 1000 present candidates, "<base> <epoch_ms>.md" without another probe
"""

import pytest

from notebridge.core.domain_types import ExistenceState
from notebridge.core.errors import AmbiguousExistenceError
from notebridge.infrastructure.local_rest_client import LocalRestApiClient
from notebridge.services.collision_namer import MAX_SUFFIX, CollisionNamer
from notebridge.services.existence_prober import ExistenceProber

from tests.services.fake_vault import FakeVault


async def _reserve(vault, config, base="Note", directory="Inbox/", strict=False):
    async with LocalRestApiClient(config, transport=vault.transport()) as client:
        namer = CollisionNamer(ExistenceProber(client), strict=strict, now_ms=lambda: 42)
        return await namer.reserve("Main", directory, base)


async def test_free_base_name_returned_after_one_probe(vault, remote_config):
    ref, state = await _reserve(vault, remote_config)
    assert ref.path == "Inbox/Note.md"
    assert ref.vault == "Main"
    assert state is ExistenceState.ABSENT
    assert len(vault.calls) == 1


async def test_first_free_suffix_wins(remote_config):
    vault = FakeVault({
        "Inbox/Note.md": "a", "Inbox/Note 1.md": "b", "Inbox/Note 2.md": "c",
    })
    ref, _ = await _reserve(vault, remote_config)
    assert ref.path == "Inbox/Note 3.md"
    assert [c.path for c in vault.calls] == [
        "Inbox/Note.md", "Inbox/Note 1.md", "Inbox/Note 2.md", "Inbox/Note 3.md",
    ]


async def test_gap_in_suffixes_is_reused(remote_config):
    vault = FakeVault({"Inbox/Note.md": "a", "Inbox/Note 2.md": "c"})
    ref, _ = await _reserve(vault, remote_config)
    assert ref.path == "Inbox/Note 1.md"


async def test_exhausted_suffixes_fall_back_to_timestamp(remote_config):
    vault = FakeVault(everything_exists=True)
    ref, state = await _reserve(vault, remote_config)

    assert ref.path == "Inbox/Note 42.md"
    assert state is None
    assert len(vault.calls) == MAX_SUFFIX + 1
    assert vault.calls[-1].path == f"Inbox/Note {MAX_SUFFIX}.md"


async def test_unknown_counts_as_free_by_default(vault, remote_config):
    vault.probe_overrides["Inbox/Note.md"] = 500
    ref, state = await _reserve(vault, remote_config)
    assert ref.path == "Inbox/Note.md"
    assert state is ExistenceState.UNKNOWN


async def test_unknown_raises_in_strict_mode(vault, remote_config):
    vault.probe_overrides["Inbox/Note.md"] = 500
    with pytest.raises(AmbiguousExistenceError) as exc:
        await _reserve(vault, remote_config, strict=True)
    assert exc.value.context.remote_path == "Inbox/Note.md"
