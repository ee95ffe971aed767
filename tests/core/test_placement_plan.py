"""Placement Plan — decision table from behavior + existence to request.

Tests cover:
    - overwrite always PUT raw, independent of existence
    - create always POST raw at the given target
    - merge behaviors: absent/unknown => POST raw, present => PATCH JSON
    - strict mode returns None for UNKNOWN
    - OperationResult constructors
"""

import json

import pytest

from notebridge.core.domain_types import (
    ContentType, ExistenceState, HttpMethod, RemoteDocumentRef, SaveBehavior,
)
from notebridge.core.placement_plan import (
    OperationPlan,
    OperationResult,
    decide_operation,
    patch_envelope,
    treat_as_absent,
)

TARGET = RemoteDocumentRef(vault="Main", path="Logs/Daily Log.md")
MERGES = [
    SaveBehavior.APPEND_SPECIFIC, SaveBehavior.PREPEND_SPECIFIC,
    SaveBehavior.APPEND_DAILY, SaveBehavior.PREPEND_DAILY,
]


# ─── treat_as_absent ─────────────────────────────────────────────

def test_treat_as_absent():
    assert treat_as_absent(ExistenceState.PRESENT, strict=False) is False
    assert treat_as_absent(ExistenceState.ABSENT, strict=False) is True
    assert treat_as_absent(ExistenceState.UNKNOWN, strict=False) is True
    assert treat_as_absent(ExistenceState.UNKNOWN, strict=True) is None
    assert treat_as_absent(ExistenceState.ABSENT, strict=True) is True


# ─── decide_operation ────────────────────────────────────────────

@pytest.mark.parametrize("existence", [None, *ExistenceState])
def test_overwrite_is_always_put(existence):
    plan = decide_operation(SaveBehavior.OVERWRITE, TARGET, "# Hi", existence)
    assert plan.method is HttpMethod.PUT
    assert plan.payload == "# Hi"
    assert plan.content_type is ContentType.MARKDOWN
    assert plan.existence is None


def test_create_is_post_raw():
    plan = decide_operation(SaveBehavior.CREATE, TARGET, "# Hi", ExistenceState.ABSENT)
    assert plan == OperationPlan(
        method=HttpMethod.POST, target=TARGET, payload="# Hi",
        content_type=ContentType.MARKDOWN, existence=ExistenceState.ABSENT,
    )


@pytest.mark.parametrize("behavior", MERGES)
def test_merge_into_absent_is_post_raw(behavior):
    plan = decide_operation(behavior, TARGET, "# Hi", ExistenceState.ABSENT)
    assert plan.method is HttpMethod.POST
    assert plan.payload == "# Hi"
    assert plan.content_type is ContentType.MARKDOWN


@pytest.mark.parametrize("behavior", MERGES)
def test_merge_into_unknown_is_post_unless_strict(behavior):
    plan = decide_operation(behavior, TARGET, "# Hi", ExistenceState.UNKNOWN)
    assert plan.method is HttpMethod.POST
    assert decide_operation(
        behavior, TARGET, "# Hi", ExistenceState.UNKNOWN, strict=True,
    ) is None


@pytest.mark.parametrize("behavior, position", [
    (SaveBehavior.APPEND_SPECIFIC, "end"),
    (SaveBehavior.APPEND_DAILY, "end"),
    (SaveBehavior.PREPEND_SPECIFIC, "start"),
    (SaveBehavior.PREPEND_DAILY, "start"),
])
def test_merge_into_present_is_patch(behavior, position):
    plan = decide_operation(behavior, TARGET, "# Hi", ExistenceState.PRESENT)
    assert plan.method is HttpMethod.PATCH
    assert plan.content_type is ContentType.JSON
    assert json.loads(plan.payload) == {"content": "# Hi", "position": position}
    assert plan.target == TARGET


def test_patch_envelope_rejects_non_merge():
    with pytest.raises(ValueError):
        patch_envelope("x", SaveBehavior.OVERWRITE)


def test_patch_envelope_keeps_unicode_roundtrip():
    payload = patch_envelope("naïve — ok", SaveBehavior.APPEND_SPECIFIC)
    assert json.loads(payload)["content"] == "naïve — ok"


# ─── OperationResult ─────────────────────────────────────────────

def test_result_ok_without_plan_has_no_error():
    result = OperationResult.ok()
    assert result.success is True
    assert result.error is None
    assert result.method is None


def test_result_failed_carries_plan_details():
    plan = decide_operation(SaveBehavior.OVERWRITE, TARGET, "x", None)
    result = OperationResult.failed("HTTP 500: boom", "REMOTE_REJECTED", plan)
    assert result.success is False
    assert result.error == "HTTP 500: boom"
    assert result.method is HttpMethod.PUT
    assert result.target_path == TARGET.path
