"""Placement Plan — pure decision table from {behavior, existence} to an HTTP operation.

Invariants:
    - All functions are PURE: no IO, no async, no clock
    - OperationPlan is frozen: computed once, executed once, never reused after failure
    - Absent target => POST with the raw body, whatever the merge intent
    - Present target + merge behavior => PATCH with {"content", "position"} JSON
    - OVERWRITE => PUT with the raw body (no existence needed)
    - CREATE => POST with the raw body at the collision-free target
    - PATCH payloads are application/json, everything else text/markdown

Design Decisions:
    - Decision table separated from probing (ADR: functional core, imperative shell)
    - Plan records the existence snapshot it was computed from: probe-then-act
      is not atomic, so callers can see what state the write assumed
"""

import json
from dataclasses import dataclass

from notebridge.core.domain_types import (
    ContentType, ExistenceState, HttpMethod, RemoteDocumentRef, SaveBehavior,
)


@dataclass(frozen=True)
class OperationPlan:
    """A single resolved request against the remote service."""
    method: HttpMethod
    target: RemoteDocumentRef
    payload: str
    content_type: ContentType
    existence: ExistenceState | None = None


@dataclass(frozen=True)
class OperationResult:
    """Terminal outcome of one invocation. Diagnostic fields are best-effort."""
    success: bool
    error: str | None = None
    error_code: str | None = None
    method: HttpMethod | None = None
    target_path: str | None = None
    existence: ExistenceState | None = None

    @classmethod
    def ok(cls, plan: OperationPlan | None = None) -> "OperationResult":
        if plan is None:
            return cls(success=True)
        return cls(
            success=True, method=plan.method,
            target_path=plan.target.path, existence=plan.existence,
        )

    @classmethod
    def failed(
        cls, error: str, error_code: str | None = None,
        plan: OperationPlan | None = None,
    ) -> "OperationResult":
        if plan is None:
            return cls(success=False, error=error, error_code=error_code)
        return cls(
            success=False, error=error, error_code=error_code,
            method=plan.method, target_path=plan.target.path,
            existence=plan.existence,
        )


def treat_as_absent(state: ExistenceState, strict: bool) -> bool | None:
    """Collapse a probe result to present/absent.

    Returns None when the state is UNKNOWN and strict mode forbids guessing.
    """
    if state is ExistenceState.PRESENT:
        return False
    if state is ExistenceState.ABSENT:
        return True
    return None if strict else True


def patch_envelope(body: str, behavior: SaveBehavior) -> str:
    position = behavior.merge_position
    if position is None:
        raise ValueError(f"{behavior.value} is not a merge behavior")
    return json.dumps({"content": body, "position": position.value})


def raw_plan(
    method: HttpMethod, target: RemoteDocumentRef, body: str,
    existence: ExistenceState | None = None,
) -> OperationPlan:
    return OperationPlan(
        method=method, target=target, payload=body,
        content_type=ContentType.MARKDOWN, existence=existence,
    )


def decide_operation(
    behavior: SaveBehavior,
    target: RemoteDocumentRef,
    body: str,
    existence: ExistenceState | None,
    strict: bool = False,
) -> OperationPlan | None:
    """Map {behavior, existence} to a plan. None = strict mode refused to guess.

    For CREATE the target must already be collision-free; for OVERWRITE
    existence is ignored (pass None).
    """
    if behavior is SaveBehavior.OVERWRITE:
        return raw_plan(HttpMethod.PUT, target, body)

    if behavior is SaveBehavior.CREATE:
        return raw_plan(HttpMethod.POST, target, body, existence)

    state = existence or ExistenceState.UNKNOWN
    absent = treat_as_absent(state, strict)
    if absent is None:
        return None
    if absent:
        return raw_plan(HttpMethod.POST, target, body, state)
    return OperationPlan(
        method=HttpMethod.PATCH,
        target=target,
        payload=patch_envelope(body, behavior),
        content_type=ContentType.JSON,
        existence=state,
    )
