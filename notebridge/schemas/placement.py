"""Placement Schemas — Pydantic models for the HTTP boundary.

Invariants:
    - PlaceNoteRequest.note_name: non-empty after stripping
    - behavior is validated against SaveBehavior; omitted means "create"
    - OperationResultResponse mirrors OperationResult (error only on failure)

Design Decisions:
    - Enum field over free string: Pydantic rejects unknown behaviors at the
      boundary, while the service itself still defaults unknown tags to create
"""

from pydantic import BaseModel, Field, field_validator

from notebridge.core.domain_types import ExistenceState, HttpMethod, SaveBehavior
from notebridge.core.placement_plan import OperationResult


class PlaceNoteRequest(BaseModel):
    """Finished document plus destination and intent."""
    content: str
    note_name: str = Field(min_length=1, max_length=1_000)
    directory: str = ""
    vault: str | None = None
    behavior: SaveBehavior = SaveBehavior.CREATE

    @field_validator("note_name")
    @classmethod
    def strip_note_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("note_name cannot be empty or whitespace")
        return v


class OperationResultResponse(BaseModel):
    success: bool
    error: str | None = None
    method: HttpMethod | None = None
    target_path: str | None = None
    existence: ExistenceState | None = None

    @classmethod
    def from_result(cls, result: OperationResult) -> "OperationResultResponse":
        return cls(
            success=result.success,
            error=result.error,
            method=result.method,
            target_path=result.target_path,
            existence=result.existence,
        )
