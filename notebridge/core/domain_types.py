"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RemoteDocumentRef is frozen — derived once per operation, never mutated
    - All valid behaviors/states encoded as Enums — no raw string matching
    - SaveBehavior.parse() never raises: unknown/missing values mean CREATE

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (ADR: API responses are JSON)
    - Frozen dataclass for refs over NewType: carries vault + path together
"""

from dataclasses import dataclass
from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class SaveBehavior(str, Enum):
    """Caller-declared intent for placing a document at its target."""
    CREATE = "create"
    APPEND_SPECIFIC = "append-specific"
    PREPEND_SPECIFIC = "prepend-specific"
    OVERWRITE = "overwrite"
    APPEND_DAILY = "append-daily"
    PREPEND_DAILY = "prepend-daily"

    @property
    def is_daily(self) -> bool:
        return self in (SaveBehavior.APPEND_DAILY, SaveBehavior.PREPEND_DAILY)

    @property
    def merge_position(self) -> "PatchPosition | None":
        if self in (SaveBehavior.APPEND_SPECIFIC, SaveBehavior.APPEND_DAILY):
            return PatchPosition.END
        if self in (SaveBehavior.PREPEND_SPECIFIC, SaveBehavior.PREPEND_DAILY):
            return PatchPosition.START
        return None

    @classmethod
    def parse(cls, value: "str | SaveBehavior | None") -> "SaveBehavior":
        """Resolve a caller-supplied tag. Anything unrecognized is CREATE."""
        if isinstance(value, SaveBehavior):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.CREATE


class ExistenceState(str, Enum):
    """Result of probing a remote path. UNKNOWN = probe failed ambiguously."""
    PRESENT = "present"
    ABSENT = "absent"
    UNKNOWN = "unknown"


class PatchPosition(str, Enum):
    """Where a PATCH merge inserts content in the existing document."""
    START = "start"
    END = "end"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"


class ContentType(str, Enum):
    JSON = "application/json"
    MARKDOWN = "text/markdown"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class RemoteDocumentRef:
    """Fully resolved remote document: vault + path including extension."""
    vault: str | None
    path: str
