"""Error Hierarchy — typed, categorized exceptions for all placement failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Configuration errors never reach the network; transport and remote
      errors carry the underlying message or "HTTP <status>: <body>"
    - to_response() produces the REST envelope
    - Inside the placement pipeline these are caught and folded into
      OperationResult; only the API layer lets them propagate

Design Decisions:
    - Single hierarchy with NoteBridgeError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    EXTERNAL_API = "external_api"
    TRANSPORT = "transport"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    vault: str | None = None
    remote_path: str | None = None
    behavior: str | None = None
    http_status: int | None = None
    debug_info: dict[str, Any] | None = None


class NoteBridgeError(Exception):
    """Base exception for all placement errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "vault": self.context.vault,
                    "remote_path": self.context.remote_path,
                    "behavior": self.context.behavior,
                    "http_status": self.context.http_status,
                },
            }
        }


# ─── Local Errors ───────────────────────────────────────────────

class RemoteUnavailableError(NoteBridgeError):
    """Integration disabled or missing endpoint/credential. No I/O was attempted."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Local REST API not available: {reason}",
            "REMOTE_UNAVAILABLE", ErrorCategory.CONFIGURATION,
            ErrorSeverity.ERROR, context, 503,
        )
        self.reason = reason


class AmbiguousExistenceError(NoteBridgeError):
    """Existence probe neither confirmed nor denied the target (strict mode only)."""
    def __init__(self, remote_path: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.remote_path = remote_path
        super().__init__(
            f"Could not determine whether '{remote_path}' exists; placement aborted",
            "AMBIGUOUS_EXISTENCE", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )


class InvalidTextError(NoteBridgeError):
    """A placement argument cannot be encoded as UTF-8 (e.g. a lone surrogate)."""
    def __init__(self, field_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"{field_name} contains characters that cannot be encoded as UTF-8",
            "INVALID_TEXT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field_name = field_name


# ─── Remote Errors ──────────────────────────────────────────────

class RemoteTransportError(NoteBridgeError):
    """Network, DNS, TLS or timeout failure talking to the remote service."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message or "Unknown error",
            "REMOTE_TRANSPORT_ERROR", ErrorCategory.TRANSPORT,
            ErrorSeverity.CRITICAL, context, 502,
        )


class RemoteRejectionError(NoteBridgeError):
    """Remote answered with a non-2xx status."""
    def __init__(self, status_code: int, body: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.http_status = status_code
        super().__init__(
            f"HTTP {status_code}: {body}",
            "REMOTE_REJECTED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, ctx, 502,
        )
        self.status_code = status_code
        self.body = body


# ─── API Surface ────────────────────────────────────────────────

# cause code -> (http status, category, severity); anything else is a 502 remote failure
_FAILURE_PROFILE: dict[str, tuple[int, ErrorCategory, ErrorSeverity]] = {
    "REMOTE_UNAVAILABLE": (503, ErrorCategory.CONFIGURATION, ErrorSeverity.ERROR),
    "AMBIGUOUS_EXISTENCE": (409, ErrorCategory.CONFLICT, ErrorSeverity.WARNING),
    "INVALID_TEXT": (400, ErrorCategory.VALIDATION, ErrorSeverity.WARNING),
    "REMOTE_TRANSPORT_ERROR": (502, ErrorCategory.TRANSPORT, ErrorSeverity.CRITICAL),
}
_DEFAULT_PROFILE = (502, ErrorCategory.EXTERNAL_API, ErrorSeverity.ERROR)


class PlacementFailedError(NoteBridgeError):
    """An unsuccessful OperationResult surfaced through the HTTP API.

    Keeps the originating error code, and with it the status, category and
    severity the original error would have carried.
    """
    def __init__(
        self, message: str, cause_code: str | None = None,
        context: ErrorContext | None = None,
    ):
        status, category, severity = _FAILURE_PROFILE.get(cause_code or "", _DEFAULT_PROFILE)
        super().__init__(
            message, cause_code or "PLACEMENT_FAILED", category,
            severity, context, status,
        )
