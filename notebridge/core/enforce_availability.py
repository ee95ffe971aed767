"""Availability Gate — decides whether the remote integration may be used at all.

Invariants:
    - All functions are PURE: no IO, no async, no network
    - Return a reason string on violation, None on success
    - check_availability chains all checks — first reason wins

Design Decisions:
    - Reason strings (not exceptions): the resolver folds them into an
      OperationResult, keeping the failure path identical to remote failures
"""

from notebridge.config import RemoteApiConfig


def check_enabled(config: RemoteApiConfig) -> str | None:
    if not config.enabled:
        return "integration is disabled"
    return None


def check_endpoint(config: RemoteApiConfig) -> str | None:
    if not (config.base_url or "").strip():
        return "endpoint URL is not configured"
    return None


def check_credential(config: RemoteApiConfig) -> str | None:
    if not (config.api_key or "").strip():
        return "API key is not configured"
    return None


def check_availability(config: RemoteApiConfig) -> str | None:
    """Chain all availability checks. Returns first reason or None."""
    return (
        check_enabled(config)
        or check_endpoint(config)
        or check_credential(config)
    )


def is_available(config: RemoteApiConfig) -> bool:
    return check_availability(config) is None
