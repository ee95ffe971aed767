"""Availability Gate — pure configuration checks.

Tests cover:
    - disabled integration is unavailable regardless of other fields
    - blank endpoint or credential is unavailable
    - check_availability returns the first failing reason
"""

import pytest

from notebridge.config import RemoteApiConfig
from notebridge.core.enforce_availability import check_availability, is_available


def _config(**overrides) -> RemoteApiConfig:
    fields = {"enabled": True, "base_url": "http://127.0.0.1:27123", "api_key": "k"}
    fields.update(overrides)
    return RemoteApiConfig(**fields)


def test_fully_configured_is_available():
    assert is_available(_config()) is True
    assert check_availability(_config()) is None


def test_disabled_is_unavailable():
    assert is_available(_config(enabled=False)) is False
    assert check_availability(_config(enabled=False)) == "integration is disabled"


@pytest.mark.parametrize("url", ["", "   "])
def test_blank_endpoint_is_unavailable(url):
    assert check_availability(_config(base_url=url)) == "endpoint URL is not configured"


@pytest.mark.parametrize("key", ["", "  "])
def test_blank_key_is_unavailable(key):
    assert check_availability(_config(api_key=key)) == "API key is not configured"


def test_disabled_reason_wins_over_missing_fields():
    config = _config(enabled=False, base_url="", api_key="")
    assert check_availability(config) == "integration is disabled"
