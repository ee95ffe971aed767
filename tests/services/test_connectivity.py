"""Connectivity Prober — authenticated GET / diagnostic.

Invariants:
    - 2xx => success; non-2xx => "HTTP <status>: <body>"; transport => its message
    - Closed Availability Gate => failure without network I/O
"""

import httpx

from notebridge.config import RemoteApiConfig
from notebridge.services import connectivity

from tests.services.fake_vault import BASE_URL


async def test_reachable_service(vault, remote_config):
    result = await connectivity.test_connection(remote_config, transport=vault.transport())

    assert result.success is True
    assert len(vault.calls) == 1
    assert vault.calls[0].method == "GET"
    assert vault.calls[0].raw_path == "/"


async def test_wrong_key_reports_status_and_body(vault):
    config = RemoteApiConfig(enabled=True, base_url=BASE_URL, api_key="nope")
    result = await connectivity.test_connection(config, transport=vault.transport())

    assert result.success is False
    assert result.error == "HTTP 401: Authorization required"


async def test_server_error_reports_status(vault, remote_config):
    vault.root_status = 500
    result = await connectivity.test_connection(remote_config, transport=vault.transport())

    assert result.success is False
    assert result.error.startswith("HTTP 500: ")


async def test_transport_failure_reports_message(vault, remote_config):
    vault.root_error = httpx.ConnectError("Connection refused")
    result = await connectivity.test_connection(remote_config, transport=vault.transport())

    assert result.success is False
    assert result.error == "Connection refused"


async def test_unconfigured_integration_skips_network(vault):
    config = RemoteApiConfig(enabled=True, base_url=BASE_URL, api_key="  ")
    result = await connectivity.test_connection(config, transport=vault.transport())

    assert result.success is False
    assert result.error_code == "REMOTE_UNAVAILABLE"
    assert vault.calls == []
