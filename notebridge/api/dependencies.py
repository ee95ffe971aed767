"""Route Dependencies — injectable config snapshot and transport.

Invariants:
    - Routes never read Settings directly; they receive a RemoteApiConfig
    - Transport is None in production (httpx default); tests override it

Design Decisions:
    - FastAPI Depends over module globals: tests use app.dependency_overrides
"""

import httpx

from notebridge.config import RemoteApiConfig, get_settings


def get_remote_config() -> RemoteApiConfig:
    return get_settings().remote_config()


def get_remote_transport() -> httpx.AsyncBaseTransport | None:
    return None
