"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - The API key comes from the environment (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - The placement engine never reads Settings directly: it receives a
      frozen RemoteApiConfig snapshot built by Settings.remote_config()

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Snapshot dataclass over passing Settings around: tests build fixtures
      without touching process-wide state
"""

from dataclasses import dataclass
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class RemoteApiConfig:
    """Read-only view of the remote integration settings for one invocation."""
    enabled: bool
    base_url: str
    api_key: str
    verify_tls: bool = True
    strict_existence: bool = False


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Local REST API
    local_rest_api_enabled: bool = False
    local_rest_api_url: str = "http://127.0.0.1:27123"
    local_rest_api_key: str = ""
    # Self-signed certificate on the HTTPS port (27124) needs this off
    local_rest_api_verify_tls: bool = True
    # ADR: off preserves "unknown existence == absent"; on aborts the placement
    local_rest_api_strict_existence: bool = False

    @field_validator("local_rest_api_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Endpoint paths are joined with a leading '/', so drop trailing ones."""
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def remote_config(self) -> RemoteApiConfig:
        return RemoteApiConfig(
            enabled=self.local_rest_api_enabled,
            base_url=self.local_rest_api_url,
            api_key=self.local_rest_api_key,
            verify_tls=self.local_rest_api_verify_tls,
            strict_existence=self.local_rest_api_strict_existence,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
