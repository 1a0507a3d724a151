"""Client configuration loaded from TOGGL_* environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from toggl_client.transport import DEFAULT_BASE_URL


class TogglSettings(BaseSettings):
    """Toggl client settings.

    All fields are read from environment variables with the ``TOGGL_`` prefix.
    For example, ``TOGGL_API_TOKEN=...`` maps to ``api_token``.
    """

    model_config = SettingsConfigDict(
        env_prefix="TOGGL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "INFO"

    # -- API -------------------------------------------------------------------
    api_token: SecretStr | None = None
    """Personal API token, sent as HTTP basic auth."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    """Per-request timeout in seconds, applied by the HTTP transport."""


@lru_cache(maxsize=1)
def get_settings() -> TogglSettings:
    """Return a cached settings instance.

    Call ``get_settings.cache_clear()`` in tests to force a re-read after
    overriding env vars.
    """
    return TogglSettings()
