"""Microvm controller configuration — centralized environment variable management.

Everything the schema layer reads from the environment is declared, validated
and typed here. No module should call os.environ directly.

Usage:
    from microvm.config import get_settings

    settings = get_settings()
    host = default_host(settings)

Environment variables (all optional):

    MICROVM_FLINTLOCK_ENDPOINT   — Default flintlock API endpoint including the
                                   port (e.g. 10.0.0.5:9090). Used by default_host()
                                   when the controller has no per-machine host.
    MICROVM_FLINTLOCK_HOST_NAME  — Optional label for that default host.
    MICROVM_LOGFIRE_TOKEN        — Logfire project token. If unset, logfire runs
                                   in local mode (no remote export).
    MICROVM_SERVICE_NAME         — Service name reported in traces.
    MICROVM_LOG_LEVEL            — stdlib logging level (DEBUG, INFO, ...).
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from microvm.spec.models import Host


class MicrovmSettings(BaseSettings):
    """Centralized configuration for the microvm schema layer.

    Field names map to env vars by prefixing and uppercasing:
    flintlock_endpoint → MICROVM_FLINTLOCK_ENDPOINT.

    Instantiate via get_settings() to benefit from caching.
    """

    model_config = SettingsConfigDict(
        env_prefix="MICROVM_",
        # .env files are for development; real env vars take precedence.
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Provisioning service ────────────────────────────────────────────────

    flintlock_endpoint: str | None = None
    """Default flintlock endpoint (host:port). None means no default host."""

    flintlock_host_name: str | None = None

    # ── Observability ───────────────────────────────────────────────────────

    logfire_token: SecretStr | None = None
    """Logfire project token. If unset, logfire runs in local mode."""

    service_name: str = "microvm-controller"

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"Unknown log level '{v}'. Use one of DEBUG, INFO, WARNING, ERROR, CRITICAL."
            raise ValueError(msg)
        return level


@lru_cache(maxsize=1)
def get_settings() -> MicrovmSettings:
    """Return the cached MicrovmSettings instance.

    Reads from environment on first call, then caches for the process lifetime.
    Call clear_settings_cache() in tests to reset between test cases.
    """
    return MicrovmSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()


def default_host(settings: MicrovmSettings | None = None) -> Host | None:
    """Build the default flintlock Host from settings.

    Args:
        settings: Settings to read. Defaults to get_settings().

    Returns:
        A Host for MICROVM_FLINTLOCK_ENDPOINT, or None when it is not configured.
    """
    settings = settings or get_settings()
    if not settings.flintlock_endpoint:
        return None
    return Host(name=settings.flintlock_host_name, endpoint=settings.flintlock_endpoint)
