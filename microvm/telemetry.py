"""Process-wide logging and tracing setup for controllers using the schema.

The schema modules only emit through logfire (spans, info, warn) and never
configure it. The hosting controller calls configure_telemetry() once at
startup, before the first spec is admitted:

    from microvm.telemetry import configure_telemetry

    configure_telemetry()
"""

from __future__ import annotations

import logging

import logfire

from microvm.config import MicrovmSettings, get_settings

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_telemetry(settings: MicrovmSettings | None = None) -> None:
    """Configure stdlib logging and Logfire from settings.

    The Logfire token is optional; without it Logfire runs in local/dev mode
    and nothing is exported.

    Args:
        settings: Settings to read. Defaults to get_settings().
    """
    settings = settings or get_settings()

    logging.basicConfig(format=_LOG_FORMAT, level=settings.log_level)

    logfire_token = settings.logfire_token
    logfire.configure(
        token=logfire_token.get_secret_value() if logfire_token else None,
        service_name=settings.service_name,
        send_to_logfire="if-token-present",
    )

    logger.info(
        "Telemetry configured for %s (remote export: %s)",
        settings.service_name,
        "on" if logfire_token else "off",
    )
