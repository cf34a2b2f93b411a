"""Optional Sentry error reporting, enabled by ``SENTRY_DSN``."""
import logging
from importlib.metadata import PackageNotFoundError, version

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration

from salestax.core.config import settings

logger = logging.getLogger(__name__)

DIST_NAME = "salestax-reports"

_initialized = False


def release_name() -> str:
    """``salestax-reports@<version>``; ``unknown`` when running from a source checkout."""
    try:
        dist_version = version(DIST_NAME)
    except PackageNotFoundError:
        dist_version = "unknown"
    return f"{DIST_NAME}@{dist_version}"


def init_monitoring() -> bool:
    """Initialise Sentry once per process. Returns whether reporting is on."""
    global _initialized
    if _initialized:
        return True
    if not settings.SENTRY_DSN:
        logger.debug("SENTRY_DSN not set; error reporting disabled")
        return False
    try:
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            integrations=[FastApiIntegration()],
            traces_sample_rate=0.1,
            profiles_sample_rate=0.0,
            environment=settings.ENV,
            release=release_name(),
        )
    except Exception as exc:  # noqa: BLE001
        logger.warning("Failed to init Sentry: %s", exc)
        return False
    _initialized = True
    logger.info("Sentry initialized (release=%s, env=%s)", release_name(), settings.ENV)
    return True
