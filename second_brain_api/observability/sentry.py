# File: /second_brain_api/observability/sentry.py | Version: 2.0 | Title: Optional Sentry initialization (settings-driven)
import logging

from second_brain_api.core.config import settings

log = logging.getLogger(__name__)


def init_sentry_if_configured() -> bool:
    dsn = (settings.SENTRY_DSN or "").strip()
    if not dsn:
        log.info("Sentry disabled (no SENTRY_DSN).")
        return False

    try:
        import sentry_sdk

        traces = settings.SENTRY_TRACES_SAMPLE_RATE
        sentry_sdk.init(
            dsn=dsn,
            environment=settings.ENVIRONMENT,
            traces_sample_rate=traces,
            profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
            send_default_pii=False,
        )
        log.info("Sentry initialized.", extra={"operation": "sentry_init"})
        return True
    except Exception as e:  # pragma: no cover (best-effort)
        log.warning("Sentry init failed: %s", e)
        return False
