from __future__ import annotations

from typing import Optional

from .config import Settings, get_settings


def init_sentry(settings: Optional[Settings] = None) -> bool:
    """Report errors from the HTTP surface to Sentry when a DSN is configured."""
    settings = settings or get_settings()
    if not settings.sentry_dsn:
        return False

    try:
        import sentry_sdk
        from sentry_sdk.integrations.fastapi import FastApiIntegration
    except ImportError:
        print("[HN] sentry-sdk not installed, error reporting disabled")
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.sentry_env,
        integrations=[FastApiIntegration()],
        traces_sample_rate=settings.sentry_traces_sample_rate,
        send_default_pii=False,
    )
    return True
