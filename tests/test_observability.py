from unittest.mock import patch

from hn_bridge.observability import init_sentry


def test_skipped_without_dsn(monkeypatch):
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    assert init_sentry() is False


def test_initialises_with_dsn(monkeypatch):
    monkeypatch.setenv("SENTRY_DSN", "https://key@sentry.test/1")
    monkeypatch.setenv("SENTRY_TRACES_SAMPLE_RATE", "5")
    with patch("sentry_sdk.init") as mock_init:
        assert init_sentry() is True
    kwargs = mock_init.call_args.kwargs
    assert kwargs["dsn"] == "https://key@sentry.test/1"
    assert kwargs["traces_sample_rate"] == 1.0
    assert kwargs["send_default_pii"] is False


def test_uses_given_settings(settings, monkeypatch):
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    settings.sentry_dsn = "https://key@sentry.test/2"
    settings.sentry_env = "production"
    with patch("sentry_sdk.init") as mock_init:
        assert init_sentry(settings) is True
    kwargs = mock_init.call_args.kwargs
    assert kwargs["dsn"] == "https://key@sentry.test/2"
    assert kwargs["environment"] == "production"
    assert kwargs["traces_sample_rate"] == 0.1
