from hn_bridge.config import MAX_STORIES, get_settings


def test_defaults(monkeypatch):
    for name in ("HN_API_BASE_URL", "HN_HTTP_TIMEOUT", "HN_STORY_LIMIT", "HN_CACERT", "HN_HTTP_TRUST_ENV_PROXY"):
        monkeypatch.delenv(name, raising=False)
    s = get_settings()
    assert s.api_base_url == "https://hacker-news.firebaseio.com/v0"
    assert s.http_timeout == 8.0
    assert s.story_limit == MAX_STORIES
    assert s.cacert == ""
    assert s.trust_env_proxy is False


def test_story_limit_is_clamped(monkeypatch):
    monkeypatch.setenv("HN_STORY_LIMIT", "25")
    assert get_settings().story_limit == MAX_STORIES
    monkeypatch.setenv("HN_STORY_LIMIT", "0")
    assert get_settings().story_limit == 1
    monkeypatch.setenv("HN_STORY_LIMIT", "abc")
    assert get_settings().story_limit == MAX_STORIES


def test_base_url_trailing_slash_stripped(monkeypatch):
    monkeypatch.setenv("HN_API_BASE_URL", "https://example.test/v0/")
    assert get_settings().api_base_url == "https://example.test/v0"


def test_bad_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("HN_HTTP_TIMEOUT", "soon")
    assert get_settings().http_timeout == 8.0
    monkeypatch.setenv("HN_HTTP_TIMEOUT", "-3")
    assert get_settings().http_timeout == 8.0
    monkeypatch.setenv("HN_HTTP_TIMEOUT", "2.5")
    assert get_settings().http_timeout == 2.5


def test_sentry_settings(monkeypatch):
    monkeypatch.setenv("SENTRY_DSN", " https://key@sentry.test/1 ")
    monkeypatch.setenv("SENTRY_ENV", "staging")
    monkeypatch.setenv("SENTRY_TRACES_SAMPLE_RATE", "often")
    s = get_settings()
    assert s.sentry_dsn == "https://key@sentry.test/1"
    assert s.sentry_env == "staging"
    assert s.sentry_traces_sample_rate == 0.1
