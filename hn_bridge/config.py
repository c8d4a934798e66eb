import os
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

# Load env from project root or hn_bridge/.env
root_env = Path(__file__).resolve().parents[1] / ".env"
package_env = Path(__file__).resolve().parent / ".env"
load_dotenv(root_env)
load_dotenv(package_env)

MAX_STORIES = 10
DEFAULT_HTTP_TIMEOUT = 8.0
DEFAULT_TRACES_SAMPLE_RATE = 0.1


@dataclass
class Settings:
    api_base_url: str
    http_timeout: float
    user_agent: str
    story_limit: int
    cacert: str
    trust_env_proxy: bool
    sentry_dsn: str = ""
    sentry_env: str = "development"
    sentry_traces_sample_rate: float = DEFAULT_TRACES_SAMPLE_RATE


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _story_limit() -> int:
    try:
        limit = int(os.getenv("HN_STORY_LIMIT", str(MAX_STORIES)))
    except ValueError:
        limit = MAX_STORIES
    return min(max(limit, 1), MAX_STORIES)


def _http_timeout() -> float:
    timeout = _float_env("HN_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)
    return timeout if timeout > 0 else DEFAULT_HTTP_TIMEOUT


def get_settings() -> Settings:
    return Settings(
        api_base_url=os.getenv("HN_API_BASE_URL", "https://hacker-news.firebaseio.com/v0").rstrip("/"),
        http_timeout=_http_timeout(),
        user_agent=os.getenv("HN_USER_AGENT", "hn-bridge/0.1"),
        story_limit=_story_limit(),
        cacert=os.getenv("HN_CACERT", "").strip(),
        # 預設關閉 requests 的系統代理
        trust_env_proxy=os.getenv("HN_HTTP_TRUST_ENV_PROXY", "0") == "1",
        sentry_dsn=os.getenv("SENTRY_DSN", "").strip(),
        sentry_env=os.getenv("SENTRY_ENV", os.getenv("APP_ENV", "development")),
        sentry_traces_sample_rate=max(
            0.0, min(1.0, _float_env("SENTRY_TRACES_SAMPLE_RATE", DEFAULT_TRACES_SAMPLE_RATE))
        ),
    )
