import json

import pytest

from hn_bridge.config import Settings
from hn_bridge.http_client import HttpResult

BASE = "https://hn.test/v0"


class FakeClient:
    """Stands in for HttpClient; serves canned bodies keyed by URL."""

    def __init__(self, routes):
        self.routes = routes
        self.calls = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True

    def get(self, url, params=None):
        self.calls.append((url, params))
        route = self.routes.get(url)
        if route is None:
            return HttpResult(ok=False, status_code=404, text="", url=url, error="HTTP 404", error_kind="http_status")
        if isinstance(route, HttpResult):
            return route
        body = route if isinstance(route, str) else json.dumps(route)
        return HttpResult(ok=True, status_code=200, text=body, url=url)


@pytest.fixture
def settings():
    return Settings(
        api_base_url=BASE,
        http_timeout=1.0,
        user_agent="hn-bridge-test",
        story_limit=10,
        cacert="/etc/ssl/certs/ca-certificates.crt",
        trust_env_proxy=False,
    )


@pytest.fixture
def make_client():
    """Returns (factory, holder) where holder['client'] is the last FakeClient built."""

    def _make(routes):
        holder = {}

        def factory(cacert, settings):
            holder["cacert"] = cacert
            holder["client"] = FakeClient(routes)
            return holder["client"]

        return factory, holder

    return _make


def item_route(story_id):
    return f"{BASE}/item/{story_id}.json"


def list_route():
    return f"{BASE}/beststories.json"
