"""Best-stories fetch operations against the Hacker News Firebase API.

Both operations are sequential and synchronous, and own one HTTP client for
the duration of the call. Failures come back as FetchResult errors; nothing
here raises for network, status or parse problems.
"""

from __future__ import annotations

import json
import re
from typing import Any, Callable, List, Optional

from .config import MAX_STORIES, Settings, get_settings
from .http_client import HttpClient, HttpResult
from .results import INVALID_ARGUMENT, PARSE, TRANSPORT, FetchResult

ClientFactory = Callable[[str, Settings], HttpClient]
_DIGITS = re.compile(r"[0-9]+")


def best_stories_url(settings: Settings) -> str:
    return f"{settings.api_base_url}/beststories.json"


def item_url(settings: Settings, story_id: str) -> str:
    return f"{settings.api_base_url}/item/{story_id}.json"


def _http_failure(resp: HttpResult) -> FetchResult:
    return FetchResult.failure(resp.error_kind or TRANSPORT, resp.error or f"request failed: {resp.url}")


def _story_id(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, str) and _DIGITS.fullmatch(value.strip()):
        return value.strip()
    return None


def _title(item: Any) -> str:
    # deleted/missing items come back as JSON null
    if not isinstance(item, dict):
        return ""
    title = item.get("title")
    return title if isinstance(title, str) else ""


def _check_cacert(cacert: Optional[str]) -> Optional[FetchResult]:
    if cacert is None:
        return FetchResult.failure(INVALID_ARGUMENT, "cacert argument cannot be null")
    if not cacert.strip():
        return FetchResult.failure(INVALID_ARGUMENT, "cacert argument cannot be empty")
    return None


def _effective_limit(limit: Optional[int], settings: Settings) -> int:
    if limit is None:
        limit = settings.story_limit
    return min(max(int(limit), 1), MAX_STORIES)


def get_titles(
    cacert: Optional[str],
    limit: Optional[int] = None,
    settings: Optional[Settings] = None,
    client_factory: ClientFactory = HttpClient,
) -> FetchResult[List[str]]:
    """Resolve the first best-story ids to their titles.

    Any failed request aborts the whole call and discards titles gathered so
    far. An empty id list is a success with no titles.
    """
    invalid = _check_cacert(cacert)
    if invalid is not None:
        return invalid
    settings = settings or get_settings()
    cap = _effective_limit(limit, settings)

    with client_factory(cacert, settings) as client:
        list_resp = client.get(best_stories_url(settings))
        if not list_resp.ok:
            return _http_failure(list_resp)
        try:
            ids = json.loads(list_resp.text)
        except ValueError as exc:
            return FetchResult.failure(PARSE, f"invalid best stories payload: {exc}")
        if not isinstance(ids, list):
            return FetchResult.failure(PARSE, f"best stories payload is not an array: {type(ids).__name__}")

        titles: List[str] = []
        for raw_id in ids[:cap]:
            story_id = _story_id(raw_id)
            if story_id is None:
                return FetchResult.failure(PARSE, f"invalid story id: {raw_id!r}")

            item_resp = client.get(item_url(settings, story_id))
            if not item_resp.ok:
                return _http_failure(item_resp)
            try:
                item = json.loads(item_resp.text)
            except ValueError as exc:
                return FetchResult.failure(PARSE, f"invalid item {story_id} payload: {exc}")
            titles.append(_title(item))

    return FetchResult.success(titles)


def get_raw_best_stories(
    cacert: Optional[str],
    settings: Optional[Settings] = None,
    client_factory: ClientFactory = HttpClient,
) -> FetchResult[str]:
    """Return the pretty-printed best-stories body exactly as served."""
    invalid = _check_cacert(cacert)
    if invalid is not None:
        return invalid
    settings = settings or get_settings()

    with client_factory(cacert, settings) as client:
        resp = client.get(best_stories_url(settings), params={"print": "pretty"})
    if not resp.ok:
        return _http_failure(resp)
    return FetchResult.success(resp.text)
