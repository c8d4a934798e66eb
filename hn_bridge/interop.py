"""Host-facing adapter around the story fetch operations.

The host speaks in plain strings and string arrays. Recoverable failures are
handed back as data (the error message in place of the result), including a
host string that cannot be decoded. Only a null required argument goes
through the fatal-error hook, which never returns.
"""

from __future__ import annotations

import sys
from typing import Any, List, NoReturn, Optional, Sequence, Union

from .results import INVALID_ARGUMENT, FetchResult
from .stories import get_raw_best_stories, get_titles

HostString = str
HostStringArray = List[HostString]


class HostFatalError(RuntimeError):
    pass


class HostArgumentError(ValueError):
    """A non-null host argument that cannot be converted to a native string."""


def fatal_error(message: str) -> NoReturn:
    print(f"[HN] fatal: {message}", file=sys.stderr)
    raise HostFatalError(message)


def require_argument(value: Any, name: str) -> None:
    if value is None:
        fatal_error(f"{name} argument cannot be null")


def string_from_host(value: Union[str, bytes]) -> str:
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise HostArgumentError(f"host string is not valid UTF-8: {exc.reason} at byte {exc.start}") from exc
    if not isinstance(value, str):
        raise HostArgumentError(f"expected host string, got {type(value).__name__}")
    return value


def string_to_host(value: str) -> HostString:
    return str(value)


def string_array_to_host(values: Sequence[str]) -> HostStringArray:
    return [string_to_host(v) for v in values]


def result_to_host_array(result: FetchResult[List[str]]) -> HostStringArray:
    if not result.ok:
        return string_array_to_host([result.error.message])
    return string_array_to_host(result.value or [])


def result_to_host_string(result: FetchResult[str]) -> HostString:
    if not result.ok:
        return string_to_host(result.error.message)
    return string_to_host(result.value or "")


def get_hacker_news(cacert: Optional[Union[str, bytes]], limit: Optional[int] = None) -> HostStringArray:
    require_argument(cacert, "cacert")
    try:
        native = string_from_host(cacert)
    except HostArgumentError as exc:
        return result_to_host_array(FetchResult.failure(INVALID_ARGUMENT, f"cacert: {exc}"))
    return result_to_host_array(get_titles(native, limit=limit))


def get_hacker_news_raw(cacert: Optional[Union[str, bytes]]) -> HostString:
    require_argument(cacert, "cacert")
    try:
        native = string_from_host(cacert)
    except HostArgumentError as exc:
        return result_to_host_string(FetchResult.failure(INVALID_ARGUMENT, f"cacert: {exc}"))
    return result_to_host_string(get_raw_best_stories(native))
