from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import MAX_STORIES, get_settings
from .interop import HostFatalError, get_hacker_news, get_hacker_news_raw
from .results import INVALID_ARGUMENT, FetchResult
from .stories import get_raw_best_stories, get_titles


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hn-bridge", description="Print the current Hacker News best stories.")
    parser.add_argument("--cacert", default=None, help="CA bundle path or PEM text (default: $HN_CACERT)")
    parser.add_argument("--raw", action="store_true", help="print the pretty-printed id list as served")
    parser.add_argument("--limit", type=int, default=None, help=f"number of titles, 1-{MAX_STORIES}")
    parser.add_argument(
        "--legacy",
        action="store_true",
        help="go through the host entry points; errors are printed in place of results",
    )
    return parser.parse_args(argv)


def _report(result: FetchResult) -> int:
    if result.ok:
        return 0
    print(f"[HN] -> failed: {result.error.kind}: {result.error.message}", file=sys.stderr)
    return 2 if result.error.kind == INVALID_ARGUMENT else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    cacert = args.cacert if args.cacert is not None else (get_settings().cacert or None)

    if args.legacy:
        try:
            if args.raw:
                print(get_hacker_news_raw(cacert))
            else:
                for title in get_hacker_news(cacert, limit=args.limit):
                    print(title)
        except HostFatalError:
            return 2
        return 0

    if args.raw:
        raw = get_raw_best_stories(cacert)
        if raw.ok:
            print(raw.value)
        return _report(raw)

    titles = get_titles(cacert, limit=args.limit)
    for title in titles.value or []:
        print(title)
    return _report(titles)


if __name__ == "__main__":
    sys.exit(main())
