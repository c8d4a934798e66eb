from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Header, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .config import MAX_STORIES, get_settings
from .observability import init_sentry
from .results import INVALID_ARGUMENT, FetchResult
from .stories import get_raw_best_stories, get_titles

cors_origins = [
    x.strip()
    for x in os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if x.strip()
]

app = FastAPI(title="HN Bridge API", version="0.1")
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup() -> None:
    init_sentry()


def _cacert(header_value: Optional[str]) -> str:
    return (header_value or "").strip() or get_settings().cacert


def _raise_for_error(result: FetchResult) -> None:
    if result.ok:
        return
    status = 400 if result.error.kind == INVALID_ARGUMENT else 502
    print(f"[HN] -> failed: {result.error.kind}: {result.error.message}")
    raise HTTPException(status_code=status, detail=result.error.to_dict())


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/stories/best")
def best_stories(
    limit: Optional[int] = Query(default=None, ge=1, le=MAX_STORIES),
    x_hn_cacert: Optional[str] = Header(default=None),
) -> Dict[str, Any]:
    print("[HN] fetching best story titles")
    result = get_titles(_cacert(x_hn_cacert), limit=limit)
    _raise_for_error(result)
    titles: List[str] = result.value or []
    print(f"[HN] -> {len(titles)} titles")
    return {"titles": titles}


@app.get("/stories/best/raw", response_class=PlainTextResponse)
def best_stories_raw(x_hn_cacert: Optional[str] = Header(default=None)) -> PlainTextResponse:
    print("[HN] fetching raw best stories")
    result = get_raw_best_stories(_cacert(x_hn_cacert))
    _raise_for_error(result)
    return PlainTextResponse(result.value or "")
