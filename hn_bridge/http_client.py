from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from typing import Dict, Optional

import requests

from .config import Settings, get_settings
from .results import HTTP_STATUS, TRANSPORT

PEM_MARKER = "-----BEGIN"


@dataclass
class HttpResult:
    ok: bool
    status_code: int
    text: str
    url: str
    error: Optional[str] = None
    error_kind: Optional[str] = None


def _is_inline_pem(cacert: str) -> bool:
    return cacert.lstrip().startswith(PEM_MARKER)


class HttpClient:
    """HTTPS GET client that validates servers against a caller-supplied trust anchor.

    The trust anchor is either a path to a PEM bundle or the PEM text itself.
    Inline PEM is written to a private temp file that lives until close().
    """

    def __init__(self, cacert: str, settings: Optional[Settings] = None) -> None:
        if not cacert or not cacert.strip():
            raise ValueError("cacert must be a non-empty path or PEM string")
        self.settings = settings or get_settings()
        self._temp_path: Optional[str] = None
        if _is_inline_pem(cacert):
            fd, path = tempfile.mkstemp(prefix="hn-cacert-", suffix=".pem")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(cacert)
            self._temp_path = path
            self.verify = path
        else:
            self.verify = cacert
        self.session = requests.Session()
        self.session.trust_env = self.settings.trust_env_proxy
        self.session.verify = self.verify

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()
        if self._temp_path:
            try:
                os.remove(self._temp_path)
            except FileNotFoundError:
                pass
            self._temp_path = None

    def get(self, url: str, params: Optional[Dict[str, str]] = None) -> HttpResult:
        headers = {"User-Agent": self.settings.user_agent}
        try:
            resp = self.session.get(url, params=params, headers=headers, timeout=self.settings.http_timeout)
        except (requests.RequestException, OSError) as exc:
            return HttpResult(ok=False, status_code=0, text="", url=url, error=str(exc), error_kind=TRANSPORT)

        status = int(resp.status_code)
        if status != 200:
            return HttpResult(
                ok=False,
                status_code=status,
                text="",
                url=url,
                error=f"HTTP {status}",
                error_kind=HTTP_STATUS,
            )
        return HttpResult(ok=True, status_code=status, text=resp.text, url=url)
