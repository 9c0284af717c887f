# application/ports/requests_client.py
from __future__ import annotations

import time
from typing import Dict, Optional, Tuple

import requests
from requests.auth import HTTPBasicAuth

from application.exceptions import RequestExecutionError
from application.ports.http_client import HttpClientPort, HttpResponse

DEFAULT_USER_AGENT = "Litepost/1.0"
MAX_REDIRECTS = 10


def _basic_auth(credentials: Optional[Tuple[str, str]]) -> Optional[HTTPBasicAuth]:
    if credentials is None:
        return None
    username, password = credentials
    # bytes so non-latin-1 credentials are sent as UTF-8
    return HTTPBasicAuth(username.encode("utf-8"), password.encode("utf-8"))


class RequestsSessionHttpClient(HttpClientPort):
    def __init__(
        self,
        base_headers: Optional[Dict[str, str]] = None,
        timeout_sec: float = 30,
    ):
        self._session = requests.Session()
        self._session.max_redirects = MAX_REDIRECTS
        self._base_headers = {"User-Agent": DEFAULT_USER_AGENT}
        self._base_headers.update(base_headers or {})
        self._timeout = timeout_sec

    def request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
        data: Optional[str] = None,
        auth: Optional[Tuple[str, str]] = None,
    ) -> HttpResponse:
        merged = dict(self._base_headers)
        if headers:
            merged.update(headers)

        t0 = time.perf_counter()
        try:
            resp = self._session.request(
                method=method.upper(),
                url=url,
                headers=merged,
                params=params or None,
                data=data.encode("utf-8") if data is not None else None,
                auth=_basic_auth(auth),
                timeout=self._timeout,
                allow_redirects=True,
            )
        except requests.RequestException as exc:
            raise RequestExecutionError(f"request failed: {exc}") from exc
        elapsed_ms = (time.perf_counter() - t0) * 1000

        return HttpResponse(
            status=resp.status_code,
            url=str(resp.url),
            text=resp.text,
            headers=dict(resp.headers),
            content=resp.content,
            elapsed_ms=elapsed_ms,
        )
