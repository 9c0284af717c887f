# application/services/response_classifier.py
from __future__ import annotations

import html
import json
from typing import Any, List, Mapping, Optional, Tuple

from bs4 import BeautifulSoup

from domain.render import (
    NO_COOKIES_ROW,
    BodyRenderMode,
    NameValueRow,
    RenderedBody,
    RenderState,
    StatusClass,
)
from domain.response import ResponseDescriptor

STATUS_TEXTS = {
    200: "OK",
    201: "Created",
    204: "No Content",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
}

UNKNOWN_STATUS_TEXT = "Unknown"
SET_COOKIE = "set-cookie"


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are not JSON
    raise ValueError(f"invalid JSON constant: {name}")


def _try_parse_json(text: str) -> Tuple[bool, Any]:
    """(True, value) when text is a JSON document, else (False, None)."""
    try:
        return True, json.loads(text, parse_constant=_reject_constant)
    except (TypeError, ValueError, RecursionError):
        return False, None


def _try_extract_title(markup: str) -> Optional[str]:
    try:
        soup = BeautifulSoup(markup, "html.parser")
        return soup.title.get_text(strip=True) if soup.title else None
    except Exception:
        return None


class ResponseClassifier:
    """
    Builds the render state for one response.

    Every operation is total: unknown codes, empty bodies and malformed
    markup all resolve to a value instead of raising.
    """

    def status_class(self, status_code: int) -> StatusClass:
        if 200 <= status_code < 300:
            return StatusClass.SUCCESS
        if 300 <= status_code < 400:
            return StatusClass.REDIRECT
        if 400 <= status_code < 600:
            return StatusClass.ERROR
        return StatusClass.UNCLASSIFIED

    def status_text(self, status_code: int) -> str:
        return STATUS_TEXTS.get(status_code, UNKNOWN_STATUS_TEXT)

    def render_body(self, body: str) -> RenderedBody:
        text = body if isinstance(body, str) else ("" if body is None else str(body))
        ok, parsed = _try_parse_json(text)
        if ok:
            return RenderedBody(
                mode=BodyRenderMode.JSON,
                text=json.dumps(parsed, indent=2, ensure_ascii=False),
            )
        if text.strip().startswith("<"):
            return RenderedBody(
                mode=BodyRenderMode.HTML_ESCAPED,
                text=html.escape(text, quote=False),
            )
        return RenderedBody(mode=BodyRenderMode.TEXT, text=text)

    def header_rows(self, headers: Mapping[str, str]) -> List[NameValueRow]:
        return [NameValueRow(name=k, value=v) for k, v in (headers or {}).items()]

    def cookie_rows(self, headers: Mapping[str, str]) -> List[NameValueRow]:
        rows = [
            NameValueRow(name=k, value=v)
            for k, v in (headers or {}).items()
            if k.lower() == SET_COOKIE
        ]
        return rows or [NO_COOKIES_ROW]

    def classify(self, response: ResponseDescriptor) -> RenderState:
        rendered = self.render_body(response.body)
        html_title = None
        if rendered.mode is BodyRenderMode.HTML_ESCAPED:
            html_title = _try_extract_title(response.body)
        return RenderState(
            status_code=response.status_code,
            status_text=self.status_text(response.status_code),
            status_class=self.status_class(response.status_code),
            duration_ms=response.duration_ms,
            size_bytes=response.size_bytes,
            body_render_mode=rendered.mode,
            body_rendered_text=rendered.text,
            header_rows=self.header_rows(response.headers),
            cookie_rows=self.cookie_rows(response.headers),
            html_title=html_title,
        )
