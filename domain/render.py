# domain/render.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class StatusClass(str, Enum):
    SUCCESS = "success"
    REDIRECT = "redirect"
    ERROR = "error"
    UNCLASSIFIED = "unclassified"

    @property
    def color(self) -> Optional[str]:
        return _STATUS_COLORS.get(self)


_STATUS_COLORS = {
    StatusClass.SUCCESS: "#4CAF50",
    StatusClass.REDIRECT: "#FF9800",
    StatusClass.ERROR: "#F44336",
}


class BodyRenderMode(str, Enum):
    JSON = "json"
    HTML_ESCAPED = "html-escaped"
    TEXT = "text"


@dataclass(frozen=True)
class RenderedBody:
    mode: BodyRenderMode
    text: str


@dataclass(frozen=True)
class NameValueRow:
    name: str
    value: str


NO_COOKIES_ROW = NameValueRow(
    name="No Cookies",
    value="No cookies were set in this response",
)


@dataclass(frozen=True)
class RenderState:
    status_code: int
    status_text: str
    status_class: StatusClass
    duration_ms: float
    size_bytes: int
    body_render_mode: BodyRenderMode
    body_rendered_text: str
    header_rows: List[NameValueRow] = field(default_factory=list)
    cookie_rows: List[NameValueRow] = field(default_factory=list)
    html_title: Optional[str] = None

    @property
    def status_color(self) -> Optional[str]:
        return self.status_class.color


@dataclass(frozen=True)
class ErrorView:
    message: str
    status_marker: str = "Error"
    status_class: StatusClass = StatusClass.ERROR

    @property
    def status_text(self) -> str:
        return self.message

    @property
    def body_text(self) -> str:
        return f"Error: {self.message}"

    @property
    def status_color(self) -> Optional[str]:
        return self.status_class.color
