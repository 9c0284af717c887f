# infrastructure/presentation/console_presenter.py
from __future__ import annotations

from typing import Callable, List

from application.ports.presenter import PresenterPort
from domain.render import ErrorView, RenderState


class ConsolePresenter(PresenterPort):
    """Prints the response panel for the command line front end."""

    def __init__(self, write: Callable[[str], None] = print) -> None:
        self._write = write
        self.busy = False

    def set_busy(self) -> None:
        self.busy = True
        self._write("Sending...")

    def set_ready(self) -> None:
        self.busy = False

    def show_response(self, state: RenderState) -> None:
        self._write("\n".join(format_render_state(state)))

    def show_error(self, view: ErrorView) -> None:
        self._write("\n".join(format_error_view(view)))


def format_render_state(state: RenderState) -> List[str]:
    lines = [
        f"Status: {state.status_code} {state.status_text} [{state.status_class.value}]",
        f"Time: {state.duration_ms}ms  Size: {state.size_bytes} bytes",
    ]
    if state.html_title:
        lines.append(f"Title: {state.html_title}")
    lines.append("")
    lines.append(f"[Body] ({state.body_render_mode.value})")
    lines.append(state.body_rendered_text if state.body_rendered_text else "(empty)")
    lines.append("")
    lines.append("[Headers]")
    lines.extend(f"{row.name}: {row.value}" for row in state.header_rows)
    if not state.header_rows:
        lines.append("(none)")
    lines.append("")
    lines.append("[Cookies]")
    lines.extend(f"{row.name}: {row.value}" for row in state.cookie_rows)
    return lines


def format_error_view(view: ErrorView) -> List[str]:
    return [
        f"Status: {view.status_marker} [{view.status_class.value}]",
        view.status_text,
        "",
        view.body_text,
    ]
