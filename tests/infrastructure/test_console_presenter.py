from __future__ import annotations

from domain.render import (
    NO_COOKIES_ROW,
    BodyRenderMode,
    ErrorView,
    NameValueRow,
    RenderState,
    StatusClass,
)
from infrastructure.presentation.console_presenter import (
    ConsolePresenter,
    format_error_view,
    format_render_state,
)


def _state(**kwargs) -> RenderState:
    defaults = dict(
        status_code=200,
        status_text="OK",
        status_class=StatusClass.SUCCESS,
        duration_ms=12.5,
        size_bytes=7,
        body_render_mode=BodyRenderMode.JSON,
        body_rendered_text='{\n  "a": 1\n}',
        header_rows=[NameValueRow("Content-Type", "application/json")],
        cookie_rows=[NO_COOKIES_ROW],
    )
    defaults.update(kwargs)
    return RenderState(**defaults)


def test_format_render_state() -> None:
    lines = format_render_state(_state())

    assert lines[0] == "Status: 200 OK [success]"
    assert lines[1] == "Time: 12.5ms  Size: 7 bytes"
    assert "[Body] (json)" in lines
    assert "Content-Type: application/json" in lines
    assert lines[-1] == "No Cookies: No cookies were set in this response"


def test_format_render_state_empty_body_and_headers() -> None:
    lines = format_render_state(
        _state(body_rendered_text="", body_render_mode=BodyRenderMode.TEXT, header_rows=[])
    )

    assert "(empty)" in lines
    assert "(none)" in lines


def test_format_render_state_shows_html_title() -> None:
    lines = format_render_state(_state(html_title="Welcome"))

    assert lines[2] == "Title: Welcome"


def test_format_error_view() -> None:
    lines = format_error_view(ErrorView("HTTP error! status: 500"))

    assert lines == [
        "Status: Error [error]",
        "HTTP error! status: 500",
        "",
        "Error: HTTP error! status: 500",
    ]


def test_presenter_tracks_busy_state() -> None:
    written = []
    presenter = ConsolePresenter(write=written.append)

    presenter.set_busy()
    assert presenter.busy is True
    presenter.show_error(ErrorView("x"))
    presenter.set_ready()

    assert presenter.busy is False
    assert written[0] == "Sending..."
    assert written[1].startswith("Status: Error")
