from __future__ import annotations

import json

from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.log_setup import setup_console_logging


def _parse(line: str, event: str) -> dict:
    assert line.startswith(f"{event} ")
    return json.loads(line.replace(f"{event} ", "", 1))


def test_console_logger_emits_type_field(capsys) -> None:
    setup_console_logging(level="INFO")
    logger = ConsoleLogger()

    logger.info("dispatch.start", url="https://x.test")

    captured = capsys.readouterr()
    payload = _parse(captured.out.strip(), "dispatch.start")
    assert payload["type"] == "dispatch.start"
    assert payload["url"] == "https://x.test"


def test_bound_fields_are_attached(capsys) -> None:
    setup_console_logging(level="INFO")
    logger = ConsoleLogger().bind(request_id="req-1")

    logger.error("backend.execute_failed", error="boom {not a placeholder}")

    payload = _parse(capsys.readouterr().out.strip(), "backend.execute_failed")
    assert payload["request_id"] == "req-1"
    assert payload["error"] == "boom {not a placeholder}"


def test_debug_is_filtered_by_level(capsys) -> None:
    setup_console_logging(level="info")
    logger = ConsoleLogger()

    logger.debug("dispatch.create", request={})
    logger.warning("dispatch.rejected")

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("dispatch.rejected ")
