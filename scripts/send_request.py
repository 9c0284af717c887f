#!/usr/bin/env python3
"""
Compose a request from a file and dispatch it through the execution backend

Usage:
  python scripts/send_request.py send --request-file <path> [--api-base-url <url>] [--timeout-sec <sec>]
  python scripts/send_request.py preview --request-file <path>

Examples:
  python scripts/send_request.py send --request-file request_files/httpbin_get.yaml
  python scripts/send_request.py send --request-file request_files/httpbin_post_json.json --api-base-url http://localhost:8080
  python scripts/send_request.py preview --request-file request_files/httpbin_get.yaml
"""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import replace

from dotenv import load_dotenv

load_dotenv()

from application.dispatch.dispatch_coordinator import DispatchCoordinator
from application.services.redactor import mask_request_payload
from application.services.request_builder import RequestBuilder
from domain.exceptions import ValidationError
from domain.request_fields import RequestFieldState
from infrastructure.backend.httpx_backend_client import HttpxBackendClient
from infrastructure.config.settings import Settings
from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.log_setup import setup_console_logging
from infrastructure.presentation.console_presenter import ConsolePresenter
from infrastructure.request_file.base_loader import RequestFileLoadError
from infrastructure.request_file.loader_registry import RequestFileLoaderRegistry


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Litepost request sender")
    subparsers = parser.add_subparsers(dest="command")

    send_parser = subparsers.add_parser("send", help="Create and execute a request via the backend")
    send_parser.add_argument("--request-file", type=str, required=True)
    send_parser.add_argument("--api-base-url", type=str)
    send_parser.add_argument("--timeout-sec", type=float)

    preview_parser = subparsers.add_parser("preview", help="Print the request descriptor without sending")
    preview_parser.add_argument("--request-file", type=str, required=True)

    return parser


def _load_fields(path: str) -> RequestFieldState:
    return RequestFileLoaderRegistry().load(path)


async def _send(fields: RequestFieldState, settings: Settings) -> int:
    logger = ConsoleLogger()
    async with HttpxBackendClient(settings.api_base_url, timeout_sec=settings.dispatch_timeout_sec) as backend:
        coordinator = DispatchCoordinator(backend, ConsolePresenter(), logger)
        outcome = await coordinator.send_fields(fields)
    return 0 if outcome.ok else 1


def _run_send(args: argparse.Namespace) -> int:
    settings = Settings.from_env()
    setup_console_logging(level=settings.log_level)
    if args.api_base_url:
        settings = replace(settings, api_base_url=args.api_base_url)
    if args.timeout_sec is not None:
        settings = replace(settings, dispatch_timeout_sec=args.timeout_sec)

    fields = _load_fields(args.request_file)
    return asyncio.run(_send(fields, settings))


def _run_preview(args: argparse.Namespace) -> int:
    fields = _load_fields(args.request_file)
    descriptor = RequestBuilder().build(fields)
    print(json.dumps(mask_request_payload(descriptor.to_payload()), indent=2, ensure_ascii=False))
    return 0


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    try:
        if args.command == "send":
            sys.exit(_run_send(args))
        if args.command == "preview":
            sys.exit(_run_preview(args))
        parser.print_help()
        sys.exit(2)
    except (RequestFileLoadError, ValidationError) as exc:
        print(f"Error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
