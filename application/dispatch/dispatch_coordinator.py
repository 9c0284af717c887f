# application/dispatch/dispatch_coordinator.py
from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from application.exceptions import (
    CreateFailed,
    DispatchError,
    DispatchInProgress,
    ExecuteFailed,
    MalformedReply,
)
from application.outcome import DispatchOutcome
from application.ports.backend_client import ExecutionBackendPort
from application.ports.logger import LoggerPort
from application.ports.presenter import PresenterPort
from application.services.redactor import mask_request_payload
from application.services.request_builder import RequestBuilder
from application.services.response_classifier import ResponseClassifier
from domain.exceptions import ValidationError
from domain.render import ErrorView
from domain.request import RequestDescriptor
from domain.request_fields import RequestFieldState
from domain.response import ResponseDescriptor


class DispatchCoordinator:
    """
    Runs one dispatch: create the request on the backend, execute it by the
    returned id, then hand the response to the presenter.

    At most one dispatch is in flight per coordinator; an overlapping send is
    rejected with DispatchInProgress and leaves the running one untouched.
    No retries and no cancellation.
    """

    def __init__(
        self,
        backend: ExecutionBackendPort,
        presenter: PresenterPort,
        logger: LoggerPort,
        classifier: Optional[ResponseClassifier] = None,
        builder: Optional[RequestBuilder] = None,
    ) -> None:
        self._backend = backend
        self._presenter = presenter
        self._logger = logger
        self._classifier = classifier or ResponseClassifier()
        self._builder = builder or RequestBuilder()
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def send_fields(self, fields: RequestFieldState) -> DispatchOutcome:
        return await self.send(self._builder.build(fields))

    async def send(self, descriptor: RequestDescriptor) -> DispatchOutcome:
        if self._in_flight:
            error = DispatchInProgress()
            self._logger.warning("dispatch.rejected", url=descriptor.url, error=str(error))
            return DispatchOutcome(ok=False, error=error)

        async with self._busy():
            t0 = time.perf_counter()
            self._logger.info(
                "dispatch.start",
                method=descriptor.method.value,
                url=descriptor.url,
            )
            try:
                response = await self._create_and_execute(descriptor)
                render = self._classifier.classify(response)
            except DispatchError as exc:
                return self._fail(exc, t0)
            except Exception as exc:
                wrapped = DispatchError(str(exc))
                wrapped.__cause__ = exc
                return self._fail(wrapped, t0)

            self._presenter.show_response(render)
            self._logger.info(
                "dispatch.end",
                status=response.status_code,
                status_class=render.status_class.value,
                body_render_mode=render.body_render_mode.value,
                elapsed_ms=int((time.perf_counter() - t0) * 1000),
            )
            return DispatchOutcome(ok=True, response=response, render=render)

    @asynccontextmanager
    async def _busy(self) -> AsyncIterator[None]:
        # the flag is set before the first await so overlapping sends see it
        self._in_flight = True
        self._presenter.set_busy()
        try:
            yield
        finally:
            self._in_flight = False
            self._presenter.set_ready()

    async def _create_and_execute(self, descriptor: RequestDescriptor) -> ResponseDescriptor:
        payload = descriptor.to_payload()
        self._logger.debug("dispatch.create", request=mask_request_payload(payload))

        created = await self._backend.create_request(payload)
        if not created.ok:
            raise CreateFailed(created.status)
        request_id = self._extract_id(created.payload)
        self._logger.info("dispatch.created", request_id=request_id)

        executed = await self._backend.execute_request(request_id)
        if not executed.ok:
            raise ExecuteFailed(executed.status)
        try:
            return ResponseDescriptor.from_payload(executed.payload)
        except ValidationError as exc:
            raise MalformedReply(str(exc)) from exc

    def _extract_id(self, payload: object) -> str:
        request_id = payload.get("id") if isinstance(payload, dict) else None
        if request_id is None or request_id == "":
            raise MalformedReply("Created request has no id")
        return str(request_id)

    def _fail(self, exc: DispatchError, t0: float) -> DispatchOutcome:
        view = ErrorView(message=str(exc))
        self._logger.error(
            "dispatch.failed",
            error=str(exc),
            error_type=type(exc).__name__,
            status=getattr(exc, "status", None),
            elapsed_ms=int((time.perf_counter() - t0) * 1000),
        )
        self._presenter.show_error(view)
        return DispatchOutcome(ok=False, error=exc, error_view=view)
