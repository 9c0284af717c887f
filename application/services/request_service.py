# application/services/request_service.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable
from uuid import uuid4

from application.ports.logger import LoggerPort
from application.ports.request_repository import RequestRepositoryPort
from application.services.redactor import mask_request_payload
from application.services.request_executor import RequestExecutor
from domain.exceptions import RequestNotFoundError
from domain.request import RequestDescriptor
from domain.response import ResponseDescriptor
from domain.stored_request import StoredRequest


def _new_request_id() -> str:
    return uuid4().hex


class RequestService:
    """Backend side of a dispatch: store a request, then execute it by id."""

    def __init__(
        self,
        repository: RequestRepositoryPort,
        executor: RequestExecutor,
        logger: LoggerPort,
        id_factory: Callable[[], str] = _new_request_id,
    ) -> None:
        self._repository = repository
        self._executor = executor
        self._logger = logger
        self._id_factory = id_factory

    def create(self, descriptor: RequestDescriptor) -> StoredRequest:
        now = datetime.now(timezone.utc)
        record = StoredRequest(
            id=self._id_factory(),
            descriptor=descriptor,
            created_at=now,
            updated_at=now,
        )
        self._repository.create(record)
        self._logger.info(
            "backend.request_created",
            request_id=record.id,
            request=mask_request_payload(descriptor.to_payload()),
        )
        return record

    def get(self, request_id: str) -> StoredRequest:
        record = self._repository.get(request_id)
        if record is None:
            raise RequestNotFoundError(f"Request not found: {request_id}")
        return record

    def execute(self, request_id: str) -> ResponseDescriptor:
        record = self.get(request_id)
        return self._executor.execute(record.id, record.descriptor)

    def delete(self, request_id: str) -> None:
        if not self._repository.delete(request_id):
            raise RequestNotFoundError(f"Request not found: {request_id}")
        self._logger.info("backend.request_deleted", request_id=request_id)
