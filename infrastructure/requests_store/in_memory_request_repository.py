from __future__ import annotations

from collections import OrderedDict
from threading import Lock
from typing import Optional

from application.ports.request_repository import RequestRepositoryPort
from domain.exceptions import ValidationError
from domain.stored_request import StoredRequest

DEFAULT_MAX_RECORDS = 1000


class InMemoryRequestRepository(RequestRepositoryPort):
    """Process-local store; the oldest record is evicted once max_records is reached."""

    def __init__(self, max_records: int = DEFAULT_MAX_RECORDS) -> None:
        if max_records < 1:
            raise ValidationError("max_records must be at least 1")
        self._requests: "OrderedDict[str, StoredRequest]" = OrderedDict()
        self._max_records = max_records
        self._lock = Lock()

    def create(self, record: StoredRequest) -> None:
        with self._lock:
            if record.id in self._requests:
                raise ValidationError(f"Request already exists: {record.id}")
            while len(self._requests) >= self._max_records:
                self._requests.popitem(last=False)
            self._requests[record.id] = record

    def get(self, request_id: str) -> Optional[StoredRequest]:
        with self._lock:
            return self._requests.get(request_id)

    def delete(self, request_id: str) -> bool:
        with self._lock:
            return self._requests.pop(request_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._requests)
