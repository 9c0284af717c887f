from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from domain.stored_request import StoredRequest


class RequestRepositoryPort(ABC):
    @abstractmethod
    def create(self, record: StoredRequest) -> None:
        ...

    @abstractmethod
    def get(self, request_id: str) -> Optional[StoredRequest]:
        ...

    @abstractmethod
    def delete(self, request_id: str) -> bool:
        """Remove the record; False when no record has that id."""
        ...
