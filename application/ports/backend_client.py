# application/ports/backend_client.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class BackendReply:
    status: int
    payload: Optional[Any] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class ExecutionBackendPort(ABC):
    """
    The two calls the dispatch sequence makes against the execution backend.

    Implementations raise NetworkFailure when a call does not complete; any
    completed call is returned as a BackendReply whatever its status.
    """

    @abstractmethod
    async def create_request(self, payload: Dict[str, Any]) -> BackendReply:
        ...

    @abstractmethod
    async def execute_request(self, request_id: str) -> BackendReply:
        ...
