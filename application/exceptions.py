# application/exceptions.py
from __future__ import annotations

from typing import Optional


class DispatchError(Exception):
    """Any failure of the create-then-execute sequence."""


class CreateFailed(DispatchError):
    def __init__(self, status: int) -> None:
        super().__init__(f"HTTP error! status: {status}")
        self.status = status


class ExecuteFailed(DispatchError):
    def __init__(self, status: int) -> None:
        super().__init__(f"HTTP error! status: {status}")
        self.status = status


class NetworkFailure(DispatchError):
    pass


class MalformedReply(DispatchError):
    pass


class DispatchInProgress(DispatchError):
    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or "A request is already in flight")


class RequestExecutionError(Exception):
    """Backend-side failure to perform the outbound HTTP call."""
