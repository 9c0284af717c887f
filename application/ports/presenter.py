# application/ports/presenter.py
from __future__ import annotations

from abc import ABC, abstractmethod

from domain.render import ErrorView, RenderState


class PresenterPort(ABC):
    @abstractmethod
    def set_busy(self) -> None:
        """Disable the send trigger and show progress."""
        ...

    @abstractmethod
    def set_ready(self) -> None:
        ...

    @abstractmethod
    def show_response(self, state: RenderState) -> None:
        ...

    @abstractmethod
    def show_error(self, view: ErrorView) -> None:
        ...
