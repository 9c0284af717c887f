# application/outcome.py
from dataclasses import dataclass
from typing import Optional

from application.exceptions import DispatchError
from domain.render import ErrorView, RenderState
from domain.response import ResponseDescriptor


@dataclass(frozen=True)
class DispatchOutcome:
    ok: bool
    response: Optional[ResponseDescriptor] = None
    render: Optional[RenderState] = None
    error: Optional[DispatchError] = None
    error_view: Optional[ErrorView] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None
