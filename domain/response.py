# domain/response.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from domain.exceptions import ValidationError


@dataclass(frozen=True)
class ResponseDescriptor:
    status_code: int
    duration_ms: float
    size_bytes: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ResponseDescriptor":
        if not isinstance(payload, Mapping):
            raise ValidationError("Response payload must be a JSON object")
        try:
            status_code = int(payload["status_code"])
        except (KeyError, TypeError, ValueError) as exc:
            raise ValidationError(f"Response payload has no valid status_code: {exc}") from exc
        headers = payload.get("headers") or {}
        if not isinstance(headers, Mapping):
            raise ValidationError("Response headers must be a JSON object")
        body = payload.get("body")
        if body is None:
            body = ""
        if not isinstance(body, str):
            raise ValidationError(f"Response body must be a string, not {type(body).__name__}")
        try:
            duration_ms = float(payload.get("duration") or 0)
            size_bytes = int(payload.get("size") or 0)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Response payload has invalid duration or size: {exc}") from exc
        return cls(
            status_code=status_code,
            duration_ms=duration_ms,
            size_bytes=size_bytes,
            headers={str(k): str(v) for k, v in headers.items()},
            body=body,
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "status_code": self.status_code,
            "duration": self.duration_ms,
            "size": self.size_bytes,
            "headers": dict(self.headers),
            "body": self.body,
        }
