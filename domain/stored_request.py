# domain/stored_request.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from domain.request import RequestDescriptor


@dataclass(frozen=True)
class StoredRequest:
    id: str
    descriptor: RequestDescriptor
    created_at: datetime
    updated_at: datetime

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"id": self.id}
        payload.update(self.descriptor.to_payload())
        payload["created_at"] = self.created_at.isoformat()
        payload["updated_at"] = self.updated_at.isoformat()
        return payload
