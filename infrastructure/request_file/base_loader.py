# infrastructure/request_file/base_loader.py
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from domain.exceptions import ValidationError
from domain.request import AuthType, BodyType, HttpMethod
from domain.request_fields import AuthFieldValues, KeyValueRows, RequestFieldState


class RequestFileLoadError(Exception):
    pass


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _optional_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _load_rows(data: Any, label: str) -> KeyValueRows:
    """
    Accepts a mapping ({name: value}) or a list of rows, each either
    [key, value] or {key: ..., value: ...}. Blank rows are kept as-is.
    """
    if data is None:
        return ()
    rows: List[Tuple[str, str]] = []
    if isinstance(data, dict):
        for key, value in data.items():
            rows.append((_text(key), _text(value)))
        return tuple(rows)
    if not isinstance(data, list):
        raise RequestFileLoadError(f"{label} must be a mapping or a list of rows")
    for row in data:
        if isinstance(row, dict):
            rows.append((_text(row.get("key")), _text(row.get("value"))))
        elif isinstance(row, (list, tuple)) and len(row) == 2:
            rows.append((_text(row[0]), _text(row[1])))
        else:
            raise RequestFileLoadError(f"Invalid {label} row: {row!r}")
    return tuple(rows)


class RequestFileLoaderBase(ABC):
    def load_from_file(self, path: str | Path) -> RequestFieldState:
        p = Path(path)
        if not p.exists():
            raise RequestFileLoadError(f"Request file not found: {path}")

        data = self._load_file(p)

        if data is None:
            raise RequestFileLoadError(f"Request file is empty: {path}")
        if not isinstance(data, dict):
            raise RequestFileLoadError(f"Request file is invalid: {path}")

        return self.load_from_dict(data)

    @abstractmethod
    def _load_file(self, path: Path) -> Any:
        ...

    def load_from_dict(self, data: Dict[str, Any]) -> RequestFieldState:
        try:
            body = data.get("body") or {}
            auth = data.get("auth") or {}
            if not isinstance(body, dict) or not isinstance(auth, dict):
                raise RequestFileLoadError("body and auth must be mappings")
            return RequestFieldState(
                method=HttpMethod.parse(data.get("method", "GET")),
                url=_text(data.get("url")),
                header_rows=_load_rows(data.get("headers"), "headers"),
                param_rows=_load_rows(data.get("params", data.get("query_params")), "params"),
                body_type=BodyType.parse(body.get("type", "none")),
                body_content=_text(body.get("content")),
                auth_type=AuthType.parse(auth.get("type", "none")),
                auth_fields=AuthFieldValues(
                    username=_optional_text(auth.get("username")),
                    password=_optional_text(auth.get("password")),
                    token=_optional_text(auth.get("token")),
                    key=_optional_text(auth.get("key")),
                    value=_optional_text(auth.get("value")),
                    header=_optional_text(auth.get("header")),
                ),
            )
        except ValidationError as exc:
            raise RequestFileLoadError(str(exc)) from exc
