# application/services/request_builder.py
from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from application.services.auth_config_builder import build_auth_config
from domain.request import (
    AuthType,
    BodyType,
    RequestAuth,
    RequestBody,
    RequestDescriptor,
    request_display_name,
)
from domain.request_fields import RequestFieldState


def collect_rows(rows: Iterable[Tuple[str, str]]) -> Dict[str, str]:
    # rows with an empty key or value are dropped; no trimming
    out: Dict[str, str] = {}
    for key, value in rows or ():
        if key and value:
            out[key] = value
    return out


class RequestBuilder:
    """Turns a field snapshot into a RequestDescriptor. Pure, no I/O."""

    def build(self, fields: RequestFieldState) -> RequestDescriptor:
        return RequestDescriptor(
            name=request_display_name(fields.url),
            method=fields.method,
            url=fields.url,
            headers=collect_rows(fields.header_rows),
            query_params=collect_rows(fields.param_rows),
            body=self._build_body(fields),
            auth=self._build_auth(fields),
        )

    def _build_body(self, fields: RequestFieldState) -> Optional[RequestBody]:
        if fields.body_type is BodyType.NONE or not fields.body_content:
            return None
        return RequestBody(type=fields.body_type, content=fields.body_content)

    def _build_auth(self, fields: RequestFieldState) -> Optional[RequestAuth]:
        if fields.auth_type is AuthType.NONE:
            return None
        config = build_auth_config(fields.auth_type, fields.auth_fields)
        if config is None:
            return None
        return RequestAuth(type=fields.auth_type, config=config)
