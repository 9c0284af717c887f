# application/services/request_executor.py
from __future__ import annotations

from typing import Dict, Optional, Tuple

from application.ports.http_client import HttpClientPort
from application.ports.logger import LoggerPort
from application.services.redactor import mask_dict
from domain.exceptions import ValidationError
from domain.request import (
    ApiKeyAuthConfig,
    BasicAuthConfig,
    BearerAuthConfig,
    BodyType,
    RequestAuth,
    RequestDescriptor,
)
from domain.response import ResponseDescriptor

BODY_CONTENT_TYPES: Dict[BodyType, Optional[str]] = {
    BodyType.JSON: "application/json",
    BodyType.XML: "application/xml",
    BodyType.FORM: "application/x-www-form-urlencoded",
    BodyType.RAW: None,
}


def _has_header(headers: Dict[str, str], name: str) -> bool:
    return any(k.lower() == name.lower() for k in headers)


def basic_credentials(auth: Optional[RequestAuth]) -> Optional[Tuple[str, str]]:
    if auth is not None and isinstance(auth.config, BasicAuthConfig):
        return auth.config.username, auth.config.password
    return None


def auth_headers(auth: Optional[RequestAuth]) -> Dict[str, str]:
    """Header-borne auth; basic credentials go to the HTTP client instead."""
    if auth is None:
        return {}
    config = auth.config
    if isinstance(config, BasicAuthConfig):
        return {}
    if isinstance(config, BearerAuthConfig):
        return {"Authorization": f"Bearer {config.token}"}
    if isinstance(config, ApiKeyAuthConfig):
        if not config.header:
            raise ValidationError("API key auth requires a header name")
        return {config.header: config.value}
    raise ValidationError(f"unsupported authentication type: {auth.type}")


class RequestExecutor:
    """Performs the outbound call for a stored request and measures it."""

    def __init__(self, http_client: HttpClientPort, logger: LoggerPort):
        self._http = http_client
        self._logger = logger

    def execute(self, request_id: str, descriptor: RequestDescriptor) -> ResponseDescriptor:
        log = self._logger.bind(request_id=request_id)

        headers = dict(descriptor.headers)
        data: Optional[str] = None
        if descriptor.body is not None:
            content_type = BODY_CONTENT_TYPES.get(descriptor.body.type)
            if content_type and not _has_header(headers, "Content-Type"):
                headers["Content-Type"] = content_type
            data = descriptor.body.content
        headers.update(auth_headers(descriptor.auth))

        log.info(
            "backend.execute.start",
            method=descriptor.method.value,
            url=descriptor.url,
            headers=mask_dict(headers),
            query_params=descriptor.query_params,
            body_type=descriptor.body.type.value if descriptor.body else None,
            auth_type=descriptor.auth.type.value if descriptor.auth else None,
        )

        resp = self._http.request(
            method=descriptor.method.value,
            url=descriptor.url,
            headers=headers,
            params=descriptor.query_params,
            data=data,
            auth=basic_credentials(descriptor.auth),
        )

        log.info(
            "backend.execute.end",
            status=resp.status,
            final_url=resp.url,
            size=len(resp.content),
            elapsed_ms=int(resp.elapsed_ms),
            set_cookie=any(k.lower() == "set-cookie" for k in resp.headers),
        )

        return ResponseDescriptor(
            status_code=resp.status,
            duration_ms=round(resp.elapsed_ms, 3),
            size_bytes=len(resp.content),
            headers=dict(resp.headers),
            body=resp.text,
        )
