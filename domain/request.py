# domain/request.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from domain.exceptions import ValidationError


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, raw: str) -> "HttpMethod":
        try:
            return cls(str(raw).upper())
        except ValueError:
            raise ValidationError(f"Unsupported HTTP method: {raw}") from None


class BodyType(str, Enum):
    NONE = "none"
    JSON = "json"
    XML = "xml"
    FORM = "form"
    RAW = "raw"

    @classmethod
    def parse(cls, raw: str) -> "BodyType":
        try:
            return cls(str(raw).lower())
        except ValueError:
            raise ValidationError(f"Unsupported body type: {raw}") from None


class AuthType(str, Enum):
    NONE = "none"
    BASIC = "basic"
    BEARER = "bearer"
    APIKEY = "apikey"

    @classmethod
    def parse(cls, raw: str) -> "AuthType":
        try:
            return cls(str(raw).lower())
        except ValueError:
            raise ValidationError(f"Unsupported auth type: {raw}") from None


DEFAULT_API_KEY_HEADER = "X-API-Key"


@dataclass(frozen=True)
class BasicAuthConfig:
    username: str = ""
    password: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"username": self.username, "password": self.password}


@dataclass(frozen=True)
class BearerAuthConfig:
    token: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"token": self.token}


@dataclass(frozen=True)
class ApiKeyAuthConfig:
    key: str = ""
    value: str = ""
    header: str = DEFAULT_API_KEY_HEADER

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "value": self.value, "header": self.header}


AuthConfig = Union[BasicAuthConfig, BearerAuthConfig, ApiKeyAuthConfig]


@dataclass(frozen=True)
class RequestAuth:
    type: AuthType
    config: AuthConfig

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "config": self.config.to_dict()}


@dataclass(frozen=True)
class RequestBody:
    type: BodyType
    content: str

    def __post_init__(self) -> None:
        if self.type is BodyType.NONE:
            raise ValidationError("Request body must not have type 'none'")

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type.value, "content": self.content}


@dataclass(frozen=True)
class RequestDescriptor:
    """
    Backend-ready snapshot of one HTTP call.

    body / auth are either fully present or absent; to_payload() omits the
    keys instead of sending null.
    """
    name: str
    method: HttpMethod
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    query_params: Dict[str, str] = field(default_factory=dict)
    body: Optional[RequestBody] = None
    auth: Optional[RequestAuth] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "name": self.name,
            "method": self.method.value,
            "url": self.url,
            "headers": dict(self.headers),
            "query_params": dict(self.query_params),
        }
        if self.body is not None:
            payload["body"] = self.body.to_dict()
        if self.auth is not None:
            payload["auth"] = self.auth.to_dict()
        return payload


def request_display_name(url: str) -> str:
    return f"Request to {url}"
