# application/services/auth_config_builder.py
from __future__ import annotations

from typing import Optional, assert_never

from domain.request import (
    DEFAULT_API_KEY_HEADER,
    ApiKeyAuthConfig,
    AuthConfig,
    AuthType,
    BasicAuthConfig,
    BearerAuthConfig,
)
from domain.request_fields import AuthFieldValues


def build_auth_config(auth_type: AuthType, fields: AuthFieldValues) -> Optional[AuthConfig]:
    """
    Config object for exactly auth_type, or None for AuthType.NONE.

    Missing inputs degrade to "" and never fail the build; the API key header
    name degrades to X-API-Key instead.
    """
    if auth_type is AuthType.NONE:
        return None
    if auth_type is AuthType.BASIC:
        return BasicAuthConfig(
            username=fields.username or "",
            password=fields.password or "",
        )
    if auth_type is AuthType.BEARER:
        return BearerAuthConfig(token=fields.token or "")
    if auth_type is AuthType.APIKEY:
        return ApiKeyAuthConfig(
            key=fields.key or "",
            value=fields.value or "",
            header=fields.header or DEFAULT_API_KEY_HEADER,
        )
    assert_never(auth_type)
