# tests/application/services/test_auth_config_builder.py
import pytest

from application.services.auth_config_builder import build_auth_config
from domain.request import ApiKeyAuthConfig, AuthType, BasicAuthConfig, BearerAuthConfig
from domain.request_fields import AuthFieldValues


class TestBuildAuthConfig:
    def test_none_returns_no_config(self):
        assert build_auth_config(AuthType.NONE, AuthFieldValues(token="t")) is None

    def test_basic(self):
        config = build_auth_config(AuthType.BASIC, AuthFieldValues(username="u", password="p"))
        assert config == BasicAuthConfig(username="u", password="p")
        assert config.to_dict() == {"username": "u", "password": "p"}

    def test_bearer(self):
        config = build_auth_config(AuthType.BEARER, AuthFieldValues(token="abc"))
        assert config.to_dict() == {"token": "abc"}

    def test_apikey(self):
        config = build_auth_config(
            AuthType.APIKEY,
            AuthFieldValues(key="k", value="v", header="X-Token"),
        )
        assert config.to_dict() == {"key": "k", "value": "v", "header": "X-Token"}

    @pytest.mark.parametrize(
        "auth_type, expected",
        [
            (AuthType.BASIC, {"username": "", "password": ""}),
            (AuthType.BEARER, {"token": ""}),
            (AuthType.APIKEY, {"key": "", "value": "", "header": "X-API-Key"}),
        ],
    )
    def test_missing_fields_degrade_to_defaults(self, auth_type, expected):
        config = build_auth_config(auth_type, AuthFieldValues())
        assert config.to_dict() == expected

    def test_empty_api_key_header_falls_back(self):
        config = build_auth_config(AuthType.APIKEY, AuthFieldValues(header=""))
        assert config.header == "X-API-Key"

    def test_only_type_fields_are_present(self):
        everything = AuthFieldValues(
            username="u", password="p", token="t", key="k", value="v", header="h"
        )
        basic = build_auth_config(AuthType.BASIC, everything)
        bearer = build_auth_config(AuthType.BEARER, everything)
        apikey = build_auth_config(AuthType.APIKEY, everything)

        assert isinstance(bearer, BearerAuthConfig)
        assert isinstance(apikey, ApiKeyAuthConfig)
        assert set(basic.to_dict()) == {"username", "password"}
        assert set(bearer.to_dict()) == {"token"}
        assert set(apikey.to_dict()) == {"key", "value", "header"}
