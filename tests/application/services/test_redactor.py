# tests/application/services/test_redactor.py
from application.services.redactor import MASK, mask_dict, mask_request_payload, mask_value


class TestMaskValue:
    def test_mask_password(self):
        assert mask_value("password", "secret123") == MASK

    def test_mask_token(self):
        assert mask_value("token", "abc") == MASK

    def test_mask_authorization(self):
        assert mask_value("authorization", "Bearer token123") == MASK

    def test_mask_cookie_headers(self):
        assert mask_value("cookie", "session=abc123") == MASK
        assert mask_value("set-cookie", "session=xyz789") == MASK

    def test_mask_api_key_header(self):
        assert mask_value("X-API-Key", "k") == MASK

    def test_mask_case_insensitive(self):
        assert mask_value("PASSWORD", "secret") == MASK
        assert mask_value("Authorization", "token") == MASK

    def test_no_mask_regular_key(self):
        assert mask_value("username", "john") == "john"

    def test_mask_none_value(self):
        assert mask_value("password", None) is None

    def test_extra_keys(self):
        assert mask_value("X-Token", "t", extra_keys={"x-token"}) == MASK


class TestMaskDict:
    def test_mask_dict_with_sensitive_data(self):
        data = {"User-Agent": "Litepost/1.0", "Authorization": "Basic dTpw"}
        assert mask_dict(data) == {"User-Agent": "Litepost/1.0", "Authorization": MASK}

    def test_mask_dict_empty_dict(self):
        assert mask_dict({}) == {}


class TestMaskRequestPayload:
    def test_masks_auth_config_and_headers(self):
        payload = {
            "name": "n",
            "method": "GET",
            "url": "https://example.com",
            "headers": {"Authorization": "x", "Accept": "*/*"},
            "query_params": {},
            "auth": {
                "type": "apikey",
                "config": {"key": "k", "value": "secret", "header": "X-Token"},
            },
        }

        masked = mask_request_payload(payload)

        assert masked["headers"] == {"Authorization": MASK, "Accept": "*/*"}
        assert masked["auth"] == {
            "type": "apikey",
            "config": {"key": "k", "value": MASK, "header": "X-Token"},
        }
        assert payload["auth"]["config"]["value"] == "secret"

    def test_masks_basic_password(self):
        payload = {
            "headers": {},
            "auth": {"type": "basic", "config": {"username": "u", "password": "p"}},
        }

        masked = mask_request_payload(payload)

        assert masked["auth"]["config"] == {"username": "u", "password": MASK}

    def test_payload_without_auth(self):
        payload = {"headers": {"A": "1"}}
        assert mask_request_payload(payload) == {"headers": {"A": "1"}}
