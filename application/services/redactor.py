# application/services/redactor.py
from __future__ import annotations

from typing import Any, Dict, Optional

SENSITIVE_KEYS = {
    "password",
    "passwd",
    "pass",
    "token",
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
    "x-api-key",
}
MASK = "********"


def mask_value(key: str, value: Any, extra_keys: Optional[set] = None) -> Any:
    lowered = key.lower()
    if value is not None and (lowered in SENSITIVE_KEYS or lowered in (extra_keys or ())):
        return MASK
    return value


def mask_dict(d: Dict[str, Any], extra_keys: Optional[set] = None) -> Dict[str, Any]:
    return {k: mask_value(k, v, extra_keys) for k, v in d.items()}


def mask_request_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of a request payload that is safe to log."""
    masked = dict(payload)
    auth = payload.get("auth") or {}
    config = dict(auth.get("config") or {})
    # the api key header name is user-chosen, so its value is masked via the config
    extra = {str(config.get("header", "")).lower()} if config.get("header") else set()
    masked["headers"] = mask_dict(payload.get("headers") or {}, extra)
    if auth:
        if "value" in config:
            config["value"] = MASK
        masked["auth"] = {"type": auth.get("type"), "config": mask_dict(config)}
    return masked
