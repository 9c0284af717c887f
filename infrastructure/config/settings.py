# infrastructure/config/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

from domain.exceptions import ValidationError

_env_path = Path(__file__).parent.parent.parent / ".env"

ENV_PREFIX = "LITEPOST_"


def _read_env(env_file: Optional[Path]) -> dict:
    """.env values first, real environment variables override them."""
    values: dict = {}
    if env_file is not None and env_file.exists():
        values.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
    values.update(os.environ)
    return values


def _as_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValidationError(f"{ENV_PREFIX}{name} must be a number: {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    api_base_url: str = "http://localhost:8080"
    dispatch_timeout_sec: float = 30
    http_timeout_sec: float = 30
    user_agent: str = "Litepost/1.0"
    log_level: str = "INFO"
    port: int = 8080
    max_stored_requests: int = 1000

    @classmethod
    def from_env(cls, env_file: Optional[Path] = _env_path) -> "Settings":
        env = _read_env(env_file)
        defaults = cls()
        return cls(
            api_base_url=env.get(ENV_PREFIX + "API_BASE_URL") or defaults.api_base_url,
            dispatch_timeout_sec=_as_float(env, "DISPATCH_TIMEOUT_SEC", defaults.dispatch_timeout_sec),
            http_timeout_sec=_as_float(env, "HTTP_TIMEOUT_SEC", defaults.http_timeout_sec),
            user_agent=env.get(ENV_PREFIX + "USER_AGENT") or defaults.user_agent,
            log_level=(env.get(ENV_PREFIX + "LOG_LEVEL") or defaults.log_level).upper(),
            port=int(_as_float(env, "PORT", defaults.port)),
            max_stored_requests=int(_as_float(env, "MAX_STORED_REQUESTS", defaults.max_stored_requests)),
        )
