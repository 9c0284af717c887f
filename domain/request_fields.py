# domain/request_fields.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from domain.request import AuthType, BodyType, HttpMethod

# ordered (key, value) rows as typed into the editor, blanks included
KeyValueRows = Tuple[Tuple[str, str], ...]


@dataclass(frozen=True)
class AuthFieldValues:
    """Raw auth inputs. None means the input is not present at all."""
    username: Optional[str] = None
    password: Optional[str] = None
    token: Optional[str] = None
    key: Optional[str] = None
    value: Optional[str] = None
    header: Optional[str] = None


@dataclass(frozen=True)
class RequestFieldState:
    method: HttpMethod = HttpMethod.GET
    url: str = ""
    header_rows: KeyValueRows = ()
    param_rows: KeyValueRows = ()
    body_type: BodyType = BodyType.NONE
    body_content: str = ""
    auth_type: AuthType = AuthType.NONE
    auth_fields: AuthFieldValues = field(default_factory=AuthFieldValues)
