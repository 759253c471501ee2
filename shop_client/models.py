from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class RequestOptions:
    method: str = "GET"
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    require_auth: bool = True


@dataclass(frozen=True)
class AuthState:
    is_signed_in: bool
    token_expiry: datetime | None = None
