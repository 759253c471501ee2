from __future__ import annotations

from datetime import datetime, timedelta, timezone
import logging
from typing import Callable

from shop_client.storage import TOKEN_EXPIRY_KEY, TOKEN_KEY, USER_KEY, KeyValueStore


logger = logging.getLogger(__name__)

DEFAULT_TOKEN_TTL = timedelta(days=1)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CredentialStore:
    """Bearer token and its expiry, mirrored into a persistent key-value store.

    The token is read from the store once, at construction. The expiry is
    read from the store on every ``is_expired()`` call.
    """

    def __init__(
        self,
        store: KeyValueStore,
        token_ttl: timedelta = DEFAULT_TOKEN_TTL,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._store = store
        self._token_ttl = token_ttl
        self._clock = clock
        self._token: str | None = store.get(TOKEN_KEY) or None

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def token_ttl(self) -> timedelta:
        return self._token_ttl

    def now(self) -> datetime:
        return self._clock()

    def set_credential(self, token: str | None) -> None:
        if token:
            self._store.set(TOKEN_KEY, token)
            self._token = token
        else:
            self._store.delete(TOKEN_KEY)
            self._token = None

    def get_expiry(self) -> datetime | None:
        raw_expiry = self._store.get(TOKEN_EXPIRY_KEY)
        if not raw_expiry:
            return None
        return _parse_timestamp(raw_expiry)

    def set_expiry(self, expiry: datetime) -> None:
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=timezone.utc)
        self._store.set(TOKEN_EXPIRY_KEY, expiry.astimezone(timezone.utc).isoformat())

    def is_expired(self) -> bool:
        expiry = self.get_expiry()
        if expiry is None:
            return True
        return self.now() >= expiry

    def is_authenticated(self) -> bool:
        return self._token is not None and not self.is_expired()

    def refresh(self, token: str) -> None:
        self.set_credential(token)
        self.set_expiry(self.now() + self._token_ttl)

    def clear_session(self) -> None:
        self.set_credential(None)
        self._store.delete(USER_KEY)
        self._store.delete(TOKEN_EXPIRY_KEY)


def _parse_timestamp(raw_value: str) -> datetime | None:
    value = raw_value.strip()
    # fromisoformat() only accepts a trailing "Z" from Python 3.11 on.
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        logger.warning("Ignoring unparseable token expiry %r", raw_value)
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed
