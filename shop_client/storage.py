from __future__ import annotations

import json
import logging
import os
from typing import Protocol

from msal_extensions import CrossPlatLock, FilePersistence, FilePersistenceWithDataProtection
from msal_extensions.persistence import PersistenceNotFound


logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
TOKEN_EXPIRY_KEY = "tokenExpiry"
USER_KEY = "user"


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        return dict(self._values)


class FileStore:
    """Key-value store kept as one JSON document on disk.

    Every operation re-reads the file under a cross-process lock, so several
    clients (or processes) pointed at the same location observe each other's
    writes and never drop keys they did not touch. Concurrent writes to the
    same key are last-write-wins.
    """

    def __init__(self, path: str):
        self._persistence = self._build_persistence(path)
        self._lock_path = self._persistence.get_location() + ".lockfile"

    @staticmethod
    def _build_persistence(path: str):
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        try:
            return FilePersistenceWithDataProtection(path)
        except Exception:
            return FilePersistence(path)

    @property
    def location(self) -> str:
        return self._persistence.get_location()

    def get(self, key: str) -> str | None:
        with CrossPlatLock(self._lock_path):
            value = self._load().get(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        with CrossPlatLock(self._lock_path):
            values = self._load()
            values[key] = value
            self._save(values)

    def delete(self, key: str) -> None:
        with CrossPlatLock(self._lock_path):
            values = self._load()
            if key not in values:
                return
            del values[key]
            self._save(values)

    def _load(self) -> dict[str, str]:
        try:
            raw = self._persistence.load()
        except PersistenceNotFound:
            return {}

        if not raw or not raw.strip():
            return {}

        try:
            parsed = json.loads(raw)
        except ValueError:
            logger.warning("Ignoring unreadable session file at %s", self.location)
            return {}

        if not isinstance(parsed, dict):
            logger.warning("Ignoring session file at %s: expected a JSON object", self.location)
            return {}
        return parsed

    def _save(self, values: dict[str, str]) -> None:
        self._persistence.save(json.dumps(values))
