"""
Shared fixtures for shop_client tests.
"""
import json
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
import requests

from shop_client.config import AppSettings
from shop_client.credentials import CredentialStore
from shop_client.http import HttpClient
from shop_client.storage import MemoryStore


BASE_URL = "http://api.test/api"
NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Settable UTC clock."""

    def __init__(self, now=NOW):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


def make_response(status_code=200, payload=None, headers=None, raw=None):
    """Build a real requests.Response with the given status, JSON body and headers."""
    response = requests.Response()
    response.status_code = status_code
    if raw is not None:
        response._content = raw
    elif payload is None:
        response._content = b""
    else:
        response._content = json.dumps(payload).encode("utf-8")
    response.headers.update(headers or {})
    return response


@pytest.fixture
def settings():
    return AppSettings(base_url=BASE_URL, timeout_seconds=5, token_ttl_hours=24)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def credentials(store, clock):
    return CredentialStore(store, clock=clock)


@pytest.fixture
def mock_session():
    """Mock requests.Session; tests set ``request.return_value`` or ``side_effect``."""
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    session.request.return_value = make_response(200, {"ok": True})
    return session


@pytest.fixture
def http_client(settings, credentials, mock_session):
    return HttpClient(settings, credentials, session=mock_session)


@pytest.fixture
def signed_in(store, clock, credentials):
    """Valid session: token "abc" expiring in one hour."""
    credentials.set_credential("abc")
    credentials.set_expiry(clock.now + timedelta(hours=1))
    store.set("user", json.dumps({"name": "Ana"}))
    return credentials


def sent_headers(mock_session, call_index=-1):
    return mock_session.request.call_args_list[call_index].kwargs["headers"]
