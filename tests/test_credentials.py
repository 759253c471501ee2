"""
Tests for credentials.py
"""
from datetime import datetime, timedelta, timezone

from shop_client.credentials import CredentialStore
from shop_client.storage import MemoryStore


class TestIsExpired:
    # Boundary: no expiry stored
    def test_missing_expiry_is_expired(self, credentials):
        assert credentials.is_expired() is True

    def test_future_expiry_is_valid(self, credentials, clock):
        credentials.set_expiry(clock.now + timedelta(seconds=1))

        assert credentials.is_expired() is False

    # Boundary: exactly at expiry counts as expired
    def test_expiry_equal_to_now_is_expired(self, credentials, clock):
        credentials.set_expiry(clock.now)

        assert credentials.is_expired() is True

    def test_past_expiry_is_expired(self, credentials, clock):
        credentials.set_expiry(clock.now - timedelta(seconds=1))

        assert credentials.is_expired() is True

    def test_expiry_is_reread_on_every_call(self, store, credentials, clock):
        assert credentials.is_expired() is True

        store.set("tokenExpiry", (clock.now + timedelta(hours=1)).isoformat())

        assert credentials.is_expired() is False

    def test_clock_moving_past_expiry(self, credentials, clock):
        credentials.set_expiry(clock.now + timedelta(minutes=5))
        clock.advance(minutes=5)

        assert credentials.is_expired() is True

    def test_javascript_style_timestamp(self, store, clock):
        store.set("tokenExpiry", "2026-03-02T12:00:00.000Z")
        credentials = CredentialStore(store, clock=clock)

        assert credentials.is_expired() is False
        assert credentials.get_expiry() == datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)

    def test_naive_timestamp_is_read_as_utc(self, store, clock):
        store.set("tokenExpiry", "2026-03-01T11:59:59")
        credentials = CredentialStore(store, clock=clock)

        assert credentials.is_expired() is True

    def test_unparseable_expiry_is_expired(self, store, clock):
        store.set("tokenExpiry", "tomorrow-ish")
        credentials = CredentialStore(store, clock=clock)

        assert credentials.get_expiry() is None
        assert credentials.is_expired() is True

    def test_has_no_side_effects(self, store, credentials, clock):
        credentials.set_expiry(clock.now - timedelta(days=1))
        before = store.snapshot()

        credentials.is_expired()

        assert store.snapshot() == before


class TestSetCredential:
    def test_persists_token(self, store, credentials):
        credentials.set_credential("abc")

        assert credentials.token == "abc"
        assert store.get("token") == "abc"

    def test_none_clears_token(self, store, credentials):
        credentials.set_credential("abc")
        credentials.set_credential(None)

        assert credentials.token is None
        assert store.get("token") is None

    def test_does_not_touch_expiry(self, store, credentials, clock):
        credentials.set_expiry(clock.now + timedelta(hours=1))
        stored_expiry = store.get("tokenExpiry")

        credentials.set_credential("abc")
        credentials.set_credential(None)

        assert store.get("tokenExpiry") == stored_expiry

    def test_token_loaded_at_construction(self, clock):
        store = MemoryStore({"token": "persisted"})

        credentials = CredentialStore(store, clock=clock)

        assert credentials.token == "persisted"

    def test_token_not_reloaded_after_construction(self, clock):
        store = MemoryStore({"token": "persisted"})
        credentials = CredentialStore(store, clock=clock)

        store.set("token", "written-elsewhere")

        assert credentials.token == "persisted"


class TestRefreshAndClear:
    def test_refresh_sets_token_and_one_day_expiry(self, store, credentials, clock):
        credentials.refresh("fresh")

        assert store.get("token") == "fresh"
        assert credentials.get_expiry() == clock.now + timedelta(days=1)

    def test_refresh_uses_configured_ttl(self, store, clock):
        credentials = CredentialStore(store, token_ttl=timedelta(hours=2), clock=clock)

        credentials.refresh("fresh")

        assert credentials.get_expiry() == clock.now + timedelta(hours=2)

    def test_clear_session_removes_all_session_keys(self, store, signed_in):
        signed_in.clear_session()

        assert signed_in.token is None
        assert store.snapshot() == {}

    def test_is_authenticated(self, credentials, clock):
        assert credentials.is_authenticated() is False

        credentials.refresh("abc")
        assert credentials.is_authenticated() is True

        clock.advance(days=1)
        assert credentials.is_authenticated() is False
