from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote, urlencode

import requests

from shop_client.config import AppSettings
from shop_client.credentials import CredentialStore
from shop_client.models import RequestOptions


logger = logging.getLogger(__name__)

NEW_TOKEN_HEADER = "X-New-Token"
SESSION_EXPIRED_MESSAGE = "Session expired. Please log in again."
CONNECTION_ERROR_MESSAGE = "Cannot reach server. Verify it is running."

_AUTH_BOOTSTRAP_MARKERS = ("/login", "/signup")


class ApiError(RuntimeError):
    def __init__(self, message: str, status_code: int = 0, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class ApiConnectionError(ApiError):
    pass


class SessionExpiredError(ApiError):
    pass


class RequestFailedError(ApiError):
    pass


class HttpClient:
    def __init__(
        self,
        settings: AppSettings,
        credentials: CredentialStore,
        session: requests.Session | None = None,
    ):
        self._settings = settings
        self._credentials = credentials
        self._session = session if session is not None else requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    @property
    def credentials(self) -> CredentialStore:
        return self._credentials

    def build_headers(self, include_auth: bool = True) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}

        token = self._credentials.token
        if include_auth and token and not self._credentials.is_expired():
            headers["Authorization"] = f"Bearer {token}"

        return headers

    def request(self, path: str, options: RequestOptions | None = None) -> Any:
        if options is None:
            options = RequestOptions()

        url = f"{self._settings.base_url}{path}"
        method = options.method.upper()
        headers = {
            **self.build_headers(options.require_auth is not False),
            **(options.headers or {}),
        }

        try:
            response = self._session.request(
                method,
                url,
                headers=headers,
                json=options.body,
                timeout=self._settings.timeout_seconds,
            )
        except requests.exceptions.ConnectionError as exc:
            logger.error("API request error: %s %s: %s", method, url, exc)
            raise ApiConnectionError(CONNECTION_ERROR_MESSAGE) from exc
        except Exception:
            logger.exception("API request error: %s %s", method, url)
            raise

        try:
            return self._handle_response(method, path, response)
        except ApiError:
            raise
        except Exception:
            logger.exception("API request error: %s %s", method, url)
            raise

    def _handle_response(self, method: str, path: str, response: requests.Response) -> Any:
        # Refresh runs first so a renewed token is kept even when the call fails.
        self._apply_token_refresh(response)

        success = 200 <= response.status_code < 300
        payload = self._parse_body(response, strict=success)
        if not success:
            self._raise_for_status(method, path, response.status_code, payload)

        return payload

    def _apply_token_refresh(self, response: requests.Response) -> None:
        new_token = response.headers.get(NEW_TOKEN_HEADER)
        if not new_token:
            return

        self._credentials.refresh(new_token)
        logger.debug("Credential refreshed by server; new expiry %s", self._credentials.get_expiry())

    @staticmethod
    def _parse_body(response: requests.Response, strict: bool) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            if strict:
                raise
            return None

    def _raise_for_status(self, method: str, path: str, status_code: int, payload: Any) -> None:
        if status_code == 401:
            self._credentials.clear_session()
            if not _is_auth_bootstrap_path(path):
                logger.warning("API request error: %s %s: session expired", method, path)
                raise SessionExpiredError(SESSION_EXPIRED_MESSAGE, status_code=status_code, payload=payload)

        message = None
        if isinstance(payload, dict):
            message = payload.get("message")
        if not message:
            message = f"HTTP error {status_code}"

        logger.warning("API request error: %s %s: HTTP %s: %s", method, path, status_code, message)
        raise RequestFailedError(str(message), status_code=status_code, payload=payload)


def _is_auth_bootstrap_path(path: str) -> bool:
    route = path.split("?", 1)[0]
    return any(marker in route for marker in _AUTH_BOOTSTRAP_MARKERS)


def build_query_path(path: str, params: dict[str, Any] | None = None) -> str:
    query = urlencode(
        [(key, _format_query_value(value)) for key, value in (params or {}).items() if value is not None]
    )
    return f"{path}?{query}" if query else path


def path_segment(value: Any) -> str:
    return quote(str(value), safe="")


def _format_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
