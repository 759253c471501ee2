from __future__ import annotations

import logging
from typing import Any

from shop_client.http import HttpClient
from shop_client.models import RequestOptions


logger = logging.getLogger(__name__)


class AccountApi:
    def __init__(self, http_client: HttpClient):
        self._http_client = http_client

    def signup(self, user_data: dict[str, Any]) -> dict[str, Any]:
        return self._http_client.request(
            "/account/signup",
            RequestOptions(method="POST", body=user_data, require_auth=False),
        )

    def login(self, credentials: dict[str, Any]) -> dict[str, Any]:
        response = self._http_client.request(
            "/account/login",
            RequestOptions(method="POST", body=credentials, require_auth=False),
        )

        token = response.get("token") if isinstance(response, dict) else None
        if token:
            self._http_client.credentials.refresh(str(token))
            logger.info("Signed in; session valid until %s", self._http_client.credentials.get_expiry())

        return response

    def logout(self) -> None:
        try:
            self._http_client.request("/account/logout", RequestOptions(method="POST"))
        finally:
            self._http_client.credentials.clear_session()

    def delete_account(self, password: str) -> dict[str, Any]:
        response = self._http_client.request(
            "/account/delete-account",
            RequestOptions(method="DELETE", body={"password": password}),
        )
        self._http_client.credentials.clear_session()
        return response

    def make_admin(self, email: str, secret_code: str) -> dict[str, Any]:
        return self._http_client.request(
            "/account/make-admin",
            RequestOptions(
                method="POST",
                body={"email": email, "secretCode": secret_code},
                require_auth=False,
            ),
        )
