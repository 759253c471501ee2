from __future__ import annotations

from typing import Any

from shop_client.http import HttpClient, path_segment
from shop_client.models import RequestOptions


class UsersApi:
    def __init__(self, http_client: HttpClient):
        self._http_client = http_client

    def get_me(self) -> dict[str, Any]:
        return self._http_client.request("/users/me")

    def get_all(self) -> Any:
        return self._http_client.request("/users")

    def get_by_id(self, user_id: str) -> dict[str, Any]:
        return self._http_client.request(f"/users/{path_segment(user_id)}")

    def update(self, user_id: str, user_data: dict[str, Any]) -> dict[str, Any]:
        return self._http_client.request(
            f"/users/{path_segment(user_id)}",
            RequestOptions(method="PUT", body=user_data),
        )

    def delete(self, user_id: str) -> dict[str, Any]:
        return self._http_client.request(
            f"/users/{path_segment(user_id)}",
            RequestOptions(method="DELETE"),
        )
