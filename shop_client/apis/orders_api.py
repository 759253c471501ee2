from __future__ import annotations

from typing import Any

from shop_client.http import HttpClient, build_query_path, path_segment
from shop_client.models import RequestOptions


class OrdersApi:
    base_path = "/orders"

    def __init__(self, http_client: HttpClient):
        self._http_client = http_client

    def list(self, params: dict[str, Any] | None = None) -> Any:
        return self._http_client.request(build_query_path(self.base_path, params))

    def get_by_id(self, order_id: str) -> dict[str, Any]:
        return self._http_client.request(self._item_path(order_id))

    def by_user(self, user_id: str) -> Any:
        return self._http_client.request(f"{self.base_path}/user/{path_segment(user_id)}")

    def update(self, order_id: str, order_data: dict[str, Any]) -> dict[str, Any]:
        return self._http_client.request(
            self._item_path(order_id),
            RequestOptions(method="PUT", body=order_data),
        )

    def update_status(self, order_id: str, status: str) -> dict[str, Any]:
        return self._http_client.request(
            f"{self._item_path(order_id)}/status",
            RequestOptions(method="PATCH", body={"status": status}),
        )

    def delete(self, order_id: str) -> dict[str, Any]:
        return self._http_client.request(
            self._item_path(order_id),
            RequestOptions(method="DELETE"),
        )

    def by_status(self, status: str) -> Any:
        return self._http_client.request(f"{self.base_path}/status/{path_segment(status)}")

    def _item_path(self, order_id: str) -> str:
        return f"{self.base_path}/{path_segment(order_id)}"
