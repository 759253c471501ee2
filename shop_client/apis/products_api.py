from __future__ import annotations

from typing import Any

from shop_client.http import HttpClient, build_query_path, path_segment
from shop_client.models import RequestOptions


PUBLIC = RequestOptions(require_auth=False)


class ProductsApi:
    base_path = "/produtos"

    def __init__(self, http_client: HttpClient):
        self._http_client = http_client

    def list(self, params: dict[str, Any] | None = None) -> Any:
        return self._http_client.request(build_query_path(self.base_path, params), PUBLIC)

    def get_by_id(self, product_id: str) -> dict[str, Any]:
        return self._http_client.request(self._item_path(product_id), PUBLIC)

    def create(self, product_data: dict[str, Any]) -> dict[str, Any]:
        return self._http_client.request(
            self.base_path,
            RequestOptions(method="POST", body=product_data),
        )

    def update(self, product_id: str, product_data: dict[str, Any]) -> dict[str, Any]:
        return self._http_client.request(
            self._item_path(product_id),
            RequestOptions(method="PUT", body=product_data),
        )

    def update_rating(self, product_id: str, rating: float) -> dict[str, Any]:
        return self._http_client.request(
            f"{self._item_path(product_id)}/rating",
            RequestOptions(method="PATCH", body={"rating": rating}),
        )

    def delete(self, product_id: str) -> dict[str, Any]:
        return self._http_client.request(
            self._item_path(product_id),
            RequestOptions(method="DELETE"),
        )

    def by_seller(self, seller: str) -> Any:
        return self._http_client.request(f"{self.base_path}/seller/{path_segment(seller)}", PUBLIC)

    def by_category(self, category: str) -> Any:
        return self._http_client.request(f"{self.base_path}/category/{path_segment(category)}", PUBLIC)

    def with_free_shipping(self) -> Any:
        return self._http_client.request(f"{self.base_path}/frete-gratis", PUBLIC)

    def mine(self) -> Any:
        return self._http_client.request(f"{self.base_path}/my-products", RequestOptions(require_auth=True))

    def _item_path(self, product_id: str) -> str:
        return f"{self.base_path}/{path_segment(product_id)}"
