from __future__ import annotations

from typing import Any

from shop_client.http import HttpClient, path_segment
from shop_client.models import RequestOptions


class PurchasesApi:
    def __init__(self, http_client: HttpClient):
        self._http_client = http_client

    def buy(self, product_id: str, quantity: int = 1) -> dict[str, Any]:
        return self._http_client.request(
            f"/buy/{path_segment(product_id)}",
            RequestOptions(method="POST", body={"quantity": quantity}),
        )
