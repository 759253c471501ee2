from __future__ import annotations

from datetime import timedelta
from typing import Any

import requests

from shop_client.apis import AccountApi, OrdersApi, ProductsApi, PurchasesApi, UsersApi
from shop_client.config import AppSettings
from shop_client.credentials import CredentialStore
from shop_client.http import HttpClient
from shop_client.models import AuthState
from shop_client.storage import FileStore, KeyValueStore


class ShopService:
    def __init__(
        self,
        credentials: CredentialStore,
        account_api: AccountApi,
        users_api: UsersApi,
        products_api: ProductsApi,
        purchases_api: PurchasesApi,
        orders_api: OrdersApi,
    ):
        self._credentials = credentials
        self.account = account_api
        self.users = users_api
        self.products = products_api
        self.purchases = purchases_api
        self.orders = orders_api

    def auth_state(self) -> AuthState:
        if not self._credentials.is_authenticated():
            return AuthState(is_signed_in=False)
        return AuthState(is_signed_in=True, token_expiry=self._credentials.get_expiry())

    def sign_in(self, email: str, password: str) -> AuthState:
        self.account.login({"email": email, "password": password})
        return self.auth_state()

    def sign_out(self) -> None:
        self.account.logout()

    def current_user(self) -> dict[str, Any]:
        return self.users.get_me()


def build_service(
    settings: AppSettings | None = None,
    store: KeyValueStore | None = None,
    session: requests.Session | None = None,
) -> ShopService:
    if settings is None:
        settings = AppSettings.from_env()
    if store is None:
        store = FileStore(settings.storage_path)

    credentials = CredentialStore(store, token_ttl=timedelta(hours=settings.token_ttl_hours))
    http_client = HttpClient(settings, credentials, session=session)
    return ShopService(
        credentials=credentials,
        account_api=AccountApi(http_client),
        users_api=UsersApi(http_client),
        products_api=ProductsApi(http_client),
        purchases_api=PurchasesApi(http_client),
        orders_api=OrdersApi(http_client),
    )
