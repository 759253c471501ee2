from .account_api import AccountApi
from .users_api import UsersApi
from .products_api import ProductsApi
from .purchases_api import PurchasesApi
from .orders_api import OrdersApi

__all__ = ["AccountApi", "UsersApi", "ProductsApi", "PurchasesApi", "OrdersApi"]
