from __future__ import annotations

import argparse
import getpass
import json
import logging
import sys
from typing import Any, Sequence

from shop_client.config import AppSettings, ConfigurationError
from shop_client.http import ApiError
from shop_client.logging_utils import configure_logging
from shop_client.services import ShopService, build_service


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shop-client", description="Storefront API session client")
    subcommands = parser.add_subparsers(dest="command", required=True)

    login = subcommands.add_parser("login", help="Sign in and persist the session token")
    login.add_argument("email")
    login.add_argument("--password", help="Prompted for when omitted")

    subcommands.add_parser("logout", help="Sign out and clear the persisted session")
    subcommands.add_parser("status", help="Show whether a valid session is stored")
    subcommands.add_parser("me", help="Show the signed-in user's profile")

    products = subcommands.add_parser("products", help="List products")
    products.add_argument("--category")
    products.add_argument("--seller")

    orders = subcommands.add_parser("orders", help="List orders")
    orders.add_argument("--status")
    return parser


def run_command(service: ShopService, args: argparse.Namespace) -> Any:
    if args.command == "login":
        password = args.password or getpass.getpass("Password: ")
        state = service.sign_in(args.email, password)
        return {"signedIn": state.is_signed_in, "tokenExpiry": _format_expiry(state.token_expiry)}

    if args.command == "logout":
        service.sign_out()
        return {"signedIn": False}

    if args.command == "status":
        state = service.auth_state()
        return {"signedIn": state.is_signed_in, "tokenExpiry": _format_expiry(state.token_expiry)}

    if args.command == "me":
        return service.current_user()

    if args.command == "products":
        if args.seller:
            return service.products.by_seller(args.seller)
        if args.category:
            return service.products.by_category(args.category)
        return service.products.list()

    if args.command == "orders":
        if args.status:
            return service.orders.by_status(args.status)
        return service.orders.list()

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = AppSettings.from_env()
    except ConfigurationError as exc:
        configure_logging()
        logger.error("Configuration error: %s", exc)
        return 2

    configure_logging(settings.log_level)
    service = build_service(settings)

    try:
        result = run_command(service, args)
    except ApiError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


def _format_expiry(expiry) -> str | None:
    return expiry.isoformat() if expiry is not None else None


if __name__ == "__main__":
    sys.exit(main())
