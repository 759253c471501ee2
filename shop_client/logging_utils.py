from __future__ import annotations

import logging
import os


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    level_name = (level or os.getenv("SHOP_LOG_LEVEL", "INFO")).strip().upper()
    resolved_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(resolved_level, int):
        resolved_level = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=resolved_level, format=LOG_FORMAT)
    logging.getLogger("shop_client").setLevel(resolved_level)
