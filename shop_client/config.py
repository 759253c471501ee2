from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path


DEFAULT_BASE_URL = "http://localhost:3000/api"


class ConfigurationError(ValueError):
    pass


@dataclass(frozen=True)
class AppSettings:
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: int = 30
    token_ttl_hours: int = 24
    storage_path: str = ""
    log_level: str = "INFO"

    @staticmethod
    def from_env() -> "AppSettings":
        _load_dotenv_if_present()

        base_url = os.getenv("SHOP_API_BASE_URL", DEFAULT_BASE_URL).strip().rstrip("/")

        invalid_numbers = []
        timeout_seconds = _int_from_env("SHOP_TIMEOUT_SECONDS", "30", invalid_numbers)
        token_ttl_hours = _int_from_env("SHOP_TOKEN_TTL_HOURS", "24", invalid_numbers)
        if invalid_numbers:
            raise ConfigurationError(
                "Settings must be whole numbers: " + ", ".join(invalid_numbers)
            )

        default_storage_path = os.path.join(
            os.getenv("LOCALAPPDATA", os.getcwd()),
            "ShopClient",
            "session.json",
        )
        storage_path = os.getenv("SHOP_STORAGE_PATH", default_storage_path).strip()
        log_level = os.getenv("SHOP_LOG_LEVEL", "INFO").strip().upper()

        settings = AppSettings(
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            token_ttl_hours=token_ttl_hours,
            storage_path=storage_path,
            log_level=log_level,
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError("SHOP_API_BASE_URL must start with http:// or https://")

        if self.timeout_seconds <= 0:
            raise ConfigurationError("SHOP_TIMEOUT_SECONDS must be greater than 0")

        if self.token_ttl_hours <= 0:
            raise ConfigurationError("SHOP_TOKEN_TTL_HOURS must be greater than 0")

        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(
                "SHOP_LOG_LEVEL must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
            )


def _int_from_env(name: str, default: str, invalid: list[str]) -> int:
    raw_value = os.getenv(name, default).strip()
    try:
        return int(raw_value)
    except ValueError:
        invalid.append(name)
        return 0


def _load_dotenv_if_present(file_name: str = ".env") -> None:
    for candidate in _candidate_env_files(file_name):
        _load_env_file(candidate)


def _candidate_env_files(file_name: str) -> list[Path]:
    explicit = os.getenv("SHOP_ENV_FILE", "").strip()
    candidates = [Path(explicit).expanduser()] if explicit else []
    candidates += [Path.cwd() / file_name, Path(__file__).resolve().parent.parent / file_name]

    # The working directory is usually the project root; read it once.
    unique: dict[str, Path] = {}
    for path in candidates:
        unique.setdefault(str(path.resolve()), path)
    return list(unique.values())


def _load_env_file(path: Path) -> None:
    if not path.is_file():
        return

    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return

    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, value = (part.strip() for part in line.split("=", 1))
        if key:
            os.environ.setdefault(key, value.strip('"').strip("'"))
