"""
Configuration helpers for the product API.

The listen address and the backing file are fixed; only operational toggles
(log level, write serialization) are read from the environment so that
routers/services do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DATA_FILE_NAME = "products.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of the service configuration."""

    host: str
    port: int
    data_file: Path
    log_level: str
    serialize_writes: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        host=DEFAULT_HOST,
        port=DEFAULT_PORT,
        data_file=Path.cwd() / DATA_FILE_NAME,
        log_level=(os.getenv("PRODUCT_API_LOG_LEVEL") or "INFO").upper(),
        serialize_writes=_bool(os.getenv("PRODUCT_API_SERIALIZE_WRITES"), False),
    )
