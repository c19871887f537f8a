# bootique/config.py
import json
import os
from decimal import Decimal
from pathlib import Path
from typing import List, Mapping, Optional

from pydantic import BaseModel, ValidationError

from .errors import ConfigError
from .models import Product

DEFAULT_PORT = 8085

# Catalog served when no BOOTIQUE_CATALOG file is configured.
DEFAULT_CATALOG: List[Product] = [
    Product(id="1", title="iPhone X", brand="Apple", list_price=Decimal("989.99")),
    Product(id="2", title="Galaxy S8", brand="Samsung", list_price=Decimal("699.99")),
    Product(id="3", title="3310", brand="Nokia", list_price=Decimal("19.95")),
    Product(id="4", title="Kermit", brand="KPN", list_price=Decimal("6.95")),
]

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    log_json: bool = False
    catalog_path: Optional[str] = None
    cors_origins: List[str] = ["*"]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        raw_port = env.get("BOOTIQUE_PORT", str(DEFAULT_PORT))
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigError(f"BOOTIQUE_PORT must be an integer, got {raw_port!r}")
        if not 0 < port < 65536:
            raise ConfigError(f"BOOTIQUE_PORT out of range: {port}")

        origins = [o.strip() for o in env.get("BOOTIQUE_CORS_ORIGINS", "*").split(",") if o.strip()]

        return cls(
            host=env.get("BOOTIQUE_HOST", "0.0.0.0"),
            port=port,
            log_level=env.get("BOOTIQUE_LOG_LEVEL", "INFO").upper(),
            log_json=env.get("BOOTIQUE_LOG_JSON", "false").lower() in _TRUTHY,
            catalog_path=env.get("BOOTIQUE_CATALOG") or None,
            cors_origins=origins or ["*"],
        )

    def catalog(self) -> List[Product]:
        if self.catalog_path is None:
            return list(DEFAULT_CATALOG)
        return load_catalog(self.catalog_path)


def load_catalog(path: str) -> List[Product]:
    """
    Read seed products from a JSON file holding a list of
    ``{"id", "title", "brand", "listPrice"}`` objects.

    Prices are parsed from the JSON text as decimals, never as floats.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read catalog {path}: {e}")

    try:
        raw = json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError as e:
        raise ConfigError(f"catalog {path} is not valid JSON: {e}")

    if not isinstance(raw, list):
        raise ConfigError(f"catalog {path} must contain a JSON list of products")

    try:
        return [Product.model_validate(entry) for entry in raw]
    except ValidationError as e:
        raise ConfigError(f"catalog {path} has an invalid product: {e}")
