# bootique/errors.py
from typing import Any, Dict, Optional


class BootiqueError(Exception):
    """Base class for errors raised by the store."""

    def __init__(self, message: str, code: str = "bootique_error", details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ProductNotFound(BootiqueError):
    def __init__(self, product_id: str) -> None:
        super().__init__("product not found", code="product_not_found", details={"productId": product_id})
        self.product_id = product_id


class ConfigError(BootiqueError):
    def __init__(self, message: str) -> None:
        super().__init__(message, code="config_error")
