"""Errors raised by the cart harness (file loading, settings, CLI).

The pricing engine itself never raises; see ``coupon_cart.coupons``.
"""

from typing import Any, Dict, Optional


class CartError(ValueError):
    """Base for harness errors.

    Attributes:
        message: Human-readable error description
        context: Where it happened (file path, entry index, offending value)
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self):
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({details})"


class CartFileError(CartError):
    """A cart definition could not be turned into entries."""


class SettingsError(CartError):
    """Environment variables or config files hold unusable values."""
