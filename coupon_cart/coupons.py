"""Coupon strategies.

Every coupon is applied exactly once, while its cart is being built, and
receives its own index in the cart's entry sequence. None of them raise: a
coupon whose target does not exist leaves the cart untouched.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, TYPE_CHECKING

from .models import Category, is_item
from .pricing import discount_item_by_amount, discount_item_by_percentage

if TYPE_CHECKING:
    from .models import Cart

logger = logging.getLogger("coupon_cart.pricing")


class Coupon(ABC):
    """Discount rule applied against a cart from a given position."""

    @abstractmethod
    def apply(self, cart: "Cart", position: int) -> None:
        pass

    @abstractmethod
    def describe(self) -> str:
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, object]:
        pass

    def __repr__(self):
        return f"<{self.describe()}>"


class PercentageAll(Coupon):
    """Takes ``pct`` percent off every item in the cart."""

    def __init__(self, pct: float):
        self.pct = pct

    def apply(self, cart: "Cart", position: int) -> None:
        logger.debug("applying %s at %s", self.describe(), position)
        for item in cart.items():
            discount_item_by_percentage(item, self.pct)

    def describe(self) -> str:
        return f"{self.pct}% off all items"

    def to_dict(self) -> Dict[str, object]:
        return {"type": "percentage_all", "pct": self.pct}


class NextItemPercentage(Coupon):
    """Takes ``pct`` percent off the first item placed after the coupon."""

    def __init__(self, pct: float):
        self.pct = pct

    def apply(self, cart: "Cart", position: int) -> None:
        logger.debug("applying %s at %s", self.describe(), position)
        for entry in cart.entries[position + 1:]:
            if is_item(entry):
                discount_item_by_percentage(entry, self.pct)
                return

    def describe(self) -> str:
        return f"{self.pct}% off next item"

    def to_dict(self) -> Dict[str, object]:
        return {"type": "next_item_percentage", "pct": self.pct}


class NthItemPercentage(Coupon):
    """Takes ``pct`` percent off one item picked by a position-shifted count.

    The item counter starts at the coupon's own position and the target is
    ``n + position``; the scan runs over the whole cart from its first entry,
    including items that precede the coupon.
    """

    def __init__(self, n: int, pct: float):
        self.n = n
        self.pct = pct

    def apply(self, cart: "Cart", position: int) -> None:
        logger.debug("applying %s at %s", self.describe(), position)
        target = self.n + position
        count = position
        for entry in cart.entries:
            if not is_item(entry):
                continue
            count += 1
            if count == target:
                discount_item_by_percentage(entry, self.pct)
                return

    def describe(self) -> str:
        return f"{self.pct}% off item #{self.n}"

    def to_dict(self) -> Dict[str, object]:
        return {"type": "nth_item_percentage", "n": self.n, "pct": self.pct}


class NthItemAmountByCategory(Coupon):
    """Takes a fixed ``amount`` off the n-th item (1-based) of ``category``."""

    def __init__(self, n: int, amount: float, category: Category):
        self.n = n
        self.amount = amount
        self.category = category

    def apply(self, cart: "Cart", position: int) -> None:
        logger.debug("applying %s at %s", self.describe(), position)
        bucket = cart.items_in(self.category)
        if 1 <= self.n <= len(bucket):
            discount_item_by_amount(bucket[self.n - 1], self.amount)

    def describe(self) -> str:
        return f"{self.amount} off {self.category.name} #{self.n}"

    def to_dict(self) -> Dict[str, object]:
        return {
            "type": "nth_item_amount_by_category",
            "n": self.n,
            "amount": self.amount,
            "category": self.category.name,
        }
