import logging
from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Item

logger = logging.getLogger("coupon_cart.pricing")


def percentage_off(price: float, pct: float) -> float:
    return max(0, price * (1 - pct / 100))


def amount_off(price: float, amount: float) -> float:
    return max(0, price - amount)


def discount_item_by_percentage(item: "Item", pct: float) -> None:
    before = item.discounted_price
    item.discounted_price = percentage_off(before, pct)
    logger.debug("%s item: %s -> %s (%s%% off)", item.category.name, before, item.discounted_price, pct)


def discount_item_by_amount(item: "Item", amount: float) -> None:
    before = item.discounted_price
    item.discounted_price = amount_off(before, amount)
    logger.debug("%s item: %s -> %s (%s off)", item.category.name, before, item.discounted_price, amount)


def sum_discounted(items: Iterable["Item"]) -> float:
    total = sum(i.discounted_price for i in items)
    logger.info("final_price=%s", total)
    return total


def sum_seller(items: Iterable["Item"]) -> float:
    total = sum(i.seller_price for i in items)
    logger.debug("without_discount_price=%s", total)
    return total
