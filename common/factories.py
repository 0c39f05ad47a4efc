from dataclasses import dataclass
from typing import List

from coupon_cart.models import Cart, Category, Entry, Item


@dataclass(frozen=True)
class Defaults:
    base_price: float = 10.0
    category: Category = Category.CAR


def make_item(price: float = Defaults.base_price, category: Category = Defaults.category) -> Item:
    return Item(category, price)


def make_items(n: int = 1, base: float = Defaults.base_price, category: Category = Defaults.category) -> List[Item]:
    return [Item(category, base + i) for i in range(n)]


def make_cart(entries: List[Entry] = None) -> Cart:
    return Cart(entries or [])


CART_YAML = """\
entries:
  - item: {price: 10, category: car}
  - coupon: {type: nth_item_amount_by_category, n: 2, amount: 2, category: car}
  - coupon: {type: percentage_all, pct: 25}
  - coupon: {type: next_item_percentage, pct: 10}
  - item: {price: 10, category: car}
"""
