import json
import logging
from typing import Dict, List, Sequence

from .coupons import NextItemPercentage, NthItemAmountByCategory, PercentageAll
from .models import Cart, Category, Entry, Item

logger = logging.getLogger("coupon_cart.service")


def sample_entries() -> List[Entry]:
    return [
        Item(Category.CAR, 10),
        NthItemAmountByCategory(2, 2, Category.CAR),
        PercentageAll(25),
        NextItemPercentage(10),
        Item(Category.CAR, 10),
    ]


def build_cart(entries: Sequence[Entry]) -> Cart:
    cart = Cart(entries)
    logger.info(
        "cart built: %s items, %s coupons",
        len(cart.items()), len(list(cart.coupons())),
    )
    return cart


def price_carts(carts: Sequence[Sequence[Entry]]) -> List[float]:
    return [build_cart(entries).final_price() for entries in carts]


def price_summary(cart: Cart) -> Dict[str, object]:
    final = cart.final_price()
    without = cart.without_discount_price()
    return {
        "final_price": final,
        "without_discount_price": without,
        "savings": without - final,
        "item_count": len(cart.items()),
        "coupon_count": len(list(cart.coupons())),
    }


def print_receipt(cart: Cart, round_digits: int = 2) -> str:
    summary = price_summary(cart)
    payload = {
        "final_price": round(summary["final_price"], round_digits),
        "without_discount_price": round(summary["without_discount_price"], round_digits),
        "savings": round(summary["savings"], round_digits),
        "items": [i.to_dict() for i in cart.items()],
        "coupons": [dict(c.to_dict(), position=p) for p, c in cart.coupons()],
    }
    text = json.dumps(payload, ensure_ascii=False)
    print(text)
    return text
