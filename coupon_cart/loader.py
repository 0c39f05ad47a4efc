"""Read cart definitions from YAML.

A cart file looks like::

    entries:
      - item: {price: 10, category: car}
      - coupon: {type: nth_item_amount_by_category, n: 2, amount: 2, category: car}
      - coupon: {type: percentage_all, pct: 25}
      - coupon: {type: next_item_percentage, pct: 10}
      - item: {price: 10, category: car}

Entry order in the file is the cart's entry order.
"""

import logging
from typing import Any, Dict, List

import yaml

from .coupons import (
    Coupon,
    NextItemPercentage,
    NthItemAmountByCategory,
    NthItemPercentage,
    PercentageAll,
)
from .errors import CartFileError
from .models import Category, Entry, Item

logger = logging.getLogger("coupon_cart.loader")


def _category(raw: Any, index: int) -> Category:
    try:
        return Category.parse(str(raw))
    except ValueError:
        raise CartFileError("unknown category", {"entry": index, "category": raw}) from None


def _field(body: Dict[str, Any], name: str, index: int, kind: str) -> Any:
    if name not in body:
        raise CartFileError(f"{kind} is missing a field", {"entry": index, "field": name})
    return body[name]


def _number(body: Dict[str, Any], name: str, index: int, kind: str) -> float:
    value = _field(body, name, index, kind)
    # bool is an int subclass, YAML "yes" must not pass as 1
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CartFileError(f"{kind} {name} must be a number", {"entry": index, "field": name, "value": value})
    return value


def _integer(body: Dict[str, Any], name: str, index: int, kind: str) -> int:
    value = _field(body, name, index, kind)
    if isinstance(value, bool) or not isinstance(value, int):
        raise CartFileError(f"{kind} {name} must be an integer", {"entry": index, "field": name, "value": value})
    return value


def _build_coupon(body: Dict[str, Any], index: int) -> Coupon:
    kind = body.get("type")
    if kind == "percentage_all":
        return PercentageAll(_number(body, "pct", index, "coupon"))
    if kind == "next_item_percentage":
        return NextItemPercentage(_number(body, "pct", index, "coupon"))
    if kind == "nth_item_percentage":
        return NthItemPercentage(_integer(body, "n", index, "coupon"), _number(body, "pct", index, "coupon"))
    if kind == "nth_item_amount_by_category":
        return NthItemAmountByCategory(
            _integer(body, "n", index, "coupon"),
            _number(body, "amount", index, "coupon"),
            _category(body.get("category"), index),
        )
    raise CartFileError("unknown coupon type", {"entry": index, "type": kind})


def _build_item(body: Dict[str, Any], index: int) -> Item:
    price = _number(body, "price", index, "item")
    if price < 0:
        raise CartFileError("item price must not be negative", {"entry": index, "field": "price", "value": price})
    return Item(_category(body.get("category"), index), price)


def _build_entry(raw: Any, index: int) -> Entry:
    if not isinstance(raw, dict) or len(raw) != 1:
        raise CartFileError("entry must have exactly one of 'item' or 'coupon'", {"entry": index})
    (kind, body), = raw.items()
    if not isinstance(body, dict):
        raise CartFileError("entry body must be a mapping", {"entry": index})
    if kind == "item":
        return _build_item(body, index)
    if kind == "coupon":
        return _build_coupon(body, index)
    raise CartFileError("unknown entry kind", {"entry": index, "kind": kind})


def parse_entries(data: Any) -> List[Entry]:
    if not isinstance(data, dict) or not isinstance(data.get("entries"), list):
        raise CartFileError("cart definition needs an 'entries' list")
    return [_build_entry(raw, i) for i, raw in enumerate(data["entries"])]


def load_entries(path: str) -> List[Entry]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise CartFileError("cannot read cart file", {"path": path, "error": e.strerror}) from e
    except yaml.YAMLError as e:
        raise CartFileError("cart file is not valid YAML", {"path": path}) from e

    try:
        entries = parse_entries(data)
    except CartFileError as e:
        e.context.setdefault("path", path)
        raise
    logger.info("loaded %s entries from %s", len(entries), path)
    return entries
