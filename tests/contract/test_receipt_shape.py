import json

import pytest

from common.factories import make_item
from coupon_cart.coupons import NextItemPercentage, NthItemAmountByCategory, PercentageAll
from coupon_cart.models import Category
from coupon_cart.service import build_cart, price_summary, print_receipt, sample_entries


@pytest.mark.contract
def test_price_summary_shape():
    summary = price_summary(build_cart(sample_entries()))
    assert set(summary.keys()) == {
        "final_price", "without_discount_price", "savings", "item_count", "coupon_count",
    }
    assert summary["item_count"] == 2
    assert summary["coupon_count"] == 3
    assert summary["savings"] == pytest.approx(20 - 12.9)


@pytest.mark.contract
def test_item_to_dict_shape():
    d = make_item(10, Category.SCOOTER).to_dict()
    assert d == {"category": "SCOOTER", "seller_price": 10, "discounted_price": 10}


@pytest.mark.contract
def test_receipt_json_shape(capsys):
    cart = build_cart([
        make_item(10),
        NthItemAmountByCategory(1, 1, Category.CAR),
        NextItemPercentage(50),
        PercentageAll(10),
    ])
    text = print_receipt(cart, round_digits=1)
    assert capsys.readouterr().out.strip() == text

    payload = json.loads(text)
    assert set(payload.keys()) == {"final_price", "without_discount_price", "savings", "items", "coupons"}
    assert payload["final_price"] == 8.1
    assert [c["position"] for c in payload["coupons"]] == [1, 2, 3]
    assert payload["coupons"][0] == {
        "type": "nth_item_amount_by_category", "n": 1, "amount": 1, "category": "CAR", "position": 1,
    }
    assert isinstance(payload["items"], list)
