import json

import pytest

from coupon_cart.__main__ import main


@pytest.mark.e2e
def test_sample_cart_receipt(capsys, clean_env):
    assert main([]) == 0

    payload = json.loads(capsys.readouterr().out.strip())
    assert payload["final_price"] == 12.9
    assert payload["without_discount_price"] == 20
    assert [i["discounted_price"] for i in payload["items"]] == pytest.approx([7.5, 5.4])


@pytest.mark.e2e
def test_yaml_cart_receipt_with_rounding(capsys, clean_env, cart_file, monkeypatch):
    monkeypatch.setenv("CART_ROUND_DIGITS", "0")
    assert main([str(cart_file)]) == 0

    payload = json.loads(capsys.readouterr().out.strip())
    assert payload["final_price"] == 13
    assert len(payload["coupons"]) == 3


@pytest.mark.e2e
def test_bad_cart_file_exit_code(capsys, clean_env, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("entries:\n  - coupon: {type: bogo}\n")

    assert main([str(path)]) == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "unknown coupon type" in captured.err


@pytest.mark.e2e
def test_non_numeric_price_exit_code(capsys, clean_env, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("entries:\n  - item: {price: ten, category: car}\n  - coupon: {type: percentage_all, pct: 10}\n")

    assert main([str(path)]) == 2
    assert "item price must be a number" in capsys.readouterr().err


@pytest.mark.e2e
@pytest.mark.parametrize(
    "name,value,message",
    [("CART_ROUND_DIGITS", "two", "round digits must be an integer"), ("CART_LOG_LEVEL", "loud", "unknown log level")],
    ids=["bad-digits", "bad-level"],
)
def test_bad_settings_exit_code(capsys, clean_env, monkeypatch, name, value, message):
    monkeypatch.setenv(name, value)

    assert main([]) == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert message in captured.err
