import logging

import pytest

from common.factories import CART_YAML

pytest_plugins = [
    "common.plugins.layer_plugin",
]


def pytest_addoption(parser):
    parser.addoption("--env", action="store", default="dev", help="test environment")


@pytest.fixture(scope="session")
def env(pytestconfig):
    return pytestconfig.getoption("--env")


@pytest.fixture(scope="function")
def log_capture(caplog):
    logger = logging.getLogger("coupon_cart.pricing")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    return caplog


def pytest_generate_tests(metafunc):
    if "size" in metafunc.fixturenames:
        metafunc.parametrize("size", [1, 5, 50], ids=["small", "medium", "large"])


@pytest.fixture(scope="function")
def cart_file(tmp_path):
    p = tmp_path / "cart.yaml"
    p.write_text(CART_YAML, encoding="utf-8")
    yield p
    p.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def clean_env(monkeypatch, tmp_path):
    for name in ("CART_ENV", "CART_LOG_LEVEL", "CART_ROUND_DIGITS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CART_CONFIG_DIR", str(tmp_path / "configs"))
    return tmp_path / "configs"
