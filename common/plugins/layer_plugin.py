import pytest

LAYERS = ("unit", "contract", "integration", "e2e")


def pytest_configure(config):
    """Register the layer markers used across tests/."""
    config.addinivalue_line("markers", "unit: engine behaviour, no I/O")
    config.addinivalue_line("markers", "contract: shape of dicts and JSON the harness emits")
    config.addinivalue_line("markers", "integration: loader, config and service together")
    config.addinivalue_line("markers", "e2e: the CLI end to end")
    config.addinivalue_line("markers", "slow: large carts, skipped with --env=prod")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests in prod and run layers from unit outwards."""
    if config.getoption("--env") == "prod":
        for item in items:
            if "slow" in [m.name for m in item.iter_markers()]:
                item.add_marker(pytest.mark.skip(reason="slow tests are skipped in prod"))

    def item_priority(item):
        markers = [m.name for m in item.iter_markers()]
        for rank, layer in enumerate(LAYERS):
            if layer in markers:
                return rank
        return len(LAYERS)

    items.sort(key=item_priority)


def pytest_terminal_summary(terminalreporter, exitstatus):
    counts = terminalreporter.stats
    terminalreporter.write_sep("=", "cart engine summary")
    terminalreporter.write_line(
        "passed: {}  failed: {}  skipped: {}".format(
            len(counts.get("passed", [])),
            len(counts.get("failed", [])),
            len(counts.get("skipped", [])),
        )
    )
