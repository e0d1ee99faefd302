import logging

import pytest

from storefront import logger as log_setup


@pytest.fixture
def fresh_logging(monkeypatch):
    package = logging.getLogger(log_setup.PACKAGE_LOGGER)
    saved_handlers, saved_level = list(package.handlers), package.level
    package.handlers = []
    monkeypatch.setattr(log_setup, "_configured", False)
    yield package
    for handler in package.handlers:
        handler.close()
    package.handlers = saved_handlers
    package.setLevel(saved_level)


def test_file_logging_writes_to_configured_path(fresh_logging, monkeypatch, tmp_path):
    log_file = tmp_path / "logs" / "storefront.log"
    monkeypatch.setenv("LOG_TO_FILE", "true")
    monkeypatch.setenv("LOG_FILE", str(log_file))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    log = log_setup.get_logger("storefront.cart")
    log.debug("hydrated %d entries", 2)
    for handler in fresh_logging.handlers:
        handler.flush()

    assert fresh_logging.level == logging.DEBUG
    assert "DEBUG [storefront.cart] hydrated 2 entries" in log_file.read_text()


def test_setup_runs_once(fresh_logging, monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_TO_FILE", "true")
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "a.log"))

    log_setup.setup_logging()
    count = len(fresh_logging.handlers)
    log_setup.setup_logging()

    assert len(fresh_logging.handlers) == count


def test_unknown_level_falls_back_to_info(fresh_logging, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    log_setup.setup_logging()

    assert fresh_logging.level == logging.INFO


def test_names_outside_the_package_are_nested():
    assert log_setup.get_logger("shop").name == "storefront.shop"
    assert log_setup.get_logger("storefront.orders").name == "storefront.orders"
    assert log_setup.get_logger().name == "storefront"
