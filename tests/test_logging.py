import json
import logging

import pytest

from revolut.logging import JsonFormatter, configure_logging


def _record(**extra):
    record = logging.LogRecord(
        "revolut.client", logging.WARNING, __file__, 1, "backend error %s", (422,), None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_request_context():
    out = json.loads(
        JsonFormatter().format(
            _record(product="merchant", method="POST", endpoint="https://x/api/orders", status=422)
        )
    )

    assert out["level"] == "WARNING"
    assert out["logger"] == "revolut.client"
    assert out["message"] == "backend error 422"
    assert out["product"] == "merchant"
    assert out["status"] == 422
    assert "environment" not in out


@pytest.fixture
def revolut_logger():
    logger = logging.getLogger("revolut")
    saved = (list(logger.handlers), logger.level)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])


def test_configure_logging_replaces_handlers(revolut_logger):
    configure_logging("json", level="debug")
    logger = configure_logging("json", level="debug")

    assert logger is revolut_logger
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)
    assert logger.level == logging.DEBUG


def test_configure_logging_text(revolut_logger):
    logger = configure_logging("text", level="warning")
    assert not isinstance(logger.handlers[0].formatter, JsonFormatter)
    assert logger.level == logging.WARNING
