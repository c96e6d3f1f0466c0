"""Tests for logging setup."""

import json
import logging

import pytest

from jobboard.logging_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    engine_level = logging.getLogger("sqlalchemy.engine").level
    yield
    logging.getLogger("sqlalchemy.engine").setLevel(engine_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


def test_json_logs(capsys, restore_root_logger):
    setup_logging("INFO", json_logs=True)

    logging.getLogger("jobboard.test").warning("listing %s delisted", "abc")

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["message"] == "listing abc delisted"
    assert record["level"] == "WARNING"
    assert record["logger"] == "jobboard.test"
    assert "line" in record


def test_plain_logs_and_sqlalchemy_level(capsys, restore_root_logger):
    setup_logging("debug", json_logs=False)

    logging.getLogger("jobboard.test").info("seeded")

    assert " - jobboard.test - INFO - seeded" in capsys.readouterr().out
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    setup_logging("INFO", json_logs=False, debug=True)
    assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
