from __future__ import annotations

import logging
from io import StringIO

from registrant_extract.logging.init import (
    LOGGER_NAME,
    SUMMARY_LEVEL,
    LabeledFormatter,
    get_logger,
    log_summary,
    reset_logging,
    setup_logging,
)


def test_setup_logging_creates_logger_with_labeled_formatter():
    reset_logging()
    logger = setup_logging()
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, LabeledFormatter)
    assert logger.propagate is False
    reset_logging()


def test_setup_logging_is_idempotent():
    reset_logging()
    first = setup_logging()
    second = setup_logging()
    assert first is second
    assert len(second.handlers) == 1
    assert get_logger() is first
    reset_logging()


def test_setup_logging_debug_lowers_level():
    reset_logging()
    logger = setup_logging(debug=True)
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG
    reset_logging()


def test_logging_labeled_prefixes():
    captured = StringIO()
    logger = logging.getLogger("test_registrant_extract_labels")
    logger.setLevel(logging.DEBUG)
    for h in logger.handlers[:]:
        logger.removeHandler(h)
    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    handler = logging.StreamHandler(captured)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    logger.info("info message")
    logger.warning("warning message")
    logger.error("error message")
    logger.log(SUMMARY_LEVEL, "files=1/1")

    assert captured.getvalue().splitlines() == [
        "INFO info message",
        "WARN warning message",
        "ERROR error message",
        "SUMMARY files=1/1",
    ]


def test_module_loggers_propagate_into_app_logger(capsys):
    reset_logging()
    setup_logging()
    logging.getLogger(f"{LOGGER_NAME}.services.orchestrator").info("from a module")
    log_summary("files=0/0")
    out = capsys.readouterr().out
    assert "INFO from a module" in out
    assert "SUMMARY files=0/0" in out
    reset_logging()
