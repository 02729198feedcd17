import io
import logging

import pytest
from rich.console import Console

from searchdsl import Search
from searchdsl.logging_config import get_logger, setup_sdk_logging


@pytest.fixture(autouse=True)
def restore_library_logger():
    """Puts the 'searchdsl' logger back in its import-time state after each test."""
    logger = get_logger()
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_null_handler_silence(capsys):
    """Verifies that the logger is silent before setup_sdk_logging is called."""
    test_logger = get_logger("searchdsl.test_silence")

    test_logger.warning("This should go into the void")

    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""


def test_library_has_null_handler():
    """Checks that the root searchdsl logger defaults to a NullHandler."""
    handlers = get_logger().handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers), (
        "searchdsl root logger should have a NullHandler by default."
    )


def test_logs_are_generated_but_swallowed(caplog):
    test_logger = get_logger("searchdsl.internal")

    with caplog.at_level(logging.DEBUG):
        test_logger.debug("Internal diagnostic message")

    assert "Internal diagnostic message" in caplog.text


def test_rejected_input_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="searchdsl"):
        with pytest.raises(ValueError):
            Search().add_uri_param("not-a-real-param", "x")

    assert "not-a-real-param" in caplog.text


def test_setup_clears_existing_handlers():
    """Verify that multiple calls do not duplicate handlers."""
    setup_sdk_logging(level="INFO", pretty=False)
    setup_sdk_logging(level="DEBUG", pretty=False)

    logger = get_logger()
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_setup_uses_provided_console():
    """Verify the logger outputs to the specific console provided."""
    custom_output = io.StringIO()
    test_console = Console(file=custom_output, force_terminal=True)

    setup_sdk_logging(level="INFO", pretty=True, console=test_console)
    logger = get_logger()
    logger.info("Test Console Sync")

    output = custom_output.getvalue()
    assert "searchdsl" in output
    assert "Test Console Sync" in output


def test_logger_isolation():
    """Ensure library logs do not propagate to the root logger."""
    setup_sdk_logging()
    assert get_logger().propagate is False
