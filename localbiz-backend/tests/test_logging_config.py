"""
Tests for setup_logging handler wiring
"""
import logging

import pytest

from localbiz.logging_config import setup_logging


@pytest.fixture
def setup_on_bare_root():
    """
    Run setup_logging as if the root logger had no handlers yet.

    pytest attaches its own capture handlers to the root logger, so those are
    set aside for the call and put back next to whatever setup_logging added.
    Returns the list of handlers the call added.
    """
    root = logging.getLogger()
    saved_level = root.level
    added = []

    def _setup(*args):
        existing = root.handlers[:]
        root.handlers = []
        setup_logging(*args)
        new = root.handlers[:]
        added.extend(new)
        root.handlers = existing + new
        return new

    yield _setup
    for handler in added:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(saved_level)


class TestSetupLogging:

    def test_console_only_by_default(self, setup_on_bare_root):
        handlers = setup_on_bare_root("DEBUG")

        assert logging.getLogger().level == logging.DEBUG
        assert len(handlers) == 1
        assert not isinstance(handlers[0], logging.FileHandler)

    def test_log_file_receives_records(self, setup_on_bare_root, tmp_path):
        logfile = tmp_path / "localbiz.log"

        handlers = setup_on_bare_root("INFO", str(logfile))
        logging.getLogger("localbiz.test").info("Business approved")
        for handler in handlers:
            handler.flush()

        assert any(isinstance(h, logging.FileHandler) for h in handlers)
        assert "Business approved" in logfile.read_text(encoding="utf-8")

    def test_second_call_is_noop(self, setup_on_bare_root, tmp_path):
        setup_on_bare_root("INFO")

        setup_logging("INFO", str(tmp_path / "ignored.log"))

        assert not (tmp_path / "ignored.log").exists()
