"""Unit tests for logging setup."""

import logging

import pytest
import structlog

from core.logging import setup_logging


class TestSetupLogging:
    def test_events_go_through_stdlib_logging(self, caplog: pytest.LogCaptureFixture):
        setup_logging()
        caplog.set_level(logging.INFO)

        structlog.get_logger("edu.test").info("profile_created", profile_id="p1")

        records = [r for r in caplog.records if r.name == "edu.test"]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert "profile_created" in records[0].getMessage()
        assert "p1" in records[0].getMessage()

    def test_level_filter_drops_debug(self, caplog: pytest.LogCaptureFixture):
        setup_logging()
        caplog.set_level(logging.INFO)

        structlog.get_logger("edu.test").debug("notification_mark_read_skipped")

        assert not [r for r in caplog.records if r.name == "edu.test"]
