"""
Tests for the facade's internal logging and the stdlib bridge subscriber.
"""

import logging

from logfacade.core.logging import FacadeFormatter, Logger, LoggingSubscriber, setup_logging
from logfacade.core.logging.config import LOGGER_NAME


class TestSetupLogging:
    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging(log_level="INFO")
        logger = setup_logging(log_level="INFO")

        assert logger.name == LOGGER_NAME
        assert len(logger.handlers) == 1

    def test_level_from_argument(self):
        logger = setup_logging(log_level="debug")
        assert logger.level == logging.DEBUG

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        logger = setup_logging()
        assert logger.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logging(log_level="chatty")
        assert logger.level == logging.INFO

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "facade.log"

        logger = setup_logging(log_level="INFO", log_file=str(log_file))
        logger.info("written to file")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 2
        assert "written to file" in log_file.read_text(encoding="utf-8")


class TestFacadeFormatter:
    def _record(self, **extra):
        record = logging.LogRecord(
            name="logfacade",
            level=logging.INFO,
            pathname="test.py",
            lineno=10,
            msg="Test message",
            args=(),
            exc_info=None
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_plain_record(self):
        formatted = FacadeFormatter().format(self._record())
        assert formatted.endswith("logfacade - INFO - Test message")

    def test_category_appended(self):
        formatted = FacadeFormatter().format(self._record(category="auth"))
        assert formatted.endswith("Test message | category=auth")


class TestLoggerWrapper:
    def test_dispatch_silent_unless_debug(self, caplog):
        wrapper = Logger(log_level="INFO")

        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            wrapper.dispatch("log", "auth", 2)

        assert caplog.records == []

    def test_dispatch_traced_in_debug(self, caplog):
        wrapper = Logger(log_level="DEBUG")

        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            wrapper.dispatch("warn", "auth", 2)

        assert caplog.records[-1].getMessage() == "Dispatch | level=warn | subscribers=2"
        assert caplog.records[-1].category == "auth"

    def test_extra_fields_attached(self, caplog):
        wrapper = Logger(log_level="INFO")

        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            wrapper.info("with extra", operation="reload")

        assert caplog.records[-1].operation == "reload"


class TestLoggingSubscriber:
    def test_uncategorized_message(self, caplog):
        subscriber = LoggingSubscriber()

        with caplog.at_level(logging.INFO, logger="logfacade.messages"):
            subscriber("Cache cleared", None)

        record = caplog.records[-1]
        assert record.name == "logfacade.messages"
        assert record.getMessage() == "Cache cleared"

    def test_category_routes_to_child_logger(self, caplog):
        subscriber = LoggingSubscriber(level=logging.WARNING)

        with caplog.at_level(logging.INFO, logger="logfacade.messages"):
            subscriber("[auth] User logged in", "auth")

        record = caplog.records[-1]
        assert record.name == "logfacade.messages.auth"
        assert record.levelno == logging.WARNING
        assert record.category == "auth"

    def test_as_facade_subscriber(self, facade, manual_scheduler, caplog):
        facade.subscribe(LoggingSubscriber())

        with caplog.at_level(logging.INFO, logger="logfacade.messages"):
            facade.log.i("Job done", {"id": 7}, "jobs")
            manual_scheduler.run_pending()

        assert caplog.records[-1].getMessage() == '[jobs] Job done {"id":7}'
