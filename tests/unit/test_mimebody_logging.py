"""Unit tests for the command line logging setup."""

import logging

import pytest

from mimebody.logging_utils import PACKAGE_LOGGER_NAME, configure_logging, reset_logging


@pytest.fixture(autouse=True)
def clean_package_logger():
    yield
    reset_logging()


@pytest.mark.unit
@pytest.mark.cli
class TestConfigureLogging:
    """Test that only the package logger is configured."""

    def test_returns_package_logger(self):
        logger = configure_logging("INFO")
        assert logger.name == PACKAGE_LOGGER_NAME
        assert logger.level == logging.INFO
        assert logger.propagate is False

    def test_root_logger_untouched(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level

        configure_logging("DEBUG")

        assert root.handlers == handlers
        assert root.level == level

    def test_repeated_calls_replace_handlers(self):
        configure_logging("INFO")
        logger = configure_logging("WARNING")
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_trace_forces_debug(self):
        logger = configure_logging("ERROR", trace_mode=True)
        assert logger.level == logging.DEBUG
        assert "%(name)s" in logger.handlers[0].formatter._fmt

    def test_child_records_reach_stderr(self, capsys: pytest.CaptureFixture):
        configure_logging("WARNING")
        logging.getLogger("mimebody.cli").warning("collision in %s", "textPlain")
        logging.getLogger("mimebody.cli").info("hidden")

        err = capsys.readouterr().err
        assert "WARNING: collision in textPlain" in err
        assert "hidden" not in err

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = configure_logging("INFO", log_file=str(log_file))
        logging.getLogger("mimebody.api").info("written")
        for handler in logger.handlers:
            handler.flush()

        assert "INFO: written" in log_file.read_text(encoding="utf-8")

    def test_unopenable_log_file(self, tmp_path, capsys: pytest.CaptureFixture):
        logger = configure_logging("INFO", log_file=str(tmp_path / "missing" / "run.log"))
        assert len(logger.handlers) == 1
        assert "Could not open log file" in capsys.readouterr().err

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("LOUD")


@pytest.mark.unit
@pytest.mark.cli
class TestResetLogging:
    """Test restoring the package logger."""

    def test_reset_restores_propagation(self):
        configure_logging("DEBUG")
        reset_logging()

        logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        assert logger.handlers == []
        assert logger.level == logging.NOTSET
        assert logger.propagate is True

    def test_reset_keeps_foreign_handlers(self):
        logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        foreign = logging.NullHandler()
        logger.addHandler(foreign)
        try:
            configure_logging("INFO")
            reset_logging()
            assert logger.handlers == [foreign]
        finally:
            logger.removeHandler(foreign)
