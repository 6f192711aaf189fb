"""
Tests for the logging helpers.
"""

import logging

from plexquant.core.logger import configure_logging, get_logger, log_execution_time


class TestLogging:
    def test_configure_logging_with_file(self, tmp_path):
        log_file = tmp_path / "logs" / "plexquant.log"
        package_logger = configure_logging("debug", log_file=log_file)
        try:
            get_logger("plexquant.tests").debug("hello from the tests")
            for handler in package_logger.handlers:
                handler.flush()

            assert package_logger.level == logging.DEBUG
            assert "hello from the tests" in log_file.read_text()
        finally:
            for handler in list(package_logger.handlers):
                if isinstance(handler, logging.FileHandler):
                    package_logger.removeHandler(handler)
                    handler.close()
            package_logger.setLevel(logging.WARNING)

    def test_log_execution_time(self, caplog):
        logger = get_logger("plexquant.tests.timing")

        @log_execution_time(logger)
        def work(x):
            return x * 2

        with caplog.at_level(logging.INFO, logger="plexquant.tests.timing"):
            assert work(21) == 42

        assert any("finished in" in record.getMessage() for record in caplog.records)
