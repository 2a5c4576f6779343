# tests/test_logging_conf.py
"""
Logging Configuration Tests - Root Logger Setup

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- cambio.shared.logging_conf (setup_logging)
- pytest (testing framework)
"""
import logging
from logging.handlers import RotatingFileHandler

import pytest  # Testing framework for writing and running tests

from cambio.shared.logging_conf import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    urllib3_level = logging.getLogger("urllib3").level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    logging.getLogger("urllib3").setLevel(urllib3_level)


class TestSetupLogging:
    def test_stdout_only_by_default(self):
        handlers = setup_logging()
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert logging.getLogger().level == logging.INFO

    def test_rotating_file_is_created_with_parent_dirs(self, tmp_path):
        log_file = tmp_path / "logs" / "nested" / "cambio.log"
        handlers = setup_logging(log_file=log_file, max_bytes=1024, backup_count=2, log_stdout=False)

        assert len(handlers) == 1
        file_handler = handlers[0]
        assert isinstance(file_handler, RotatingFileHandler)
        assert file_handler.maxBytes == 1024
        assert file_handler.backupCount == 2

        logging.getLogger("cambio.test").warning("refresh failed")
        file_handler.flush()
        assert "WARNING cambio.test :: refresh failed" in log_file.read_text(encoding="utf-8")

    def test_stdout_and_file(self, tmp_path):
        handlers = setup_logging(log_file=tmp_path / "cambio.log", log_stdout=True)
        assert len(handlers) == 2

    def test_stdout_kept_when_nothing_else_is_configured(self):
        handlers = setup_logging(log_stdout=False)
        assert len(handlers) == 1
        assert not isinstance(handlers[0], RotatingFileHandler)

    def test_level_by_name(self):
        setup_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_name_rejected(self):
        with pytest.raises(ValueError):
            setup_logging(level="chatty")

    def test_transport_logger_is_quieted(self):
        setup_logging(level=logging.DEBUG)
        assert logging.getLogger("urllib3").level == logging.WARNING
