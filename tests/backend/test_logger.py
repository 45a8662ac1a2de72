"""backend.loggingのテスト"""

import logging

import pytest

from backend.logging import setup_logger, to_logging_level
from config.settings import LogLevel


class TestToLoggingLevel:
    """to_logging_level関数のテスト"""

    @pytest.mark.parametrize(
        "level, expected",
        [
            (LogLevel.DEBUG, logging.DEBUG),
            (LogLevel.ERROR, logging.ERROR),
            ("warning", logging.WARNING),
            (logging.INFO, logging.INFO),
        ],
    )
    def test_conversion(self, level, expected):
        assert to_logging_level(level) == expected

    def test_unknown_level_raises(self):
        with pytest.raises(ValueError):
            to_logging_level("VERBOSE")


class TestSetupLogger:
    """setup_logger関数のテスト"""

    def test_writes_to_file(self, tmp_path):
        """ファイルに書式付きで出力される"""
        log_file = tmp_path / "logs" / "test.log"
        logger = setup_logger("test.file", log_file=str(log_file), console=False)

        logger.info("Alert armed")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "[INFO] test.file: Alert armed" in content

    def test_level_applied(self):
        logger = setup_logger("test.level", level=LogLevel.WARNING, console=False)

        assert logger.level == logging.WARNING
        assert logger.isEnabledFor(logging.INFO) is False

    def test_no_duplicate_handlers(self):
        """再セットアップしてもハンドラは増えない"""
        setup_logger("test.dup")
        logger = setup_logger("test.dup")

        assert len(logger.handlers) == 1
