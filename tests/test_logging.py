import sys

from loguru import logger

import savereminder.logging as reminder_logging
from savereminder.config import AppPaths, AppSettings


def test_console_logs_go_to_stderr(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(reminder_logging, "_LOGGER_CONFIGURED", False)
    reminder_logging.configure_logging(AppSettings(paths=AppPaths(base_dir=tmp_path)))
    try:
        reminder_logging.get_logger("test").info("console check")
        captured = capsys.readouterr()
        assert "console check" in captured.err
        assert "console check" not in captured.out
    finally:
        logger.remove()
        logger.add(sys.__stderr__)
