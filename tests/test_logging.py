# tests/test_logging.py
import logging

from rich.logging import RichHandler

from inventory.logging_config import setup_logging


def test_setup_logging_installs_rich_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("info")
        assert root.level == logging.INFO
        assert any(isinstance(h, RichHandler) for h in root.handlers)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
