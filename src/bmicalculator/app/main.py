"""
Run with: python -m bmicalculator
"""
from __future__ import annotations

import logging
import os
import sys

from bmicalculator.app.application import create_app
from bmicalculator.app.state import Store
from bmicalculator.app.ui.main_window import MainWindow
from bmicalculator.logging_config import setup_logging

import pyqtgraph as pg

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")

LOG_LEVEL_ENV = "BMICALCULATOR_LOG_LEVEL"


def _log_level() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def main() -> int:
    """Main entry point for the application."""
    setup_logging(level=_log_level())

    app = create_app()
    store = Store()
    win = MainWindow(store)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
