"""Allow running HIIT as a module: python -m hiit."""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from .database.db import init_db
from .app import HiitApp


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure logging for the application."""
    override = os.environ.get("HIIT_LOG_LEVEL")
    if override:
        level = logging.getLevelName(override.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    return logging.getLogger("hiit")


def main() -> None:
    logger = setup_logging()
    init_db()
    logger.info("HIIT ready")

    app = QApplication(sys.argv)
    app.setApplicationName("HIIT")
    app.setOrganizationName("HIIT")

    window = HiitApp()
    window.show_restored()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
