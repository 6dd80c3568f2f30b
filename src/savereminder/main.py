"""save-reminder GUI entrypoint."""

from __future__ import annotations

import sys

from PySide6 import QtWidgets

from savereminder.config import AppSettings, load_settings
from savereminder.core.app import build_context
from savereminder.logging import configure_logging, get_logger
from savereminder.ui.shell import EditorWindow


def main() -> None:
    settings: AppSettings = load_settings()
    configure_logging(settings)
    logger = get_logger("main")

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName(settings.app_name)
    ctx = build_context(settings)

    window = EditorWindow(ctx)
    ctx.start()
    window.show()
    logger.info("save-reminder ready")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
