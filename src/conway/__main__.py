"""Main entry point for Conway application."""
import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication
from .gui.main_window import MainWindow
from .utils.config import Config


def create_application(argv: Optional[List[str]] = None) -> QApplication:
    """Create (or reuse) the QApplication configured from Config.

    Args:
        argv: Command line arguments; sys.argv if None

    Returns:
        Application instance
    """
    app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)
    app.setApplicationName(Config.SETTINGS_APPLICATION)
    app.setOrganizationName(Config.SETTINGS_ORGANIZATION)
    app.setApplicationDisplayName(Config.WINDOW_TITLE)

    # Set application style
    app.setStyle(Config.APP_STYLE)
    return app


def main():
    """Run the Conway application."""
    app = create_application()

    # Create and show main window
    window = MainWindow()
    window.show()

    # Run application
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
