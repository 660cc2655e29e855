# Entry point: sets up logging and launches the main window.

import sys
from pathlib import Path

from PyQt6.QtWidgets import QApplication

if __package__:
    from .logger import setup_logger
    from .main_window import MainWindow
    from .utils import get_ytdlp_version
else:
    project_root = Path(__file__).resolve().parent.parent
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))
    from ydg.logger import setup_logger
    from ydg.main_window import MainWindow
    from ydg.utils import get_ytdlp_version


def main():
    app_logger = setup_logger()
    app_logger.info("Application starting (yt-dlp %s)", get_ytdlp_version())

    exit_code = 1
    try:
        app = QApplication(sys.argv)
        app.setApplicationName("YouTube-DLP GUI")
        window = MainWindow()
        window.show()
        exit_code = app.exec()
        return exit_code
    finally:
        app_logger.info("Application exiting (code=%s)", exit_code)


if __name__ == "__main__":
    raise SystemExit(main())
