import logging
import os
from pathlib import Path


LOGGER_NAME = "YoutubeDlpGui"
APP_DATA_DIR = Path.home() / ".youtube_dlp_gui"
LOG_DIR = APP_DATA_DIR / "logs"
LOG_FILE = LOG_DIR / "app.log"

FILE_HANDLER_NAME = "ydg-file"
CONSOLE_HANDLER_NAME = "ydg-console"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def _own_handler(logger, name):
    # Only handlers added here are matched; pytest and other hosts may
    # attach their own StreamHandlers to the same logger.
    for handler in logger.handlers:
        if handler.get_name() == name:
            return handler
    return None


def setup_logger(enable_console=False, log_file=None):
    """
    Configure the application logger: DEBUG to a UTF-8 log file and,
    optionally, WARNING and above to stderr. Safe to call repeatedly.
    """
    log_path = Path(os.path.abspath(log_file or LOG_FILE))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = _own_handler(logger, FILE_HANDLER_NAME)
    if file_handler is not None and Path(file_handler.baseFilename) != log_path:
        logger.removeHandler(file_handler)
        file_handler.close()
        file_handler = None

    if file_handler is None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if enable_console and _own_handler(logger, CONSOLE_HANDLER_NAME) is None:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


logger = logging.getLogger(LOGGER_NAME)
