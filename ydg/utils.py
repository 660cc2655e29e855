import os
import shutil
import sys
from pathlib import Path

from PyQt6.QtCore import QStandardPaths

from .config import YTDLP_EXECUTABLE


# Utility functions for locating folders and the yt-dlp executable.


def get_default_download_folder():
    """Movies folder, then Downloads, then the home directory."""
    for location in (
        QStandardPaths.StandardLocation.MoviesLocation,
        QStandardPaths.StandardLocation.DownloadLocation,
    ):
        path = QStandardPaths.writableLocation(location)
        if path and os.path.isdir(path):
            return path
    return str(Path.home())


def get_ytdlp_command(configured_path=""):
    """
    Return ``(program, base_args)`` used to invoke yt-dlp.

    A path saved in the settings wins. Otherwise the executable on PATH is
    used, and as a last resort the yt_dlp package installed alongside this
    application is run through the current interpreter.
    """
    configured_path = (configured_path or "").strip()
    if configured_path:
        return configured_path, []

    found = shutil.which(YTDLP_EXECUTABLE)
    if found:
        return found, []

    return sys.executable, ["-m", "yt_dlp"]


def get_ytdlp_version():
    try:
        import yt_dlp.version
        return yt_dlp.version.__version__
    except ImportError:
        return "unknown"
