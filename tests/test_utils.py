"""
Tests for folder and executable lookup helpers.
"""

import os
import sys
from unittest.mock import patch

from ydg.utils import get_default_download_folder, get_ytdlp_command


class TestGetYtdlpCommand:

    def test_configured_path_wins(self):
        with patch("ydg.utils.shutil.which", return_value="/usr/bin/yt-dlp"):
            assert get_ytdlp_command(" /opt/yt-dlp ") == ("/opt/yt-dlp", [])

    def test_executable_on_path(self):
        with patch("ydg.utils.shutil.which", return_value="/usr/bin/yt-dlp"):
            assert get_ytdlp_command("") == ("/usr/bin/yt-dlp", [])

    def test_falls_back_to_python_module(self):
        with patch("ydg.utils.shutil.which", return_value=None):
            assert get_ytdlp_command(None) == (sys.executable, ["-m", "yt_dlp"])


class TestDefaultDownloadFolder:

    def test_returns_existing_directory(self, qapp):
        assert os.path.isdir(get_default_download_folder())

    def test_home_when_standard_locations_missing(self, qapp, tmp_path):
        with patch("ydg.utils.QStandardPaths.writableLocation", return_value=str(tmp_path / "missing")), \
                patch("ydg.utils.Path.home", return_value=tmp_path):
            assert get_default_download_folder() == str(tmp_path)
