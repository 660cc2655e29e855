"""
Shared fixtures for widget and settings tests.
"""

import os

# Must be set before a QApplication exists.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from ydg.settings_manager import SettingsManager


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def settings_dir(tmp_path, monkeypatch):
    """Point SettingsManager at a throwaway directory."""
    path = tmp_path / "settings"
    monkeypatch.setattr(SettingsManager, "SETTINGS_DIR", path)
    return path


@pytest.fixture
def window(qapp, settings_dir, tmp_path):
    from ydg.main_window import MainWindow

    win = MainWindow()
    win.download_folder = str(tmp_path)
    win.lbl_folder.setText(str(tmp_path))
    yield win
    win.download_process = None
    win.close()
    win.deleteLater()
