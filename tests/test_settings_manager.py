"""
Tests for persisted user settings.
"""

from PyQt6.QtCore import QSettings

from ydg.settings_manager import SettingsManager


class TestSettingsManager:

    def test_creates_settings_dir(self, qapp, settings_dir):
        manager = SettingsManager()
        assert settings_dir.is_dir()
        assert manager.settings_file == settings_dir / "settings.ini"

    def test_defaults(self, qapp, settings_dir):
        settings = SettingsManager().load()

        assert settings[SettingsManager.KEY_DOWNLOAD_FOLDER] == ""
        assert settings[SettingsManager.KEY_YTDLP_PATH] == ""
        assert settings[SettingsManager.KEY_VIDEO_QUALITY] == "4K (2160p)"
        assert settings[SettingsManager.KEY_AUDIO_QUALITY] == "320kbps"
        assert settings[SettingsManager.KEY_SUBTITLE_LANGUAGE] == "None"
        assert settings[SettingsManager.KEY_REMOVE_SPONSORS] is False

    def test_save_and_reload(self, qapp, settings_dir):
        manager = SettingsManager()
        settings = manager.load()
        settings.update({
            SettingsManager.KEY_DOWNLOAD_FOLDER: "/media/videos",
            SettingsManager.KEY_VIDEO_QUALITY: "720p",
            SettingsManager.KEY_AUDIO_QUALITY: "128kbps",
            SettingsManager.KEY_SUBTITLE_LANGUAGE: "German (de)",
            SettingsManager.KEY_REMOVE_SPONSORS: True,
        })
        manager.save(settings)

        reloaded = SettingsManager().load()
        assert reloaded[SettingsManager.KEY_DOWNLOAD_FOLDER] == "/media/videos"
        assert reloaded[SettingsManager.KEY_VIDEO_QUALITY] == "720p"
        assert reloaded[SettingsManager.KEY_AUDIO_QUALITY] == "128kbps"
        assert reloaded[SettingsManager.KEY_SUBTITLE_LANGUAGE] == "German (de)"
        assert reloaded[SettingsManager.KEY_REMOVE_SPONSORS] is True

    def test_invalid_choices_fall_back_to_defaults(self, qapp, settings_dir):
        manager = SettingsManager()
        raw = QSettings(str(manager.settings_file), QSettings.Format.IniFormat)
        raw.setValue(SettingsManager.KEY_VIDEO_QUALITY, "8K")
        raw.setValue(SettingsManager.KEY_AUDIO_QUALITY, "999kbps")
        raw.setValue(SettingsManager.KEY_SUBTITLE_LANGUAGE, "Klingon (tlh)")
        raw.sync()

        manager = SettingsManager()
        assert manager.get_video_quality() == "4K (2160p)"
        assert manager.get_audio_quality() == "320kbps"
        assert manager.get_subtitle_language() == "None"

    def test_set_download_folder(self, qapp, settings_dir):
        SettingsManager().set_download_folder("/srv/downloads")
        assert SettingsManager().get_download_folder() == "/srv/downloads"

    def test_ytdlp_path_is_stripped(self, qapp, settings_dir):
        manager = SettingsManager()
        raw = QSettings(str(manager.settings_file), QSettings.Format.IniFormat)
        raw.setValue(SettingsManager.KEY_YTDLP_PATH, "  /opt/bin/yt-dlp  ")
        raw.sync()

        assert SettingsManager().get_ytdlp_path() == "/opt/bin/yt-dlp"
