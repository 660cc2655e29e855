from PyQt6.QtCore import QSettings

from .config import AUDIO_QUALITIES, SUBTITLE_LANGUAGES, VIDEO_QUALITIES
from .logger import APP_DATA_DIR


class SettingsManager:
    SETTINGS_DIR = APP_DATA_DIR / "settings"
    SETTINGS_FILE_NAME = "settings.ini"

    KEY_DOWNLOAD_FOLDER = "general/download_folder"
    KEY_YTDLP_PATH = "general/ytdlp_path"
    KEY_VIDEO_QUALITY = "download/video_quality"
    KEY_AUDIO_QUALITY = "download/audio_quality"
    KEY_SUBTITLE_LANGUAGE = "download/subtitle_language"
    KEY_REMOVE_SPONSORS = "download/remove_sponsors"

    DEFAULTS = {
        KEY_DOWNLOAD_FOLDER: "",
        KEY_YTDLP_PATH: "",
        KEY_VIDEO_QUALITY: VIDEO_QUALITIES[0][0],
        KEY_AUDIO_QUALITY: AUDIO_QUALITIES[0],
        KEY_SUBTITLE_LANGUAGE: SUBTITLE_LANGUAGES[0][0],
        KEY_REMOVE_SPONSORS: False,
    }

    def __init__(self):
        self.SETTINGS_DIR.mkdir(parents=True, exist_ok=True)
        self.settings_file = self.SETTINGS_DIR / self.SETTINGS_FILE_NAME
        self._settings = QSettings(str(self.settings_file), QSettings.Format.IniFormat)

    def load(self):
        return {
            self.KEY_DOWNLOAD_FOLDER: self.get_download_folder(),
            self.KEY_YTDLP_PATH: self.get_ytdlp_path(),
            self.KEY_VIDEO_QUALITY: self.get_video_quality(),
            self.KEY_AUDIO_QUALITY: self.get_audio_quality(),
            self.KEY_SUBTITLE_LANGUAGE: self.get_subtitle_language(),
            self.KEY_REMOVE_SPONSORS: self.get_remove_sponsors(),
        }

    def save(self, settings_dict):
        for key, default_value in self.DEFAULTS.items():
            value = settings_dict.get(key, default_value)
            self._settings.setValue(key, value)
        self._settings.sync()

    def _get_value(self, key):
        return self._settings.value(key, self.DEFAULTS[key])

    def _get_choice(self, key, allowed):
        value = str(self._get_value(key))
        return value if value in allowed else self.DEFAULTS[key]

    def get_download_folder(self):
        value = self._get_value(self.KEY_DOWNLOAD_FOLDER)
        return str(value) if value else ""

    def set_download_folder(self, path):
        self._settings.setValue(self.KEY_DOWNLOAD_FOLDER, str(path))
        self._settings.sync()

    def get_ytdlp_path(self):
        value = self._get_value(self.KEY_YTDLP_PATH)
        return str(value).strip() if value else ""

    def get_video_quality(self):
        return self._get_choice(self.KEY_VIDEO_QUALITY, {label for label, _ in VIDEO_QUALITIES})

    def get_audio_quality(self):
        return self._get_choice(self.KEY_AUDIO_QUALITY, set(AUDIO_QUALITIES))

    def get_subtitle_language(self):
        return self._get_choice(self.KEY_SUBTITLE_LANGUAGE, {label for label, _ in SUBTITLE_LANGUAGES})

    def get_remove_sponsors(self):
        return self._settings.value(self.KEY_REMOVE_SPONSORS, self.DEFAULTS[self.KEY_REMOVE_SPONSORS], type=bool)
