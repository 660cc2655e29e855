from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QApplication,
    QCheckBox,
    QComboBox,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from .config import (
    AUDIO_QUALITIES,
    BUTTON_BUSY,
    BUTTON_IDLE,
    MSG_COMPLETE,
    MSG_FAILED,
    SUBTITLE_LANGUAGES,
    VIDEO_QUALITIES,
)
from .log_view import LogView
from .logger import logger
from .request import DownloadRequest
from .settings_manager import SettingsManager
from .utils import get_default_download_folder, get_ytdlp_command
from .workers import (
    DownloadProcess,
    InvalidMetadataError,
    MetadataError,
    count_entries,
    fetch_metadata,
)


# Main window: collects download options, checks the URL with a metadata
# query, then runs yt-dlp and streams its output into the log.


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("YouTube-DLP GUI")
        self.resize(600, 300)

        self.settings_manager = SettingsManager()
        self.download_folder = self.settings_manager.get_download_folder() or get_default_download_folder()
        self.download_process = None

        self.setup_ui()
        self.apply_loaded_settings()

    def setup_ui(self):
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        layout = QVBoxLayout(main_widget)

        # URL
        url_layout = QHBoxLayout()
        self.url_input = QLineEdit()
        self.url_input.setPlaceholderText("Paste YouTube link here")
        self.url_input.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        url_layout.addWidget(QLabel("YouTube URL:"))
        url_layout.addWidget(self.url_input)
        layout.addLayout(url_layout)

        # Video / audio / subtitles
        quality_layout = QHBoxLayout()
        self.cb_video_quality = QComboBox()
        for label, height in VIDEO_QUALITIES:
            self.cb_video_quality.addItem(label, height)
        self.cb_video_quality.setToolTip("Maximum video height. None downloads audio only.")

        self.cb_audio_quality = QComboBox()
        self.cb_audio_quality.addItems(AUDIO_QUALITIES)
        self.cb_audio_quality.setToolTip("MP3 bitrate, used when video quality is None.")

        self.cb_subtitles = QComboBox()
        for label, code in SUBTITLE_LANGUAGES:
            self.cb_subtitles.addItem(label, code)

        quality_layout.addWidget(QLabel("Video Quality:"))
        quality_layout.addWidget(self.cb_video_quality)
        quality_layout.addWidget(QLabel("Audio Quality:"))
        quality_layout.addWidget(self.cb_audio_quality)
        quality_layout.addWidget(QLabel("Subtitles:"))
        quality_layout.addWidget(self.cb_subtitles)
        quality_layout.addStretch()
        layout.addLayout(quality_layout)

        self.cb_sponsorblock = QCheckBox("Remove sponsor segments")
        layout.addWidget(self.cb_sponsorblock)

        # Folder
        folder_layout = QHBoxLayout()
        self.lbl_folder = QLineEdit(self.download_folder)
        self.lbl_folder.setPlaceholderText("Change via Choose Folder")
        self.lbl_folder.setReadOnly(True)
        self.btn_change_folder = QPushButton("Choose Folder")
        self.btn_change_folder.clicked.connect(self.change_folder)
        folder_layout.addWidget(QLabel("Save Folder:"))
        folder_layout.addWidget(self.lbl_folder)
        folder_layout.addWidget(self.btn_change_folder)
        layout.addLayout(folder_layout)

        self.btn_download = QPushButton(BUTTON_IDLE)
        self.btn_download.clicked.connect(self.start_download)
        layout.addWidget(self.btn_download)

        self.log_view = LogView()
        layout.addWidget(self.log_view)

    def apply_loaded_settings(self):
        settings = self.settings_manager.load()

        index = self.cb_video_quality.findText(settings[SettingsManager.KEY_VIDEO_QUALITY])
        if index >= 0:
            self.cb_video_quality.setCurrentIndex(index)

        index = self.cb_audio_quality.findText(settings[SettingsManager.KEY_AUDIO_QUALITY])
        if index >= 0:
            self.cb_audio_quality.setCurrentIndex(index)

        index = self.cb_subtitles.findText(settings[SettingsManager.KEY_SUBTITLE_LANGUAGE])
        if index >= 0:
            self.cb_subtitles.setCurrentIndex(index)

        self.cb_sponsorblock.setChecked(settings[SettingsManager.KEY_REMOVE_SPONSORS])

    def save_current_settings(self):
        settings = self.settings_manager.load()
        settings.update({
            SettingsManager.KEY_DOWNLOAD_FOLDER: self.download_folder,
            SettingsManager.KEY_VIDEO_QUALITY: self.cb_video_quality.currentText(),
            SettingsManager.KEY_AUDIO_QUALITY: self.cb_audio_quality.currentText(),
            SettingsManager.KEY_SUBTITLE_LANGUAGE: self.cb_subtitles.currentText(),
            SettingsManager.KEY_REMOVE_SPONSORS: self.cb_sponsorblock.isChecked(),
        })
        self.settings_manager.save(settings)

    def change_folder(self):
        folder = QFileDialog.getExistingDirectory(self, "Select Save Folder")
        if folder:
            self.download_folder = folder
            self.lbl_folder.setText(folder)
            self.settings_manager.set_download_folder(folder)
            logger.info("Download folder changed: %s", folder)

    def build_request(self):
        return DownloadRequest(
            url=self.url_input.text(),
            output_dir=self.lbl_folder.text(),
            video_height=self.cb_video_quality.currentData(),
            audio_quality=self.cb_audio_quality.currentText(),
            subtitle_language=self.cb_subtitles.currentData(),
            remove_sponsors=self.cb_sponsorblock.isChecked(),
        )

    def _confirm(self, title, text):
        reply = QMessageBox.warning(
            self,
            title,
            text,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        return reply == QMessageBox.StandardButton.Yes

    def start_download(self):
        if self.download_process is not None:
            return

        request = self.build_request()

        if not request.is_complete():
            logger.info("Download rejected: missing URL or save folder")
            QMessageBox.critical(self, "Error", "Please provide a URL and save folder.")
            return

        if not request.has_web_scheme():
            proceed = self._confirm(
                "Warning",
                "The URL does not use http or https. This may be unsupported by yt-dlp. Proceed?",
            )
            if not proceed:
                logger.info("Download cancelled by user: non-http URL %s", request.url)
                return

        program, base_args = get_ytdlp_command(self.settings_manager.get_ytdlp_path())

        QApplication.setOverrideCursor(Qt.CursorShape.WaitCursor)
        try:
            info = fetch_metadata(request.url, program, base_args)
        except InvalidMetadataError as e:
            self.log_view.append_framed(str(e))
            self.finish_download_ui()
            return
        except MetadataError as e:
            self.log_view.append_framed(f"Failed to get metadata: {e}")
            self.finish_download_ui()
            return
        finally:
            QApplication.restoreOverrideCursor()

        entry_count = count_entries(info)
        if entry_count > 1:
            title = info.get("title") or request.url
            proceed = self._confirm(
                "Multiple Videos Detected",
                f"You are attempting to download '{title}' with {entry_count} videos. Are you sure?",
            )
            if not proceed:
                logger.info("Download cancelled by user: %s items in %s", entry_count, request.url)
                return

        self.save_current_settings()

        self.log_view.reset()
        self.log_view.append_line(f"Downloading URL: {request.url}")

        self.btn_download.setText(BUTTON_BUSY)
        self.btn_download.setEnabled(False)

        arguments = base_args + request.build_arguments()
        logger.info(
            "Download started: url=%s audio_only=%s subtitles=%s sponsorblock=%s folder=%s",
            request.url,
            request.audio_only,
            request.subtitle_language,
            request.remove_sponsors,
            request.output_dir,
        )

        self.download_process = DownloadProcess(program, arguments, self)
        self.download_process.output_signal.connect(self.on_download_output)
        self.download_process.progress_signal.connect(self.on_download_progress)
        self.download_process.finished_signal.connect(self.on_download_finished)
        self.download_process.error_signal.connect(self.on_download_error)
        self.download_process.start()

    def on_download_output(self, line):
        self.log_view.append_line(line)

    def on_download_progress(self, percent):
        self.log_view.set_progress(percent)

    def on_download_finished(self, exit_code, success):
        if success:
            logger.info("Download finished")
        else:
            logger.warning("Download failed with exit code %s", exit_code)
        self.log_view.append_framed(MSG_COMPLETE if success else MSG_FAILED)
        self.finish_download_ui()

    def on_download_error(self, err):
        self.log_view.append_framed(f"Failed to start download: {err}")
        self.finish_download_ui()

    def finish_download_ui(self):
        self.btn_download.setText(BUTTON_IDLE)
        self.btn_download.setEnabled(True)
        if self.download_process is not None:
            self.download_process.deleteLater()
            self.download_process = None

    def closeEvent(self, event):
        if self.download_process is not None and self.download_process.is_running():
            logger.info("Window closed during download, stopping yt-dlp")
            self.download_process.kill()
        event.accept()
