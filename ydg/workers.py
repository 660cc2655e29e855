import json
import subprocess

from PyQt6.QtCore import QObject, QProcess, QProcessEnvironment, pyqtSignal

from .logger import logger
from .progress import OutputParser


# Helpers that talk to the yt-dlp executable: a blocking metadata query run
# before each download, and the download process itself.


class MetadataError(Exception):
    pass


class InvalidMetadataError(MetadataError):
    """yt-dlp ran but its output was not a JSON object."""


def fetch_metadata(url, program, base_args=None):
    """
    Run yt-dlp in metadata-dump mode and return the parsed JSON object.

    Blocks until the process exits. Raises MetadataError when yt-dlp cannot
    be started, exits with a non-zero code, or prints something that is not
    JSON.
    """
    command = [program, *(base_args or []), "--dump-single-json", "--flat-playlist", url]
    logger.info("Fetching metadata: %s", command)

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        logger.error("Could not run yt-dlp for metadata", exc_info=True)
        raise MetadataError(str(e)) from e

    if result.returncode != 0:
        err_output = (result.stderr or "").strip() or f"yt-dlp exited with code {result.returncode}"
        logger.warning("Metadata query failed (code=%s): %s", result.returncode, err_output)
        raise MetadataError(err_output)

    return parse_metadata(result.stdout)


def parse_metadata(output):
    text = (output or "").strip()
    if not text:
        raise InvalidMetadataError("Invalid metadata from yt-dlp")

    try:
        info = json.loads(text)
    except json.JSONDecodeError:
        info = _parse_json_lines(text)

    if not isinstance(info, dict):
        raise InvalidMetadataError("Invalid metadata from yt-dlp")
    return info


def _parse_json_lines(text):
    # Older yt-dlp invocations print one JSON document per playlist item.
    entries = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            entries.append(json.loads(line))
        except json.JSONDecodeError as e:
            logger.warning("Unparseable metadata line: %.200s", line)
            raise InvalidMetadataError("Invalid metadata from yt-dlp") from e

    if len(entries) == 1:
        return entries[0]

    first = entries[0] if entries and isinstance(entries[0], dict) else {}
    return {
        "_type": "playlist",
        "title": first.get("playlist_title") or first.get("playlist") or "",
        "entries": entries,
    }


def count_entries(info):
    """Number of items in a playlist-like result, 1 for a single video."""
    entries = info.get("entries")
    if isinstance(entries, list):
        return len(entries)
    return 1


class DownloadProcess(QObject):
    output_signal = pyqtSignal(str)
    progress_signal = pyqtSignal(str)
    finished_signal = pyqtSignal(int, bool)
    error_signal = pyqtSignal(str)

    def __init__(self, program, arguments, parent=None):
        super().__init__(parent)
        self.program = program
        self.arguments = list(arguments)
        self.parser = OutputParser()

        self.process = QProcess(self)
        self.process.setProcessChannelMode(QProcess.ProcessChannelMode.MergedChannels)

        env = QProcessEnvironment.systemEnvironment()
        env.insert("PYTHONUNBUFFERED", "1")
        env.insert("PYTHONIOENCODING", "utf-8")
        self.process.setProcessEnvironment(env)

        self.process.readyReadStandardOutput.connect(self._on_ready_read)
        self.process.finished.connect(self._on_finished)
        self.process.errorOccurred.connect(self._on_error)

    def start(self):
        logger.info("Starting download process: %s %s", self.program, self.arguments)
        self.parser.reset()
        self.process.start(self.program, self.arguments)

    def is_running(self):
        return self.process.state() != QProcess.ProcessState.NotRunning

    def kill(self):
        if not self.is_running():
            return
        logger.info("Killing download process")
        self.process.kill()
        self.process.waitForFinished(3000)

    def _emit_lines(self, lines):
        for line in lines:
            logger.debug("yt-dlp: %s", line.text)
            if line.is_progress:
                self.progress_signal.emit(line.percent)
            else:
                self.output_signal.emit(line.text)

    def _on_ready_read(self):
        data = self.process.readAllStandardOutput()
        self._emit_lines(self.parser.feed(bytes(data)))

    def _on_finished(self, exit_code, exit_status):
        self._emit_lines(self.parser.flush())
        success = exit_status == QProcess.ExitStatus.NormalExit and exit_code == 0
        logger.info("Download process finished: code=%s status=%s", exit_code, exit_status)
        self.finished_signal.emit(exit_code, success)

    def _on_error(self, error):
        if error != QProcess.ProcessError.FailedToStart:
            # Crashes are reported through finished with CrashExit.
            logger.warning("Download process error: %s (%s)", error, self.process.errorString())
            return
        message = self.process.errorString()
        logger.error("Failed to start download process: %s", message)
        self.error_signal.emit(message)
