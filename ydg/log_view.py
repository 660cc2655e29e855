from PyQt6.QtGui import QTextCursor
from PyQt6.QtWidgets import QTextEdit

from .config import SEPARATOR
from .progress import format_progress


class LogView(QTextEdit):
    """
    Read-only log of yt-dlp output.

    Lines are inserted as plain text, so titles containing markup or
    entities are shown exactly as yt-dlp printed them. Percentage updates
    share one "Progress: X%" line that is rewritten in place; every other
    line is appended. ``reset()`` clears the log and forgets the progress
    line.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setReadOnly(True)
        self.setAcceptRichText(False)
        self._progress_block = None

    @property
    def has_progress_line(self):
        return self._progress_block is not None

    def reset(self):
        self.clear()
        self._progress_block = None

    def lines(self):
        return self.toPlainText().splitlines()

    def append_line(self, text):
        self._append_plain(text)
        self._scroll_to_end()

    def append_framed(self, text):
        self._append_plain(SEPARATOR)
        self._append_plain(text)
        self._append_plain(SEPARATOR)
        self._scroll_to_end()

    def set_progress(self, percent):
        text = format_progress(percent)
        if self._progress_block is None:
            self._progress_block = self._append_plain(text)
        else:
            block = self.document().findBlockByNumber(self._progress_block)
            cursor = QTextCursor(block)
            cursor.movePosition(QTextCursor.MoveOperation.EndOfBlock, QTextCursor.MoveMode.KeepAnchor)
            cursor.insertText(text)
        self._scroll_to_end()

    def _append_plain(self, text):
        """Add ``text`` as a new block and return that block's number."""
        document = self.document()
        cursor = QTextCursor(document)
        cursor.movePosition(QTextCursor.MoveOperation.End)
        if not document.isEmpty():
            cursor.insertBlock()
        cursor.insertText(text)
        return cursor.blockNumber()

    def _scroll_to_end(self):
        self.moveCursor(QTextCursor.MoveOperation.End)
        self.ensureCursorVisible()
