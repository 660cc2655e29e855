import codecs
import re
from dataclasses import dataclass
from typing import List, Optional


PERCENT_PATTERN = re.compile(r"(\d+\.\d+)%")
LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass
class OutputLine:
    text: str
    percent: Optional[str] = None

    @property
    def is_progress(self) -> bool:
        return self.percent is not None


def match_percent(line):
    match = PERCENT_PATTERN.search(line)
    return match.group(1) if match else None


def format_progress(percent):
    return f"Progress: {percent}%"


class OutputParser:
    """
    Turns raw chunks of yt-dlp output into lines.

    Chunks arrive at arbitrary boundaries, so bytes are decoded incrementally
    and the text after the last line break is held back until the next chunk
    or until ``flush()``.
    """

    def __init__(self):
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending = ""

    def reset(self):
        self._decoder.reset()
        self._pending = ""

    def feed(self, data) -> List[OutputLine]:
        if isinstance(data, (bytes, bytearray)):
            data = self._decoder.decode(bytes(data))

        parts = LINE_BREAK.split(self._pending + data)
        self._pending = parts.pop()
        return self._to_lines(parts)

    def flush(self) -> List[OutputLine]:
        tail = self._pending + self._decoder.decode(b"", final=True)
        self._pending = ""
        return self._to_lines([tail])

    @staticmethod
    def _to_lines(parts):
        lines = []
        for part in parts:
            text = part.strip()
            if not text:
                continue
            lines.append(OutputLine(text, match_percent(text)))
        return lines
