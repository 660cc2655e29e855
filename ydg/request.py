import os
import re
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import urlparse

from .config import (
    AUDIO_FORMAT,
    AUDIO_QUALITIES,
    MERGE_OUTPUT_FORMAT,
    OUTPUT_TEMPLATE,
    VIDEO_QUALITIES,
)


# DownloadRequest holds the options collected from the window for a single
# download attempt and turns them into yt-dlp arguments.


@dataclass
class DownloadRequest:
    url: str
    output_dir: str
    video_height: Optional[int] = VIDEO_QUALITIES[0][1]  # None means audio only
    audio_quality: str = AUDIO_QUALITIES[0]
    subtitle_language: Optional[str] = None
    remove_sponsors: bool = False

    def __post_init__(self):
        self.url = (self.url or "").strip()
        self.output_dir = (self.output_dir or "").strip()

    @property
    def audio_only(self) -> bool:
        return self.video_height is None

    def is_complete(self) -> bool:
        return bool(self.url) and bool(self.output_dir)

    def has_web_scheme(self) -> bool:
        # Malformed text such as "http://[oops" is not a web URL.
        try:
            scheme = urlparse(self.url).scheme
        except ValueError:
            return False
        return scheme.lower() in ("http", "https")

    def build_arguments(self) -> List[str]:
        args = ["--newline", "-o", os.path.join(self.output_dir, OUTPUT_TEMPLATE)]

        if self.audio_only:
            args += [
                "-x",
                "--audio-format", AUDIO_FORMAT,
                "--audio-quality", audio_bitrate(self.audio_quality),
            ]
        else:
            args += [
                "-f", video_format_selector(self.video_height),
                "--merge-output-format", MERGE_OUTPUT_FORMAT,
            ]

        if self.subtitle_language:
            args += ["--write-subs", "--sub-langs", self.subtitle_language]

        if self.remove_sponsors:
            args += ["--sponsorblock-remove", "all"]

        args.append(self.url)
        return args


def video_format_selector(max_height):
    return f"bestvideo[height<={int(max_height)}]+bestaudio/best"


def audio_bitrate(label):
    """'320kbps' -> '320'."""
    match = re.match(r"\s*(\d+)", label or "")
    if not match:
        raise ValueError(f"Unrecognized audio quality: {label!r}")
    return match.group(1)
