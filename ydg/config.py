# Static option tables shown in the main window.

# Label -> maximum video height. None selects audio-only extraction.
VIDEO_QUALITIES = [
    ("4K (2160p)", 2160),
    ("1080p", 1080),
    ("720p", 720),
    ("480p", 480),
    ("None", None),
]

AUDIO_QUALITIES = ["320kbps", "256kbps", "128kbps"]

# Label -> yt-dlp subtitle language code.
SUBTITLE_LANGUAGES = [
    ("None", None),
    ("English (en)", "en"),
    ("French (fr)", "fr"),
    ("Spanish (es)", "es"),
    ("German (de)", "de"),
    ("Italian (it)", "it"),
    ("Portuguese (pt)", "pt"),
    ("Russian (ru)", "ru"),
    ("Japanese (ja)", "ja"),
    ("Chinese (zh)", "zh"),
    ("Arabic (ar)", "ar"),
]

YTDLP_EXECUTABLE = "yt-dlp"
OUTPUT_TEMPLATE = "%(title)s.%(ext)s"
MERGE_OUTPUT_FORMAT = "mp4"
AUDIO_FORMAT = "mp3"

SEPARATOR = "---------------------"
MSG_COMPLETE = "Download Complete"
MSG_FAILED = "Download Failed"

BUTTON_IDLE = "Download"
BUTTON_BUSY = "Downloading..."
