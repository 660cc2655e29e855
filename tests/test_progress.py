"""
Unit tests for splitting yt-dlp output into log and progress lines.
"""

from ydg.progress import OutputParser, format_progress, match_percent


class TestMatchPercent:

    def test_decimal_percentage(self):
        line = "[download]  45.6% of   12.34MiB at    1.23MiB/s ETA 00:05"
        assert match_percent(line) == "45.6"

    def test_whole_percentage_is_not_progress(self):
        assert match_percent("[download] 100% of 12.34MiB in 00:00:10") is None

    def test_plain_line(self):
        assert match_percent("[youtube] dQw4w9WgXcQ: Downloading webpage") is None

    def test_format_progress(self):
        assert format_progress("12.5") == "Progress: 12.5%"


class TestOutputParser:

    def setup_method(self):
        self.parser = OutputParser()

    def test_splits_lines_and_classifies(self):
        lines = self.parser.feed(b"[youtube] abc: Downloading webpage\n[download]   3.2% of 10MiB\n")

        assert [line.text for line in lines] == [
            "[youtube] abc: Downloading webpage",
            "[download]   3.2% of 10MiB",
        ]
        assert not lines[0].is_progress
        assert lines[1].is_progress
        assert lines[1].percent == "3.2"

    def test_skips_blank_lines_and_trims(self):
        lines = self.parser.feed(b"  first  \n\n   \nsecond\n")
        assert [line.text for line in lines] == ["first", "second"]

    def test_carriage_returns_split_lines(self):
        lines = self.parser.feed(b"[download]  1.0%\r[download]  2.0%\r\n")
        assert [line.percent for line in lines] == ["1.0", "2.0"]

    def test_holds_partial_line_until_next_chunk(self):
        assert self.parser.feed(b"[download]  5") == []

        lines = self.parser.feed(b"0.5% of 3MiB\n")
        assert len(lines) == 1
        assert lines[0].percent == "50.5"

    def test_flush_returns_unterminated_tail(self):
        self.parser.feed(b"ERROR: Unsupported URL")
        lines = self.parser.flush()

        assert [line.text for line in lines] == ["ERROR: Unsupported URL"]
        assert self.parser.flush() == []

    def test_multibyte_character_split_across_chunks(self):
        encoded = "Destination: café.mp4\n".encode("utf-8")
        cut = encoded.index(b"\xa9")

        assert self.parser.feed(encoded[:cut]) == []
        lines = self.parser.feed(encoded[cut:])
        assert lines[0].text == "Destination: café.mp4"

    def test_accepts_text(self):
        lines = self.parser.feed("hello\n")
        assert lines[0].text == "hello"

    def test_reset_drops_pending(self):
        self.parser.feed(b"stale")
        self.parser.reset()
        assert self.parser.flush() == []
