"""Unit tests for the chat export parser.

Tests cover: line splitting, separator precedence, rejected input, word
counting, sentiment markers and priority, whole-export parsing, file
reading, and logging.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from jugaad.chat import classify_sentiment, parse_chat, parse_chat_file, parse_message

# ---------------------------------------------------------------------------
# parse_message
# ---------------------------------------------------------------------------


class TestParseMessage:
    """Splitting a single exported line."""

    def test_party_example(self) -> None:
        """The canonical funny example splits into all six fields."""
        result = parse_message("25/01/2025, 14:30 - Rahul: Bhai party kab hai? 😂")

        assert result is not None
        assert result.date == "25/01/2025"
        assert result.time == "14:30"
        assert result.sender == "Rahul"
        assert result.text == "Bhai party kab hai? 😂"
        assert result.word_count == 5
        assert result.sentiment == "funny"

    def test_love_example(self) -> None:
        """A body containing 'love' is classified as love."""
        result = parse_message("01/12/2024, 09:15 - Priya: I love this song")

        assert result is not None
        assert result.sender == "Priya"
        assert result.text == "I love this song"
        assert result.word_count == 4
        assert result.sentiment == "love"

    def test_body_is_trimmed(self) -> None:
        """Leading and trailing whitespace is stripped from the body."""
        result = parse_message("01/01/2025, 10:00 - Amit:    hello there   ")

        assert result is not None
        assert result.text == "hello there"

    def test_sender_with_spaces(self) -> None:
        """Multi-word sender names are kept whole."""
        result = parse_message("01/01/2025, 10:00 - Rahul Kumar Singh: hi")

        assert result is not None
        assert result.sender == "Rahul Kumar Singh"

    def test_first_colon_ends_sender(self) -> None:
        """The first ': ' after the sender ends it; later ones stay in the body."""
        result = parse_message("01/01/2025, 10:00 - Amit: Note: meet at 5")

        assert result is not None
        assert result.sender == "Amit"
        assert result.text == "Note: meet at 5"

    def test_first_dash_ends_stamp(self) -> None:
        """The first ' - ' ends the stamp; later dashes belong to the body."""
        result = parse_message("01/01/2025, 10:00 - Amit: a - b - c")

        assert result is not None
        assert result.time == "10:00"
        assert result.text == "a - b - c"

    def test_stamp_without_comma(self) -> None:
        """A stamp with no ', ' gives the whole stamp as date and an empty time."""
        result = parse_message("yesterday - Amit: hi")

        assert result is not None
        assert result.date == "yesterday"
        assert result.time == ""

    def test_empty_body(self) -> None:
        """An empty body yields zero words and neutral sentiment."""
        result = parse_message("01/01/2025, 10:00 - Amit: ")

        assert result is not None
        assert result.text == ""
        assert result.word_count == 0
        assert result.sentiment == "neutral"


class TestParseMessageRejects:
    """Inputs that cannot be interpreted return None."""

    @pytest.mark.parametrize("value", [None, 42, ["a - b: c"], b"01/01/2025, 10:00 - A: b"])
    def test_non_string(self, value: object) -> None:
        """Non-string input is rejected."""
        assert parse_message(value) is None

    def test_missing_dash_separator(self) -> None:
        """A line without ' - ' is rejected."""
        assert parse_message("01/01/2025, 10:00 Amit: hi") is None

    def test_missing_colon_separator(self) -> None:
        """A line without ': ' after the sender is rejected."""
        assert parse_message("01/01/2025, 10:00 - Amit joined the group") is None

    def test_colon_only_before_dash(self) -> None:
        """A ': ' that appears only before ' - ' does not count."""
        assert parse_message("Note: 10:00 - Amit left") is None

    def test_empty_string(self) -> None:
        """The empty string is rejected."""
        assert parse_message("") is None


class TestWordCount:
    """Word counting ignores runs of whitespace."""

    def test_extra_internal_spaces(self) -> None:
        """Multiple spaces between words do not create extra words."""
        result = parse_message("01/01/2025, 10:00 - Amit: chai    pe   chalein")

        assert result is not None
        assert result.word_count == 3

    def test_single_word(self) -> None:
        """One word counts as one."""
        result = parse_message("01/01/2025, 10:00 - Amit: ok")

        assert result is not None
        assert result.word_count == 1


# ---------------------------------------------------------------------------
# classify_sentiment
# ---------------------------------------------------------------------------


class TestClassifySentiment:
    """Marker detection and priority."""

    @pytest.mark.parametrize("text", ["lol 😂", "nice :)", "haha", "HAHAHA sahi hai", "Haha"])
    def test_funny_markers(self, text: str) -> None:
        """Laughing emoji, ':)' and 'haha' in any case are funny."""
        assert classify_sentiment(text) == "funny"

    @pytest.mark.parametrize("text", ["❤", "miss you ❤️", "LOVE it", "bahut pyaar", "Pyaar"])
    def test_love_markers(self, text: str) -> None:
        """Heart, 'love' and 'pyaar' in any case are love."""
        assert classify_sentiment(text) == "love"

    def test_funny_beats_love(self) -> None:
        """When both kinds of marker are present, funny wins."""
        assert classify_sentiment("haha I love it") == "funny"
        assert classify_sentiment("❤ 😂") == "funny"

    def test_neutral(self) -> None:
        """No markers gives neutral."""
        assert classify_sentiment("kal milte hain") == "neutral"

    def test_love_substring(self) -> None:
        """'love' inside a longer word still counts."""
        assert classify_sentiment("lovely weather") == "love"

    def test_frown_is_not_funny(self) -> None:
        """':(' is not a funny marker."""
        assert classify_sentiment("sad :(") == "neutral"


# ---------------------------------------------------------------------------
# parse_chat / parse_chat_file
# ---------------------------------------------------------------------------

_EXPORT = (
    "25/01/2025, 14:30 - Rahul: Bhai party kab hai? 😂\n"
    "25/01/2025, 14:31 - Priya: I love parties\n"
    "\n"
    "Messages are end-to-end encrypted\n"
    "25/01/2025, 14:32 - Rahul: Saturday chalega\n"
)


class TestParseChat:
    """Parsing a whole export."""

    def test_messages_in_order(self) -> None:
        """Valid lines become messages in file order."""
        result = parse_chat(_EXPORT)

        assert [m.sender for m in result.messages] == ["Rahul", "Priya", "Rahul"]
        assert result.messages[2].text == "Saturday chalega"

    def test_senders_unique_by_first_appearance(self) -> None:
        """Senders are listed once, in order of first appearance."""
        result = parse_chat(_EXPORT)

        assert result.senders == ["Rahul", "Priya"]

    def test_sentiment_counts(self) -> None:
        """Every sentiment key is present with its count."""
        result = parse_chat(_EXPORT)

        assert result.sentiment_counts == {"funny": 1, "love": 1, "neutral": 1}

    def test_unparseable_line_warns(self) -> None:
        """A system line produces a warning with its 1-based line number."""
        result = parse_chat(_EXPORT)

        assert len(result.warnings) == 1
        assert result.warnings[0].line_number == 4
        assert result.warnings[0].raw_line == "Messages are end-to-end encrypted"

    def test_blank_lines_skipped(self) -> None:
        """Blank lines are neither messages nor warnings."""
        result = parse_chat("\n\n   \n")

        assert result.messages == []
        assert result.warnings == []

    def test_empty_input(self) -> None:
        """Empty input gives an empty result with zeroed counts."""
        result = parse_chat("")

        assert result.messages == []
        assert result.sentiment_counts == {"funny": 0, "love": 0, "neutral": 0}
        assert result.source == "<string>"

    def test_custom_source(self) -> None:
        """The source label is carried through."""
        assert parse_chat(_EXPORT, source="chat.txt").source == "chat.txt"

    def test_windows_line_endings(self) -> None:
        """CRLF line endings do not leak into message bodies."""
        result = parse_chat("01/01/2025, 10:00 - Amit: hi\r\n01/01/2025, 10:01 - Neha: hello\r\n")

        assert [m.text for m in result.messages] == ["hi", "hello"]

    def test_to_dict_uses_camel_case(self) -> None:
        """The JSON view uses camelCase keys."""
        payload = parse_chat(_EXPORT).to_dict()

        assert payload["messages"][0]["wordCount"] == 5
        assert payload["sentimentCounts"]["funny"] == 1
        assert payload["warnings"][0]["lineNumber"] == 4


class TestParseChatFile:
    """Reading exports from disk."""

    def test_reads_file(self, tmp_path: Path) -> None:
        """A file on disk is parsed with its path as source."""
        export = tmp_path / "chat.txt"
        export.write_text(_EXPORT, encoding="utf-8")

        result = parse_chat_file(export)

        assert len(result.messages) == 3
        assert result.source == str(export)

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        """A plain string path works too."""
        export = tmp_path / "chat.txt"
        export.write_text(_EXPORT, encoding="utf-8")

        assert len(parse_chat_file(str(export)).messages) == 3

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Chat export not found"):
            parse_chat_file(tmp_path / "nope.txt")


class TestLogging:
    """Log output from the chat parser."""

    def test_info_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        """A parse logs message and sender counts at INFO."""
        with caplog.at_level(logging.INFO, logger="jugaad.chat"):
            parse_chat(_EXPORT)

        assert any(
            "3 message(s)" in r.message and "2 sender(s)" in r.message for r in caplog.records
        )

    def test_warning_for_bad_line(self, caplog: pytest.LogCaptureFixture) -> None:
        """An unparseable line logs a WARNING with the line number."""
        with caplog.at_level(logging.WARNING, logger="jugaad.chat"):
            parse_chat("garbled text here")

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "line 1" in warnings[0].message
        assert "garbled text here" in warnings[0].message

    def test_empty_export_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Empty input logs an 'Empty chat export' message."""
        with caplog.at_level(logging.INFO, logger="jugaad.chat"):
            parse_chat("")

        assert any("Empty chat export" in r.message for r in caplog.records)
