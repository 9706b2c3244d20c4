"""Chat message data models.

These dataclasses are the structured output of the chat line parser.
They are plain stdlib dataclasses; chat lines arrive as already-decoded
text, so there is no input schema to validate beyond the line itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

Sentiment = Literal["funny", "love", "neutral"]

SENTIMENTS: tuple[Sentiment, ...] = ("funny", "love", "neutral")


@dataclass(frozen=True)
class ParsedMessage:
    """A single exported chat line split into its parts.

    Attributes:
        date: Date segment, e.g. ``"25/01/2025"``.
        time: Time segment, e.g. ``"14:30"``; empty when the stamp has
            no ``", "`` separator.
        sender: Sender name as written in the export.
        text: Message body, trimmed.
        word_count: Number of whitespace-separated words in *text*.
        sentiment: ``"funny"``, ``"love"`` or ``"neutral"``.
    """

    date: str
    time: str
    sender: str
    text: str
    word_count: int
    sentiment: Sentiment

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "time": self.time,
            "sender": self.sender,
            "text": self.text,
            "wordCount": self.word_count,
            "sentiment": self.sentiment,
        }


@dataclass(frozen=True)
class ChatParseWarning:
    """A line of a chat export that could not be parsed.

    Attributes:
        line_number: 1-based line number of the problematic line.
        message: Human-readable description of the issue.
        raw_line: The original line text.
    """

    line_number: int
    message: str
    raw_line: str


def _empty_sentiment_counts() -> dict[str, int]:
    return dict.fromkeys(SENTIMENTS, 0)


@dataclass(frozen=True)
class ChatParseResult:
    """Top-level return type from :func:`~jugaad.chat.parse_chat`.

    Attributes:
        messages: Parsed messages, in order of appearance.
        senders: Unique sender names, ordered by first appearance.
        sentiment_counts: Number of messages per sentiment; every
            sentiment key is always present.
        warnings: One entry per non-blank line that failed to parse.
        source: File path of the export, or ``"<string>"``.
    """

    messages: list[ParsedMessage] = field(default_factory=list)
    senders: list[str] = field(default_factory=list)
    sentiment_counts: dict[str, int] = field(default_factory=_empty_sentiment_counts)
    warnings: list[ChatParseWarning] = field(default_factory=list)
    source: str = "<string>"

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "messages": [m.to_dict() for m in self.messages],
            "senders": list(self.senders),
            "sentimentCounts": dict(self.sentiment_counts),
            "warnings": [
                {"lineNumber": w.line_number, "message": w.message, "rawLine": w.raw_line}
                for w in self.warnings
            ],
        }
