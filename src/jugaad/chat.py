"""Parser for exported chat lines.

A chat export line looks like::

    25/01/2025, 14:30 - Rahul: Bhai party kab hai? 😂

:func:`parse_message` handles one line; :func:`parse_chat` and
:func:`parse_chat_file` run it over a whole export.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from jugaad.models.message import (
    SENTIMENTS,
    ChatParseResult,
    ChatParseWarning,
    ParsedMessage,
    Sentiment,
)

logger = logging.getLogger(__name__)

# Non-greedy groups: the stamp ends at the first " - " and the sender at
# the first ": " after it.  DOTALL lets a body carry embedded newlines.
_LINE_RE = re.compile(r"(?P<stamp>.*?) - (?P<sender>.*?): (?P<body>.*)", re.DOTALL)

_FUNNY_SYMBOLS = ("😂", ":)")
_FUNNY_WORDS = ("haha",)
_LOVE_SYMBOLS = ("❤",)
_LOVE_WORDS = ("love", "pyaar")


def classify_sentiment(text: str) -> Sentiment:
    """Classify a message body as ``"funny"``, ``"love"`` or ``"neutral"``.

    Symbol markers are matched as-is, word markers case-insensitively.
    Funny markers win when both kinds are present.
    """
    lowered = text.lower()
    if any(s in text for s in _FUNNY_SYMBOLS) or any(w in lowered for w in _FUNNY_WORDS):
        return "funny"
    if any(s in text for s in _LOVE_SYMBOLS) or any(w in lowered for w in _LOVE_WORDS):
        return "love"
    return "neutral"


def parse_message(line: object) -> ParsedMessage | None:
    """Split one exported chat line into its parts.

    Args:
        line: A single line in ``"DATE, TIME - Sender: text"`` form.

    Returns:
        A :class:`ParsedMessage`, or ``None`` if *line* is not a string or
        lacks the ``" - "`` separator or the ``": "`` after the sender.
    """
    if not isinstance(line, str):
        logger.debug("Rejected chat line of type %s", type(line).__name__)
        return None

    match = _LINE_RE.fullmatch(line)
    if match is None:
        logger.debug("Rejected chat line without sender separators")
        return None

    stamp_parts = match.group("stamp").split(", ")
    date = stamp_parts[0]
    time = stamp_parts[1] if len(stamp_parts) > 1 else ""

    text = match.group("body").strip()

    return ParsedMessage(
        date=date,
        time=time,
        sender=match.group("sender"),
        text=text,
        word_count=len(text.split()),
        sentiment=classify_sentiment(text),
    )


def parse_chat(text: str, source: str = "<string>") -> ChatParseResult:
    """Parse a whole chat export.

    Blank lines are skipped.  Each remaining line is parsed with
    :func:`parse_message`; lines it rejects are reported as warnings
    rather than aborting the parse.

    Args:
        text: The export contents.
        source: Label for the export origin (e.g. a file path).

    Returns:
        A :class:`ChatParseResult` with messages, unique senders in order
        of first appearance, per-sentiment counts and warnings.
    """
    if not text or not text.strip():
        logger.info("Empty chat export: %s", source)
        return ChatParseResult(source=source)

    messages: list[ParsedMessage] = []
    warnings: list[ChatParseWarning] = []

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        if not raw_line.strip():
            continue

        message = parse_message(raw_line)
        if message is None:
            logger.warning("Skipping line %d of %s: %r", line_number, source, raw_line)
            warnings.append(
                ChatParseWarning(
                    line_number=line_number,
                    message="Line does not match 'DATE, TIME - Sender: text'",
                    raw_line=raw_line,
                )
            )
            continue
        messages.append(message)

    senders = list(dict.fromkeys(m.sender for m in messages))
    counts = dict.fromkeys(SENTIMENTS, 0)
    for message in messages:
        counts[message.sentiment] += 1

    logger.info(
        "Parsed %s: %d message(s), %d sender(s), %d warning(s)",
        source,
        len(messages),
        len(senders),
        len(warnings),
    )

    return ChatParseResult(
        messages=messages,
        senders=senders,
        sentiment_counts=counts,
        warnings=warnings,
        source=source,
    )


def parse_chat_file(file_path: str | Path, encoding: str = "utf-8") -> ChatParseResult:
    """Read a chat export file and delegate to :func:`parse_chat`.

    Raises:
        FileNotFoundError: If *file_path* does not exist.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Chat export not found: {path}")

    return parse_chat(path.read_text(encoding=encoding), source=str(path))
