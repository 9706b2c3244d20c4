"""Data models for jugaad."""

from __future__ import annotations

from jugaad.models.form import FormData, ValidationResult
from jugaad.models.local_pass import PASS_CLASSES, PassRecord
from jugaad.models.message import ChatParseResult, ChatParseWarning, ParsedMessage, Sentiment
from jugaad.models.pnr import (
    PassengerInput,
    PNRRecord,
    PNRReport,
    PNRSummary,
    ProcessedPassenger,
    StatusLabel,
    TrainInput,
)

__all__ = [
    "PASS_CLASSES",
    "ChatParseResult",
    "ChatParseWarning",
    "FormData",
    "PNRRecord",
    "PNRReport",
    "PNRSummary",
    "ParsedMessage",
    "PassRecord",
    "PassengerInput",
    "ProcessedPassenger",
    "Sentiment",
    "StatusLabel",
    "TrainInput",
    "ValidationResult",
]
