"""jugaad: small parsers and validators for everyday Indian records.

Chat export lines, admission forms, Mumbai local passes and railway PNR
status, each handled by one pure function.
"""

from __future__ import annotations

from jugaad.chat import classify_sentiment, parse_chat, parse_chat_file, parse_message
from jugaad.form import is_truthy, parse_age, validate_form
from jugaad.local_pass import INVALID_PASS, generate_local_pass, generate_pass_id
from jugaad.models.form import FormData, ValidationResult
from jugaad.models.local_pass import PassRecord
from jugaad.models.message import ChatParseResult, ChatParseWarning, ParsedMessage
from jugaad.models.pnr import (
    PassengerInput,
    PNRRecord,
    PNRReport,
    PNRSummary,
    ProcessedPassenger,
    TrainInput,
)
from jugaad.pnr import classify_status, format_pnr, process_pnr

__version__ = "0.1.0"

__all__ = [
    "INVALID_PASS",
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
    "TrainInput",
    "ValidationResult",
    "classify_sentiment",
    "classify_status",
    "format_pnr",
    "generate_local_pass",
    "generate_pass_id",
    "is_truthy",
    "parse_age",
    "parse_chat",
    "parse_chat_file",
    "parse_message",
    "process_pnr",
    "validate_form",
]
