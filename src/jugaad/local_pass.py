"""Mumbai local train pass formatter."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from jugaad.models.local_pass import PassRecord

logger = logging.getLogger(__name__)

INVALID_PASS = "INVALID PASS"
PASS_TITLE = "MUMBAI LOCAL PASS"
PASS_RULE = "---"


def _title_case(word: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    return word[:1].upper() + word[1:].lower()


def generate_pass_id(class_type: str, origin: str, destination: str) -> str:
    """Build a pass ID, e.g. ``("first", "dadar", "andheri") -> "FDADAND"``."""
    return class_type.lower()[:1].upper() + origin.upper()[:3] + destination.upper()[:3]


def generate_local_pass(passenger: Mapping[str, Any] | PassRecord | None) -> str:
    """Render a local train pass.

    Args:
        passenger: A mapping with string fields ``name``, ``from``, ``to``
            and ``classType``, or a :class:`PassRecord`.

    Returns:
        The seven-line pass text, or :data:`INVALID_PASS` when *passenger*
        is missing, has a blank or non-string field, or names a class
        other than first or second.
    """
    try:
        record = PassRecord.model_validate(passenger)
    except ValidationError as exc:
        logger.debug("Pass rejected: %d validation error(s)", exc.error_count())
        return INVALID_PASS

    class_type = record.class_type.lower()
    lines = [
        PASS_TITLE,
        PASS_RULE,
        f"Name: {record.name.upper()}",
        f"From: {_title_case(record.origin)}",
        f"To: {_title_case(record.destination)}",
        f"Class: {class_type.upper()}",
        f"Pass ID: {generate_pass_id(class_type, record.origin, record.destination)}",
    ]
    return "\n".join(lines)
