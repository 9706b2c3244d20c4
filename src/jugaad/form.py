"""Admission form validator.

Each field of :class:`~jugaad.models.form.FormData` is checked on its own
and every failure is collected, so a caller can show all problems at
once.  :func:`validate_form` never raises for bad or missing input.
"""

from __future__ import annotations

import logging
import numbers
import re
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from jugaad.models.form import FormData, ValidationResult

logger = logging.getLogger(__name__)

NAME_ERROR = "Name must be 2-50 characters"
EMAIL_ERROR = "Invalid email format"
PHONE_ERROR = "Invalid Indian phone number"
AGE_ERROR = "Age must be an integer between 16 and 100"
PINCODE_ERROR = "Invalid Indian pincode"
STATE_ERROR = "State is required"
TERMS_ERROR = "Must agree to terms"

NAME_LENGTH = (2, 50)
AGE_RANGE = (16, 100)

# [0-9] rather than \d: only ASCII digits are valid in these fields.
_DIGITS_RE = re.compile(r"[0-9]+")
_PHONE_RE = re.compile(r"[6-9][0-9]{9}")
_PINCODE_RE = re.compile(r"[1-9][0-9]{5}")


def is_truthy(value: Any) -> bool:
    """Return whether *value* counts as a "yes".

    ``None``, ``False``, numeric zero (of any numeric type, ``Decimal``
    and ``complex`` included), NaN and the empty string are false; every
    other value is true.
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, numbers.Number):
        # NaN is the only value not equal to itself.
        return not (value == 0 or value != value)
    return True


def parse_age(value: Any) -> int | None:
    """Parse an age given as a number or a string of digits.

    Returns ``None`` when *value* is not an integer: fractional floats,
    booleans, and strings with anything but ASCII digits (signs and
    surrounding whitespace included) are rejected.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and _DIGITS_RE.fullmatch(value):
        try:
            return int(value)
        except ValueError:
            # Longer than the interpreter's int-conversion digit limit.
            return None
    return None


def _check_name(value: Any) -> bool:
    low, high = NAME_LENGTH
    return isinstance(value, str) and low <= len(value.strip()) <= high


def _check_email(value: Any) -> bool:
    if not isinstance(value, str) or value.count("@") != 1:
        return False
    return "." in value[value.index("@") + 1 :]


def _check_phone(value: Any) -> bool:
    return isinstance(value, str) and _PHONE_RE.fullmatch(value) is not None


def _check_age(value: Any) -> bool:
    age = parse_age(value)
    low, high = AGE_RANGE
    return age is not None and low <= age <= high


def _check_pincode(value: Any) -> bool:
    return isinstance(value, str) and _PINCODE_RE.fullmatch(value) is not None


def _check_state(value: Any) -> bool:
    state = "" if value is None else value
    return isinstance(state, str) and state.strip() != ""


# Field name -> (check, message), in report order.
_RULES: dict[str, tuple[Callable[[Any], bool], str]] = {
    "name": (_check_name, NAME_ERROR),
    "email": (_check_email, EMAIL_ERROR),
    "phone": (_check_phone, PHONE_ERROR),
    "age": (_check_age, AGE_ERROR),
    "pincode": (_check_pincode, PINCODE_ERROR),
    "state": (_check_state, STATE_ERROR),
    "agreeTerms": (is_truthy, TERMS_ERROR),
}


def _coerce_form(form_data: Any) -> FormData:
    if isinstance(form_data, FormData):
        return form_data
    if isinstance(form_data, Mapping):
        try:
            return FormData.model_validate(dict(form_data))
        except ValidationError:
            logger.debug("Form mapping could not be read; treating as empty")
    return FormData()


def validate_form(form_data: Mapping[str, Any] | FormData | None) -> ValidationResult:
    """Validate an admission form.

    Args:
        form_data: The submitted fields, as a mapping with the keys
            ``name``, ``email``, ``phone``, ``age``, ``pincode``,
            ``state`` and ``agreeTerms``, or a :class:`FormData`.
            Anything that is not a mapping is treated as an empty form.

    Returns:
        A :class:`ValidationResult` whose ``errors`` has one message per
        failing field; ``is_valid`` is ``True`` only when none failed.
    """
    form = _coerce_form(form_data)
    values = {
        "name": form.name,
        "email": form.email,
        "phone": form.phone,
        "age": form.age,
        "pincode": form.pincode,
        "state": form.state,
        "agreeTerms": form.agree_terms,
    }

    errors: dict[str, str] = {}
    for field_name, (check, message) in _RULES.items():
        if not check(values[field_name]):
            errors[field_name] = message

    if errors:
        logger.debug("Form rejected; failing fields: %s", ", ".join(errors))

    return ValidationResult.from_errors(errors)
