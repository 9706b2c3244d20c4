"""Form data models.

:class:`FormData` is the input schema for the form validator.  Every
field is optional and untyped on purpose: a missing or wrongly typed
value is a per-field validation failure, not a schema failure, so the
checks live in :mod:`jugaad.form` rather than in pydantic validators.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FormData(BaseModel):
    """Raw admission-form fields as submitted.

    Keys are read exactly as submitted (``agreeTerms``, not
    ``agree_terms``); unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: Any = None
    email: Any = None
    phone: Any = None
    age: Any = None
    pincode: Any = None
    state: Any = None
    agree_terms: Any = Field(default=None, alias="agreeTerms")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a :class:`FormData`.

    Attributes:
        is_valid: ``True`` only when *errors* is empty.
        errors: Field name -> error message, one entry per failing field.
    """

    is_valid: bool
    errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_errors(cls, errors: dict[str, str]) -> ValidationResult:
        return cls(is_valid=not errors, errors=dict(errors))

    def to_dict(self) -> dict[str, Any]:
        return {"isValid": self.is_valid, "errors": dict(self.errors)}
