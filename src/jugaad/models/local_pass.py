"""Input schema for the Mumbai local pass formatter."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

PASS_CLASSES: frozenset[str] = frozenset({"first", "second"})


class PassRecord(BaseModel):
    """A passenger's request for a local train pass.

    Attributes:
        name: Passenger name.
        origin: Boarding station (``from`` in raw input).
        destination: Destination station (``to`` in raw input).
        class_type: ``"first"`` or ``"second"``, any case
            (``classType`` in raw input).
    """

    model_config = ConfigDict(frozen=True)

    name: StrictStr
    origin: StrictStr = Field(alias="from")
    destination: StrictStr = Field(alias="to")
    class_type: StrictStr = Field(alias="classType")

    @field_validator("name", "origin", "destination", "class_type")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("class_type")
    @classmethod
    def _known_class(cls, value: str) -> str:
        if value.lower() not in PASS_CLASSES:
            raise ValueError(f"unknown class {value!r}")
        return value
