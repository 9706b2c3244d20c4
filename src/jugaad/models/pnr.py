"""Railway PNR data models.

Input side (pydantic):

- :class:`TrainInput` -- train identity shown in the report header.
- :class:`PassengerInput` -- one passenger line of the booking.
- :class:`PNRRecord` -- the full booking; validation enforces the
  10-digit PNR and a non-empty passenger list.

Output side (frozen dataclasses):

- :class:`ProcessedPassenger`, :class:`PNRSummary`, :class:`PNRReport`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

StatusLabel = Literal["CONFIRMED", "WAITING", "CANCELLED", "RAC", ""]

_PNR_RE = re.compile(r"[0-9]{10}")


def _none_as_blank(value: Any) -> Any:
    """Display-only fields render a JSON null the same as a missing key."""
    return "" if value is None else value


# ---------------------------------------------------------------------------
# Input schemas
# ---------------------------------------------------------------------------


class TrainInput(BaseModel):
    """Train details; numeric values are accepted and rendered as text."""

    model_config = ConfigDict(coerce_numbers_to_str=True, frozen=True)

    number: str = ""
    name: str = ""
    origin: str = Field(default="", alias="from")
    destination: str = Field(default="", alias="to")

    _blank_nulls = field_validator("number", "name", "origin", "destination", mode="before")(
        _none_as_blank
    )


class PassengerInput(BaseModel):
    """A passenger as listed on the booking.

    Attributes:
        name: Passenger name.
        age: Age as given (number or text); only ever displayed.
        gender: Gender code, e.g. ``"M"``.
        booking: Status at booking time, e.g. ``"WL5"``.
        current: Current status, e.g. ``"B3"``, ``"WL8"``, ``"RAC2"``,
            ``"CAN"``.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True, frozen=True)

    name: str
    age: int | str = ""
    gender: str = ""
    booking: str = ""
    current: str

    _blank_nulls = field_validator("age", "gender", "booking", mode="before")(_none_as_blank)


class PNRRecord(BaseModel):
    """A railway booking looked up by PNR."""

    model_config = ConfigDict(coerce_numbers_to_str=True, frozen=True)

    pnr: str
    train: TrainInput
    class_booked: str = Field(default="", alias="classBooked")
    passengers: list[PassengerInput] = Field(min_length=1)

    _blank_nulls = field_validator("class_booked", mode="before")(_none_as_blank)

    @field_validator("pnr", mode="before")
    @classmethod
    def _ten_digits(cls, value: Any) -> str:
        if not isinstance(value, str) or not _PNR_RE.fullmatch(value):
            raise ValueError("pnr must be a string of exactly 10 digits")
        return value


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProcessedPassenger:
    """One passenger line of the status report.

    Attributes:
        formatted_name: Name padded to 20 columns followed by
            ``(age/gender)``.
        booking_status: The booking-time status, unchanged.
        current_status: The current status, unchanged.
        status_label: Classification of *current_status*; ``""`` when no
            rule matches.
        is_confirmed: ``True`` only for ``"CONFIRMED"``.
    """

    formatted_name: str
    booking_status: str
    current_status: str
    status_label: StatusLabel
    is_confirmed: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "formattedName": self.formatted_name,
            "bookingStatus": self.booking_status,
            "currentStatus": self.current_status,
            "statusLabel": self.status_label,
            "isConfirmed": self.is_confirmed,
        }


@dataclass(frozen=True)
class PNRSummary:
    """Aggregate counts over the processed passengers.

    ``all_confirmed`` treats cancelled passengers as settled, so a booking
    with only CONFIRMED and CANCELLED entries is "all confirmed".
    """

    total_passengers: int
    confirmed: int
    waiting: int
    cancelled: int
    rac: int
    all_confirmed: bool
    any_waiting: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalPassengers": self.total_passengers,
            "confirmed": self.confirmed,
            "waiting": self.waiting,
            "cancelled": self.cancelled,
            "rac": self.rac,
            "allConfirmed": self.all_confirmed,
            "anyWaiting": self.any_waiting,
        }


@dataclass(frozen=True)
class PNRReport:
    """Full PNR status report returned by :func:`~jugaad.pnr.process_pnr`."""

    pnr_formatted: str
    train_info: str
    summary: PNRSummary
    chart_prepared: bool
    passengers: list[ProcessedPassenger] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "pnrFormatted": self.pnr_formatted,
            "trainInfo": self.train_info,
            "passengers": [p.to_dict() for p in self.passengers],
            "summary": self.summary.to_dict(),
            "chartPrepared": self.chart_prepared,
        }
