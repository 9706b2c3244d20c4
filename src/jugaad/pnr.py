"""Indian Railways PNR status processor.

Turns a booking record into a :class:`~jugaad.models.pnr.PNRReport`:
a formatted PNR, a one-line train header, one line per passenger with
its status classified, and summary counts.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping
from typing import Any, Final

from pydantic import ValidationError

from jugaad.models.pnr import (
    PassengerInput,
    PNRRecord,
    PNRReport,
    PNRSummary,
    ProcessedPassenger,
    StatusLabel,
)

logger = logging.getLogger(__name__)

CONFIRMED: Final = "CONFIRMED"
WAITING: Final = "WAITING"
CANCELLED: Final = "CANCELLED"
RAC: Final = "RAC"

NAME_WIDTH = 20

# Statuses that no longer hold up chart preparation.
_SETTLED: frozenset[str] = frozenset({CONFIRMED, CANCELLED})


def classify_status(current: str) -> StatusLabel:
    """Classify a current-status code.

    Rules are tried in order: berth/seat codes (``B``/``S`` prefix) are
    CONFIRMED, ``WL`` is WAITING, exactly ``CAN`` is CANCELLED, ``RAC``
    is RAC.  Anything else gets an empty label and is left out of every
    summary count.
    """
    if current.startswith(("B", "S")):
        return CONFIRMED
    if current.startswith("WL"):
        return WAITING
    if current == "CAN":
        return CANCELLED
    if current.startswith("RAC"):
        return RAC
    return ""


def format_pnr(pnr: str) -> str:
    """Group a 10-digit PNR as ``123-456-7890``."""
    return f"{pnr[:3]}-{pnr[3:6]}-{pnr[6:]}"


def _process_passenger(passenger: PassengerInput) -> ProcessedPassenger:
    label = classify_status(passenger.current)
    return ProcessedPassenger(
        formatted_name=f"{passenger.name.ljust(NAME_WIDTH)}({passenger.age}/{passenger.gender})",
        booking_status=passenger.booking,
        current_status=passenger.current,
        status_label=label,
        is_confirmed=label == CONFIRMED,
    )


def _summarise(passengers: list[ProcessedPassenger]) -> PNRSummary:
    counts = Counter(p.status_label for p in passengers)
    return PNRSummary(
        total_passengers=len(passengers),
        confirmed=counts[CONFIRMED],
        waiting=counts[WAITING],
        cancelled=counts[CANCELLED],
        rac=counts[RAC],
        all_confirmed=all(p.status_label in _SETTLED for p in passengers),
        any_waiting=counts[WAITING] > 0,
    )


def process_pnr(pnr_data: Mapping[str, Any] | PNRRecord | None) -> PNRReport | None:
    """Build a status report for a railway booking.

    Args:
        pnr_data: A mapping with ``pnr`` (10-digit string), ``train``
            (``number``, ``name``, ``from``, ``to``), ``classBooked`` and a
            non-empty ``passengers`` list, or a :class:`PNRRecord`.

    Returns:
        A :class:`PNRReport`, or ``None`` if *pnr_data* is missing, the
        PNR is not exactly 10 digits, ``train`` is absent, or the
        passenger list is empty or malformed.
    """
    try:
        record = PNRRecord.model_validate(pnr_data)
    except ValidationError as exc:
        logger.debug(
            "PNR record rejected at %s",
            ", ".join(".".join(str(p) for p in err["loc"]) or "<root>" for err in exc.errors()),
        )
        return None

    pnr_formatted = format_pnr(record.pnr)
    train = record.train
    passengers = [_process_passenger(p) for p in record.passengers]
    summary = _summarise(passengers)

    logger.debug(
        "PNR %s: %d passenger(s), %d confirmed, %d waiting",
        pnr_formatted,
        summary.total_passengers,
        summary.confirmed,
        summary.waiting,
    )

    return PNRReport(
        pnr_formatted=pnr_formatted,
        train_info=(
            f"Train: {train.number} - {train.name} | "
            f"{train.origin} → {train.destination} | Class: {record.class_booked}"
        ),
        passengers=passengers,
        summary=summary,
        # Same predicate as all_confirmed: cancelled berths do not block the chart.
        chart_prepared=summary.all_confirmed,
    )
