"""Shared fixtures for jugaad tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any

import pytest


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all jugaad-related environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("jugaad.config.load_dotenv", lambda *_a, **_kw: None)
    for key in ("LOG_LEVEL", "JUGAAD_CHAT_ENCODING"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def valid_form() -> dict[str, Any]:
    """A form that passes every rule."""
    return {
        "name": "Rahul Sharma",
        "email": "rahul@gmail.com",
        "phone": "9876543210",
        "age": 20,
        "pincode": "400001",
        "state": "Maharashtra",
        "agreeTerms": True,
    }


@pytest.fixture()
def pnr_data() -> dict[str, Any]:
    """A three-passenger Rajdhani booking."""
    return {
        "pnr": "1234567890",
        "train": {"number": "12301", "name": "Rajdhani Express", "from": "NDLS", "to": "HWH"},
        "classBooked": "3A",
        "passengers": [
            {"name": "Rahul Kumar", "age": 28, "gender": "M", "booking": "B1", "current": "B1"},
            {"name": "Priya Sharma", "age": 25, "gender": "F", "booking": "WL5", "current": "B3"},
            {"name": "Amit Singh", "age": 60, "gender": "M", "booking": "WL12", "current": "WL8"},
        ],
    }


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root logger after each test to prevent handler leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
