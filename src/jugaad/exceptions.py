"""Exceptions for the jugaad command-line layer.

The record functions themselves never raise for bad input; they report
failure through ``None`` or a sentinel value.  These exceptions cover
loading input for them.
"""

from __future__ import annotations


class JugaadError(Exception):
    """Base error for this package."""


class RecordLoadError(JugaadError):
    """Raised when an input file cannot be decoded into a record.

    Attributes:
        path: The file that failed to load.
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path
