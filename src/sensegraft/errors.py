"""Exception hierarchy shared across the package."""
from __future__ import annotations


class SensegraftError(Exception):
    """Base class for errors raised by sensegraft."""


class MalformedRecordError(SensegraftError):
    """An upstream sense record is missing a field or carries a bad value.

    Raised by the record loader; aborts the whole batch.
    """

    def __init__(self, message: str, *, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class InventoryError(SensegraftError):
    """The sense inventory could not answer a lookup."""


__all__ = ["SensegraftError", "MalformedRecordError", "InventoryError"]
