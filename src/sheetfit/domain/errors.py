"""Input errors raised by the packing engine and the quote calculator."""

from __future__ import annotations


class PackingInputError(ValueError):
    """Base class for rejected packing input.

    Raised before any placement is attempted, so a failed call never
    leaves partial work behind.
    """


class InvalidDimension(PackingInputError):
    """Raised when a sheet or item dimension is not a positive finite number."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} must be a positive number (got {value!r})")


class InvalidQuantity(PackingInputError):
    """Raised when an item quantity is negative or not an integer."""

    def __init__(self, label: str, value: object) -> None:
        self.label = label
        self.value = value
        super().__init__(
            f"Quantity for '{label}' must be a non-negative integer (got {value!r})"
        )
