"""Custom exceptions for the paydown simulator."""

from __future__ import annotations


class PaydownError(Exception):
    """Base exception for paydown simulator errors."""

    pass


class ValidationError(PaydownError):
    """Raised when input validation fails."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class LengthMismatchError(PaydownError):
    """Raised when two outcome collections that must be paired differ in length."""

    def __init__(self, left: int, right: int) -> None:
        self.left = left
        self.right = right
        super().__init__(f"Data arrays must have equal length (got {left} and {right})")


class DatasetError(PaydownError):
    """Raised when the historical return dataset cannot be loaded."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        self.message = message
        super().__init__(f"Failed to load returns from {source}: {message}")


class SimulationError(PaydownError):
    """Raised when simulation encounters numerical or logical issues."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
