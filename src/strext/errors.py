"""
Error types raised by the strext string utilities.
"""

from typing import Optional


class StrExtError(Exception):
    """Base exception for all strext argument errors."""

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        self.message = message
        self.argument = argument
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.argument:
            return f"[{self.argument}] {self.message}"
        return self.message


class NullArgumentError(StrExtError, TypeError):
    """Raised when a required argument is None."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"'{argument}' cannot be None", argument)


class InvalidArgumentError(StrExtError, ValueError):
    """Raised when an argument is present but holds a disallowed value."""

    pass


class RangeError(StrExtError, ValueError):
    """
    Raised when a numeric argument falls outside its allowed range.

    Attributes:
        value: The rejected number
    """

    def __init__(self, message: str, argument: str, value: int) -> None:
        self.value = value
        super().__init__(message, argument)

    def _format_message(self) -> str:
        return f"{super()._format_message()} (got {self.value})"
