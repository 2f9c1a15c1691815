"""
Exceptions raised while building form data.
"""

from typing import Any


class FormDataError(Exception):
    """
    Raised when the structure handed to the engine is not Record-like.

    Only mappings, dataclass instances, pydantic models and sequences of
    ``(key, value)`` pairs can be flattened into form fields. The offending
    input is kept on ``value`` for diagnostics.
    """

    def __init__(self, value: Any, message: str = None):
        self.value = value
        if message is None:
            message = f"expected Record-like or pair-sequence input, got: {value!r}"
        super().__init__(message)


class UnsupportedFormatterError(FormDataError):
    """Raised when a formatter name is unknown or a value is not a formatter."""

    def __init__(self, formatter: Any, message: str = None):
        if message is None:
            message = f"No formatter registered for: {formatter!r}"
        super().__init__(formatter, message)
