"""
Formatter interfaces and registry for pluggable output formats.

This module provides the abstract contract every formatter satisfies and the
registry used to resolve a formatter from its name. The flattening engine only
talks to formatters through ``format`` and ``output``, so new encodings can be
added by registering a formatter without touching the engine.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Protocol, Sequence, Union, runtime_checkable

from .errors import UnsupportedFormatterError
from .models import OutputOptions

logger = logging.getLogger(__name__)


def is_omitted(name: Any, value: Any, is_file: Any) -> bool:
    """
    Return True when a leaf carries nothing worth encoding.

    A leaf is omitted when its name or value is ``None`` or the empty string,
    or when the file flag is missing. ``0`` and ``False`` are real values and
    are kept.
    """
    if name is None or name == "":
        return True
    if value is None or (isinstance(value, str) and value == ""):
        return True
    return is_file is None


class BaseFormatter(ABC):
    """
    Abstract base class for formatters.

    A formatter turns each flattened ``(name, value, is_file)`` leaf into a
    unit, and then assembles the ordered units into the final payload.
    Returning ``None`` from ``format`` omits the leaf.
    """

    name: str = ""

    @abstractmethod
    def format(self, name: str, value: Any, is_file: bool) -> Any:
        """
        Encode one leaf.

        Args:
            name: Bracketed field name, e.g. ``user[tags][]``
            value: Scalar value, or the file path when ``is_file`` is True
            is_file: Whether ``value`` is a file path

        Returns:
            A formatter-specific unit, or None to omit the leaf
        """
        pass

    @abstractmethod
    def output(self, units: List[Any], options: OutputOptions) -> Any:
        """
        Assemble the ordered, non-omitted units into the final payload.

        Must not raise on an empty list.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


@runtime_checkable
class FormatterProtocol(Protocol):
    """Protocol definition for formatters (for duck-typed third-party formatters)."""

    def format(self, name: str, value: Any, is_file: bool) -> Any:
        ...

    def output(self, units: Sequence[Any], options: OutputOptions) -> Any:
        ...


FormatterLike = Union[str, BaseFormatter, FormatterProtocol, type]


class FormatterRegistry:
    """
    Registry mapping formatter names to formatter instances.

    Resolution accepts a registered name, a formatter class (instantiated
    without arguments) or any object implementing ``format`` and ``output``.
    """

    def __init__(self):
        self._formatters: Dict[str, FormatterProtocol] = {}

    def register_formatter(self, name: str, formatter: FormatterLike) -> None:
        """
        Register a formatter under ``name``, replacing any previous entry.

        Raises:
            UnsupportedFormatterError: If ``formatter`` does not implement the contract
        """
        instance = self._instantiate(formatter)
        self._formatters[name] = instance
        logger.info(f"Registered formatter '{name}': {instance!r}")

    def unregister_formatter(self, name: str) -> None:
        """Remove a registered formatter; unknown names are ignored."""
        self._formatters.pop(name, None)

    def get_formatter(self, formatter: FormatterLike) -> FormatterProtocol:
        """
        Resolve a formatter from a name or an implementation.

        Raises:
            UnsupportedFormatterError: If the name is unknown or the value is not a formatter
        """
        if isinstance(formatter, str):
            if formatter not in self._formatters:
                raise UnsupportedFormatterError(formatter)
            return self._formatters[formatter]

        return self._instantiate(formatter)

    def list_formatters(self) -> List[str]:
        """Get list of registered formatter names."""
        return list(self._formatters.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._formatters

    def _instantiate(self, formatter: Any) -> FormatterProtocol:
        if isinstance(formatter, type):
            if not (callable(getattr(formatter, "format", None)) and
                    callable(getattr(formatter, "output", None))):
                raise UnsupportedFormatterError(
                    formatter, f"{formatter.__name__} does not implement format/output"
                )
            formatter = formatter()

        if not isinstance(formatter, FormatterProtocol):
            raise UnsupportedFormatterError(
                formatter, f"Not a formatter: {formatter!r}"
            )

        return formatter
