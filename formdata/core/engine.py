"""
Recursive flattening engine for form data.

This module walks an arbitrarily nested structure and produces the flat,
ordered ``(name, value)`` fields that HTTP form encodings require. Names are
built the way form parsers expect them:

- a top-level key is used bare: ``{"a": "v"}`` -> ``a``
- a nested key is bracketed: ``{"a": {"b": "v"}}`` -> ``a[b]``
- each sequence element appends ``[]``: ``{"a": ["x", "y"]}`` -> ``a[]``, ``a[]``

Traversal is depth-first and left-to-right, preserving mapping insertion
order and sequence order. Every leaf is handed to a formatter, omitted leaves
are dropped, and the formatter assembles the final payload.
"""

import dataclasses
import logging
from typing import Any, Iterator, List, Mapping, Optional, Tuple

from pydantic import BaseModel

from ..config import get_config
from ..formatters import get_formatter
from .errors import FormDataError
from .formatter import FormatterLike, FormatterProtocol
from .models import FormDataResult, FormFile, OutputOptions

logger = logging.getLogger(__name__)

Leaf = Tuple[str, Any, bool]


def _record_pairs(value: Any) -> Optional[List[Tuple[Any, Any]]]:
    """Return the fields of a Record-like value, or None when it is not one."""
    if isinstance(value, FormFile):
        return None
    if isinstance(value, Mapping):
        return list(value.items())
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]
    if isinstance(value, BaseModel):
        return [(name, getattr(value, name)) for name in type(value).model_fields]
    return None


def _is_pair(item: Any) -> bool:
    return isinstance(item, tuple) and len(item) == 2


def to_pairs(structure: Any) -> List[Tuple[Any, Any]]:
    """
    Coerce a top-level structure into an ordered list of ``(key, value)`` pairs.

    Accepts mappings, dataclass instances, pydantic models and lists or tuples
    made only of 2-tuples.

    Raises:
        FormDataError: If the structure is not Record-like
    """
    pairs = _record_pairs(structure)
    if pairs is not None:
        return pairs

    if isinstance(structure, (list, tuple)) and all(_is_pair(item) for item in structure):
        return [(key, value) for key, value in structure]

    raise FormDataError(structure)


def _walk(value: Any, name: str) -> Iterator[Leaf]:
    # FormFile is a dataclass, so it must be matched before records
    if isinstance(value, FormFile):
        yield (name, value.path, True)
        return

    pairs = _record_pairs(value)
    if pairs is not None:
        for key, item in pairs:
            yield from _walk(item, f"{name}[{key}]")
        return

    if isinstance(value, (list, tuple)):
        for item in value:
            yield from _walk(item, f"{name}[]")
        return

    yield (name, value, False)


def _walk_pairs(pairs: List[Tuple[Any, Any]]) -> Iterator[Leaf]:
    for key, value in pairs:
        yield from _walk(value, str(key))


def flatten(structure: Any) -> Iterator[Leaf]:
    """
    Lazily flatten a structure into ``(name, value, is_file)`` leaves.

    The top-level shape is checked before the iterator is returned, so an
    invalid structure fails here rather than on first iteration.

    Raises:
        FormDataError: If the structure is not Record-like
    """
    return _walk_pairs(to_pairs(structure))


def _format_leaves(
    leaves: Iterator[Leaf],
    formatter: FormatterProtocol
) -> Iterator[Any]:
    for name, value, is_file in leaves:
        unit = formatter.format(name, value, is_file)
        if unit is not None:
            yield unit


def iter_units(structure: Any, formatter: FormatterLike) -> Iterator[Any]:
    """
    Lazily yield formatted units for a structure, skipping omitted leaves.

    Raises:
        FormDataError: If the structure is not Record-like
        UnsupportedFormatterError: If the formatter cannot be resolved
    """
    leaves = flatten(structure)
    return _format_leaves(leaves, get_formatter(formatter))


def _build(
    pairs: List[Tuple[Any, Any]],
    formatter: Optional[FormatterLike],
    options: Any
) -> Any:
    if formatter is None:
        formatter = get_config().default_formatter

    resolved = get_formatter(formatter)
    output_options = OutputOptions.coerce(options)

    units = list(_format_leaves(_walk_pairs(pairs), resolved))
    logger.debug(f"Flattened {len(pairs)} top-level fields into {len(units)} units with {resolved!r}")

    return resolved.output(units, output_options)


def create(
    structure: Any,
    formatter: Optional[FormatterLike] = None,
    options: Any = None
) -> FormDataResult:
    """
    Build form data from a nested structure.

    Args:
        structure: Mapping, dataclass, pydantic model or list of ``(key, value)`` pairs
        formatter: ``"multipart"``, ``"url_encoded"``, another registered name or
            any object implementing ``format``/``output``; defaults to the
            configured default formatter
        options: Output options (``get``, ``url``) as a mapping, pair list or
            ``OutputOptions``

    Returns:
        FormDataResult holding the formatter's payload, or the FormDataError
        when the structure is not Record-like

    Raises:
        UnsupportedFormatterError: If the formatter cannot be resolved

    Example:
        >>> create({"one": "two", "three": "four"}, "url_encoded").payload
        {'form': [('one', 'two'), ('three', 'four')]}
    """
    try:
        pairs = to_pairs(structure)
    except FormDataError as e:
        logger.warning(f"Rejected form data input: {e}")
        return FormDataResult(error=e)

    return FormDataResult(payload=_build(pairs, formatter, options))


def create_or_fail(
    structure: Any,
    formatter: Optional[FormatterLike] = None,
    options: Any = None
) -> Any:
    """
    Build form data from a nested structure, raising on invalid input.

    Same as ``create`` but returns the payload directly.

    Raises:
        FormDataError: If the structure is not Record-like
        UnsupportedFormatterError: If the formatter cannot be resolved
    """
    return _build(to_pairs(structure), formatter, options)
