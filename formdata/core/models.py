"""
Data models shared by the flattening engine and the formatters.

This module defines the file reference leaf, the result wrapper returned by
``create`` and the validated output options handed to ``Formatter.output``.
"""

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from .errors import FormDataError


@dataclass(frozen=True)
class FormFile:
    """
    Reference to a file on disk to be uploaded as a form field.

    The engine never opens the file; it only hands ``path`` to the formatter
    with the file flag set.
    """
    path: str = ""

    def __post_init__(self):
        # Accept pathlib.Path and other os.PathLike values
        object.__setattr__(self, "path", os.fspath(self.path))

    @property
    def filename(self) -> str:
        """Base name of the referenced file."""
        return os.path.basename(self.path)


@dataclass
class FormDataResult:
    """
    Outcome of a ``create`` call.

    Exactly one of ``payload`` or ``error`` is meaningful: ``error`` is set
    when the input structure was rejected, otherwise ``payload`` holds the
    formatter's output (which may itself legitimately be falsy, e.g. ``""``).
    """
    payload: Any = None
    error: Optional[FormDataError] = None

    @property
    def ok(self) -> bool:
        """Whether the structure was accepted."""
        return self.error is None

    def unwrap(self) -> Any:
        """
        Return the payload or raise the carried error.

        Raises:
            FormDataError: If the structure was rejected
        """
        if self.error is not None:
            raise self.error
        return self.payload


class OutputOptions(BaseModel):
    """
    Options forwarded to ``Formatter.output``.

    ``get`` and ``url`` are understood by the URL-encoded formatter; other
    keys are kept in ``model_extra`` for third-party formatters.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    get: bool = False
    url: bool = False

    @classmethod
    def coerce(
        cls,
        options: Union["OutputOptions", Mapping[str, Any], list, tuple, None]
    ) -> "OutputOptions":
        """
        Build options from ``None``, a mapping or a list of ``(key, value)`` pairs.

        Raises:
            pydantic.ValidationError: If a known option has an invalid value
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, (list, tuple)):
            options = dict(options)
        return cls.model_validate(dict(options))
