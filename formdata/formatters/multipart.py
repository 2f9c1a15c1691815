"""
Multipart formatter for ``multipart/form-data`` request bodies.

Each leaf becomes a part tuple carrying a ``form-data`` content disposition;
file leaves additionally carry the quoted base name of the file so the HTTP
layer can stream the file under its original filename.
"""

import logging
import os
from typing import Any, List, NamedTuple, Optional, Tuple

from ..core.formatter import BaseFormatter, is_omitted
from ..core.models import FormFile, OutputOptions

logger = logging.getLogger(__name__)

FILE_KIND = "file"
VALUE_KIND = ""
DISPOSITION_TYPE = "form-data"


class MultipartPart(NamedTuple):
    """One multipart part: ``(kind, payload, disposition, extra)``."""
    kind: str
    payload: Any
    disposition: Tuple[str, List[Tuple[str, str]]]
    extra: List[Any]

    @property
    def is_file(self) -> bool:
        return self.kind == FILE_KIND


class MultipartFormatter(BaseFormatter):
    """
    Formatter producing multipart parts.

    Plain values are passed through untouched so the HTTP layer decides how to
    serialize them; file paths are passed through with a ``filename`` entry.
    """

    name = "multipart"

    def format(self, name: str, value: Any, is_file: bool) -> Optional[MultipartPart]:
        if is_omitted(name, value, is_file):
            return None

        params = [("name", f'"{name}"')]
        if is_file:
            filename = os.path.basename(value)
            params.append(("filename", f'"{filename}"'))
            return MultipartPart(FILE_KIND, value, (DISPOSITION_TYPE, params), [])

        return MultipartPart(VALUE_KIND, value, (DISPOSITION_TYPE, params), [])

    def output(self, units: List[Any], options: OutputOptions) -> dict:
        """
        Wrap the parts as a multipart body.

        Raw ``(name, value)`` pairs are formatted on the way out, so a caller
        can hand a hand-built field list straight to ``output``.

        Examples:
            >>> MultipartFormatter().output([("key", "one")], OutputOptions())
            {'multipart': [MultipartPart(kind='', payload='one', disposition=('form-data', [('name', '"key"')]), extra=[])]}
        """
        parts = []
        for unit in units:
            if not isinstance(unit, MultipartPart) and isinstance(unit, tuple) and len(unit) == 2:
                name, value = unit
                if isinstance(value, FormFile):
                    unit = self.format(name, value.path, True)
                else:
                    unit = self.format(name, value, False)
                if unit is None:
                    continue
            parts.append(unit)

        logger.debug(f"Built multipart body with {len(parts)} parts")
        return {"multipart": parts}
