"""
Core form data components: errors, models and the formatter contract.

The flattening engine lives in ``formdata.core.engine`` and is imported by the
top-level package once the built-in formatters are registered.
"""

from .errors import FormDataError, UnsupportedFormatterError
from .models import FormFile, FormDataResult, OutputOptions
from .formatter import BaseFormatter, FormatterProtocol, FormatterRegistry, is_omitted

__all__ = [
    "FormDataError",
    "UnsupportedFormatterError",
    "FormFile",
    "FormDataResult",
    "OutputOptions",
    "BaseFormatter",
    "FormatterProtocol",
    "FormatterRegistry",
    "is_omitted",
]
