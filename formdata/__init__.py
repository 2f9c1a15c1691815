"""
formdata - Build multipart and URL-encoded form data from nested structures.

HTTP form encodings are flat lists of name/value pairs while application data
is nested. formdata flattens mappings, dataclasses, pydantic models, lists and
tuples into bracketed field names and hands each field to a pluggable
formatter.

Quick Start:
    >>> from formdata import create_or_fail
    >>> create_or_fail({"user": {"tags": ["a", "b"]}}, "url_encoded")
    {'form': [('user[tags][]', 'a'), ('user[tags][]', 'b')]}

File Uploads:
    >>> from formdata import FormFile, create_or_fail
    >>> body = create_or_fail({"avatar": FormFile("img/me.png")}, "multipart")

Components:
- formdata.core: errors, models and the formatter contract
- formdata.core.engine: recursive flattening engine
- formdata.formatters: built-in multipart and url_encoded formatters
- formdata.config: environment configuration and logging setup
"""

__version__ = "0.1.0"
__author__ = "formdata contributors"
__package_name__ = "formdata"

# Core models and errors
from .core.errors import FormDataError, UnsupportedFormatterError
from .core.models import FormFile, FormDataResult, OutputOptions

# Formatter contract
from .core.formatter import BaseFormatter, FormatterProtocol, FormatterRegistry, is_omitted

# Built-in formatters
from .formatters import (
    MultipartFormatter,
    MultipartPart,
    URLEncodedFormatter,
    default_registry,
    get_formatter,
    register_formatter,
)

# Engine
from .core.engine import create, create_or_fail, flatten, iter_units, to_pairs

# Configuration
from .config import FormDataConfig, get_config, setup_logging


# Public API exports
__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__package_name__",
    # Engine
    "create",
    "create_or_fail",
    "flatten",
    "iter_units",
    "to_pairs",
    # Models
    "FormFile",
    "FormDataResult",
    "OutputOptions",
    # Errors
    "FormDataError",
    "UnsupportedFormatterError",
    # Formatters
    "BaseFormatter",
    "FormatterProtocol",
    "FormatterRegistry",
    "MultipartFormatter",
    "MultipartPart",
    "URLEncodedFormatter",
    "default_registry",
    "get_formatter",
    "register_formatter",
    "is_omitted",
    # Configuration
    "FormDataConfig",
    "get_config",
    "setup_logging",
]
