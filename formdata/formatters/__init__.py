"""
Built-in formatters and the default formatter registry.

The registry is pre-populated with the ``multipart`` and ``url_encoded``
formatters; third-party formatters can be added with ``register_formatter``
and then selected by name.
"""

from ..core.formatter import FormatterLike, FormatterProtocol, FormatterRegistry
from .multipart import MultipartFormatter, MultipartPart
from .url_encoded import URLEncodedFormatter

default_registry = FormatterRegistry()
default_registry.register_formatter(MultipartFormatter.name, MultipartFormatter)
default_registry.register_formatter(URLEncodedFormatter.name, URLEncodedFormatter)


def register_formatter(name: str, formatter: FormatterLike) -> None:
    """Register a formatter in the default registry."""
    default_registry.register_formatter(name, formatter)


def get_formatter(formatter: FormatterLike) -> FormatterProtocol:
    """Resolve a formatter name or implementation against the default registry."""
    return default_registry.get_formatter(formatter)


__all__ = [
    "MultipartFormatter",
    "MultipartPart",
    "URLEncodedFormatter",
    "default_registry",
    "register_formatter",
    "get_formatter",
]
