"""
URL-encoded formatter for ``application/x-www-form-urlencoded`` bodies and
query strings.

Values are stringified but not percent-escaped; escaping belongs to the HTTP
layer that consumes the pairs.
"""

import logging
from typing import Any, List, Optional, Tuple, Union

from ..core.formatter import BaseFormatter, is_omitted
from ..core.models import OutputOptions

logger = logging.getLogger(__name__)


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class URLEncodedFormatter(BaseFormatter):
    """
    Formatter producing ``(name, value)`` string pairs.

    File uploads cannot be URL-encoded, so file leaves are always omitted.
    """

    name = "url_encoded"

    def format(self, name: str, value: Any, is_file: bool) -> Optional[Tuple[str, str]]:
        """
        Format ``name`` and ``value`` as a string pair.

        Examples:
            >>> URLEncodedFormatter().format("Name", "Value", False)
            ('Name', 'Value')
            >>> URLEncodedFormatter().format("Name", "Value", True) is None
            True
            >>> URLEncodedFormatter().format("", "Value", False) is None
            True
        """
        if is_omitted(name, value, is_file) or is_file:
            return None
        return (_to_text(name), _to_text(value))

    def output(
        self,
        units: List[Tuple[str, str]],
        options: OutputOptions
    ) -> Union[str, dict]:
        """
        Wrap the pairs for a request.

        The default output is a form body for a POST. ``get`` wraps the pairs
        as query parameters, and ``url`` renders a literal query string that
        can be appended to a URL. ``url`` takes precedence over ``get``.

        Examples:
            >>> f = URLEncodedFormatter()
            >>> f.output([("Name", "Value"), ("Name2", "Value2")], OutputOptions())
            {'form': [('Name', 'Value'), ('Name2', 'Value2')]}
            >>> f.output([("Name", "Value"), ("Name2", "Value2")], OutputOptions(get=True))
            {'params': [('Name', 'Value'), ('Name2', 'Value2')]}
            >>> f.output([("Name", "Value"), ("Name2", "Value2")], OutputOptions(url=True))
            '?Name=Value&Name2=Value2'
        """
        pairs = list(units)

        if options.url:
            if not pairs:
                return ""
            return "?" + "&".join(f"{name}={value}" for name, value in pairs)

        if options.get:
            return {"params": pairs}

        return {"form": pairs}
