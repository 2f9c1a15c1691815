"""
Tests for the formatter contract and FormatterRegistry.
"""

import pytest

from formdata import (
    BaseFormatter,
    FormatterProtocol,
    FormatterRegistry,
    MultipartFormatter,
    UnsupportedFormatterError,
    URLEncodedFormatter,
    create_or_fail,
    default_registry,
    get_formatter,
    is_omitted,
    register_formatter,
)


class JoinFormatter(BaseFormatter):
    """Formatter rendering ``name:value`` lines."""

    name = "lines"

    def format(self, name, value, is_file):
        if is_omitted(name, value, is_file):
            return None
        return f"{name}:{value}"

    def output(self, units, options):
        return "\n".join(units)


class TestIsOmitted:
    """Test suite for the shared omission predicate."""

    @pytest.mark.parametrize("name,value,is_file", [
        ("", "v", False),
        (None, "v", False),
        ("n", "", False),
        ("n", None, False),
        ("n", "v", None),
    ])
    def test_omitted(self, name, value, is_file):
        assert is_omitted(name, value, is_file) is True

    @pytest.mark.parametrize("value", ["v", 0, False, 0.0, [], " "])
    def test_kept(self, value):
        """Test that falsy but meaningful values are kept."""
        assert is_omitted("n", value, False) is False


class TestBaseFormatter:
    """Test suite for the abstract formatter base."""

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            BaseFormatter()

    def test_builtins_satisfy_protocol(self):
        assert isinstance(MultipartFormatter(), FormatterProtocol)
        assert isinstance(URLEncodedFormatter(), FormatterProtocol)

    def test_repr(self):
        assert repr(URLEncodedFormatter()) == "URLEncodedFormatter()"


class TestFormatterRegistry:
    """Test suite for FormatterRegistry."""

    @pytest.fixture
    def registry(self):
        """Create an empty registry."""
        return FormatterRegistry()

    def test_default_registry_builtins(self):
        """Test that the built-in formatters are registered by name."""
        assert default_registry.list_formatters() == ["multipart", "url_encoded"]
        assert isinstance(get_formatter("multipart"), MultipartFormatter)
        assert isinstance(get_formatter("url_encoded"), URLEncodedFormatter)

    def test_register_instance(self, registry):
        formatter = JoinFormatter()
        registry.register_formatter("lines", formatter)

        assert "lines" in registry
        assert registry.get_formatter("lines") is formatter

    def test_register_class_instantiates(self, registry):
        registry.register_formatter("lines", JoinFormatter)

        assert isinstance(registry.get_formatter("lines"), JoinFormatter)

    def test_register_rejects_non_formatter(self, registry):
        with pytest.raises(UnsupportedFormatterError, match="Not a formatter"):
            registry.register_formatter("bad", object())

    def test_register_rejects_class_without_contract(self, registry):
        class NotAFormatter:
            pass

        with pytest.raises(UnsupportedFormatterError, match="does not implement format/output"):
            registry.register_formatter("bad", NotAFormatter)

    def test_unregister(self, registry):
        registry.register_formatter("lines", JoinFormatter)
        registry.unregister_formatter("lines")
        registry.unregister_formatter("missing")

        assert registry.list_formatters() == []

    def test_get_unknown_name(self, registry):
        with pytest.raises(UnsupportedFormatterError, match="No formatter registered for: 'lines'"):
            registry.get_formatter("lines")

    def test_get_passes_through_implementations(self, registry):
        formatter = JoinFormatter()

        assert registry.get_formatter(formatter) is formatter

    def test_get_rejects_other_values(self, registry):
        with pytest.raises(UnsupportedFormatterError):
            registry.get_formatter(42)

    def test_registered_formatter_selectable_by_name(self):
        """Test that create resolves third-party formatters registered by name."""
        register_formatter("lines", JoinFormatter)
        try:
            payload = create_or_fail({"a": {"b": "1"}, "c": ["2", ""]}, "lines")
        finally:
            default_registry.unregister_formatter("lines")

        assert payload == "a[b]:1\nc[]:2"
