"""
Shared fixtures for formdata tests.

Provides sample nested structures, a recording formatter for inspecting the
engine's calls, and isolation of the cached configuration.
"""

import sys
from pathlib import Path
from typing import Any, List

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from formdata.config import reset_config  # noqa: E402


class RecordingFormatter:
    """Duck-typed formatter that records every call it receives."""

    def __init__(self):
        self.format_calls: List[tuple] = []
        self.output_calls: List[tuple] = []

    def format(self, name, value, is_file):
        self.format_calls.append((name, value, is_file))
        return (name, value, is_file)

    def output(self, units, options):
        self.output_calls.append((units, options))
        return units


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Clear cached configuration and formdata environment variables."""
    monkeypatch.delenv("FORMDATA_DEFAULT_FORMATTER", raising=False)
    monkeypatch.delenv("FORMDATA_LOG_LEVEL", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def recorder() -> RecordingFormatter:
    """Create a recording formatter."""
    return RecordingFormatter()


@pytest.fixture
def nested_data() -> dict:
    """Nested structure mixing maps, lists and tuples."""
    return {
        "one": "one",
        "two": {
            "three": "three",
            "four": ["four1", "four2", "four3"],
            "five": ("five1", "five2", {"six": "six"}),
        },
    }


@pytest.fixture
def nested_data_names() -> List[Any]:
    """Expected flattened (name, value) pairs for ``nested_data``."""
    return [
        ("one", "one"),
        ("two[three]", "three"),
        ("two[four][]", "four1"),
        ("two[four][]", "four2"),
        ("two[four][]", "four3"),
        ("two[five][]", "five1"),
        ("two[five][]", "five2"),
        ("two[five][][six]", "six"),
    ]
