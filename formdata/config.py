"""
Environment configuration and logging setup for formdata.

Settings are read from the process environment, after loading a ``.env``
file when one is present:

- ``FORMDATA_DEFAULT_FORMATTER``: formatter used when ``create`` is called
  without one (default: ``multipart``)
- ``FORMDATA_LOG_LEVEL``: level applied by ``setup_logging`` (default: ``INFO``)
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_FORMATTER = "multipart"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class FormDataConfig:
    """Configuration for form data creation."""
    default_formatter: str = DEFAULT_FORMATTER
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> "FormDataConfig":
        """
        Build configuration from environment variables.

        Args:
            load_dotenv_file: Load a ``.env`` file before reading the environment
        """
        if load_dotenv_file:
            load_dotenv()

        return cls(
            default_formatter=os.getenv("FORMDATA_DEFAULT_FORMATTER", DEFAULT_FORMATTER),
            log_level=os.getenv("FORMDATA_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )


_config: Optional[FormDataConfig] = None


def get_config() -> FormDataConfig:
    """Get the environment configuration, reading it on first use."""
    global _config
    if _config is None:
        _config = FormDataConfig.from_env()
        logger.debug(f"Loaded configuration: {_config}")
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next call re-reads the environment."""
    global _config
    _config = None


def setup_logging(level: Optional[str] = None) -> None:
    """Configure logging for applications using formdata."""
    level = level or get_config().log_level
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
    )
