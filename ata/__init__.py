"""ata: Ask the Terminal Anything. Config, sanitization and shortcuts shared by the CLI."""

from ata.config import DEFAULT_CONFIG_PATH, load_config
from ata.errors import (
    AtaError,
    ConfigNotFoundError,
    ConfigParseError,
    NetworkError,
    ResponseParseError,
)
from ata.sanitize import escape_quotes, sanitize_response, unescape_quotes
from ata.schemas import Config
from ata.shortcuts import SHORTCUTS, print_shortcuts

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "load_config",
    "DEFAULT_CONFIG_PATH",
    "Config",
    "AtaError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "NetworkError",
    "ResponseParseError",
    "sanitize_response",
    "escape_quotes",
    "unescape_quotes",
    "SHORTCUTS",
    "print_shortcuts",
]
