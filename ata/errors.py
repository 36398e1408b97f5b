"""Exception hierarchy: startup (config) errors and per-turn (request) errors."""

from __future__ import annotations


class AtaError(Exception):
    """Base class for errors raised by ata."""


class ConfigNotFoundError(AtaError, FileNotFoundError):
    """Configuration file does not exist."""


class ConfigParseError(AtaError, ValueError):
    """Configuration file is not valid TOML or does not match the schema."""


class NetworkError(AtaError):
    """Transport failure while talking to the completions endpoint."""


class ResponseParseError(AtaError, ValueError):
    """Reply body is not JSON, or carries neither an error nor a completion."""
