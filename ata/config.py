"""Load ata.toml into a Config."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from ata.errors import ConfigNotFoundError, ConfigParseError
from ata.schemas import Config

DEFAULT_CONFIG_PATH = "ata.toml"

logger = logging.getLogger(__name__)


def _format_validation_error(e: ValidationError) -> str:
    """One line per failing field: `field: message`."""
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "(root)"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> Config:
    """
    Read and validate the TOML config at path.
    Raises ConfigNotFoundError if the file is absent, ConfigParseError if it is not
    valid TOML or a required field is missing or has the wrong type.
    """
    p = Path(path)
    if not p.is_file():
        raise ConfigNotFoundError(f"Config file not found: {p}")

    try:
        with p.open("rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigParseError(f"Invalid TOML in {p}: {e}") from e

    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(f"Invalid config in {p}: {_format_validation_error(e)}") from e

    logger.debug("Loaded config from %s: %s", p, config)
    return config
