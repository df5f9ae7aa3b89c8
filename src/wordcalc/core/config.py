"""
Configuration for the wordcalc calculator.

Settings live in the ``[calc]`` table of ``wordcalc.toml``:

    [calc]
    max_length = 4096
    max_depth = 100
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from wordcalc.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "wordcalc.toml"

# Upper bound for max_depth
MAX_DEPTH_CEILING = 1000


class CalcConfig(BaseModel):
    """Input limits applied before an expression reaches the parser."""

    max_length: int = Field(default=4096, gt=0, description="Maximum source length in characters")
    max_depth: int = Field(
        default=100,
        gt=0,
        le=MAX_DEPTH_CEILING,
        description="Maximum nesting of parentheses and prefix operators",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


def load_config(path: Path | None = None) -> CalcConfig:
    """Load calculator settings from a TOML file.

    Args:
        path: File to read. Defaults to ``wordcalc.toml`` in the current
            directory. A missing file yields the defaults.

    Returns:
        Validated configuration.

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values.
    """
    config_path = path if path is not None else Path(DEFAULT_CONFIG_FILE)
    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return CalcConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    section = data.get("calc", {})
    if not isinstance(section, dict):
        raise ConfigError(f"[calc] in {config_path} must be a table")

    try:
        config = CalcConfig.model_validate(section)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid settings in {config_path}: {e}") from e

    logger.debug("Loaded config from %s: %s", config_path, config)
    return config
