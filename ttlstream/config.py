"""Load parser config from TOML (e.g. ttlstream.toml).

Config file is looked up in order:
  1. Explicit path passed to load_parser_config()
  2. Path in TTLSTREAM_CONFIG env var (if set)
  3. ttlstream.toml in the current working directory

Only the [parser] table is read:

    [parser]
    unrecognized_policy = "abort"
    max_unrecognized_lines = 100
    keep_raw_lines = false
    encoding = "utf-8-sig"

If no file is found, built-in defaults are used (skip unrecognized lines,
keep raw declaration lines, utf-8 with an optional byte-order mark).
"""

from __future__ import annotations

import logging
import os
import tomllib
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TTLSTREAM_CONFIG"
CONFIG_FILE_NAME = "ttlstream.toml"


class UnrecognizedLinePolicy(str, Enum):
    """What the load driver does with a NOT_A_TURTLE line."""

    SKIP = "skip"
    """Record a diagnostic and continue."""

    ABORT = "abort"
    """Raise NotATurtleError at the first unrecognized line."""


class ParserConfig(BaseModel):
    """Configuration for the line classifier and document accumulator.

    Attributes:
        unrecognized_policy: Skip or abort on lines that are not Turtle.
        max_unrecognized_lines: With the skip policy, abort once more than
            this many lines were unrecognized. None means no limit.
        keep_raw_lines: Keep the raw declaration line on each HeaderItem.
        encoding: Text encoding used by the file loader.
    """

    model_config = {"frozen": True}

    unrecognized_policy: UnrecognizedLinePolicy = Field(
        default=UnrecognizedLinePolicy.SKIP,
        description="Skip or abort on lines that are not Turtle.",
    )
    max_unrecognized_lines: int | None = Field(
        default=None,
        ge=0,
        description="Abort once more than this many lines were unrecognized.",
    )
    keep_raw_lines: bool = Field(default=True, description="Keep raw declaration lines on header items.")
    encoding: str = Field(default="utf-8-sig", description="Text encoding used by the file loader.")


def _default_config_paths() -> list[Path]:
    """Return paths to check for ttlstream.toml (first existing wins)."""
    paths: list[Path] = []
    if os.environ.get(CONFIG_ENV_VAR):
        paths.append(Path(os.environ[CONFIG_ENV_VAR]))
    paths.append(Path.cwd() / CONFIG_FILE_NAME)
    return paths


def load_parser_config(path: str | Path | None = None) -> ParserConfig:
    """Load ParserConfig from the first TOML file found.

    An explicit `path` that does not exist raises FileNotFoundError; missing
    default locations fall back to built-in defaults. Invalid values raise
    pydantic.ValidationError.
    """
    if path is not None:
        candidates = [Path(path)]
        if not candidates[0].is_file():
            raise FileNotFoundError(f"config file not found: {path}")
    else:
        candidates = _default_config_paths()

    for candidate in candidates:
        if not candidate.is_file():
            continue
        with open(candidate, "rb") as f:
            data: dict[str, Any] = tomllib.load(f)
        logger.debug("Loaded parser config from %s", candidate)
        section = data.get("parser")
        if isinstance(section, dict):
            return ParserConfig(**section)
        return ParserConfig()
    return ParserConfig()
