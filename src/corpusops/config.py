"""Analysis configuration loaded from key=value or JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.txt"


class AnalysisConfig(BaseModel):
    """Configuration for corpus analysis runs."""

    model_config = ConfigDict(frozen=True)

    # Local sources
    default_file: str = "data/input.txt"
    base_dir: str = "data"
    default_ext: str = ".txt"

    # Artifacts and lock files
    out_dir: str = "out"

    # Wikipedia source
    wiki_lang: str = "fr"

    # Process listing
    process_top_n: int = 20


DEFAULT_CONFIG = AnalysisConfig()


def merge_config(overrides: Mapping[str, Any]) -> AnalysisConfig:
    """Apply overrides on top of the defaults.

    Unknown keys are ignored. If any known value is invalid the defaults
    are returned unchanged.
    """
    known = {k: v for k, v in overrides.items() if k in AnalysisConfig.model_fields}
    if not known:
        return DEFAULT_CONFIG
    try:
        return AnalysisConfig(**{**DEFAULT_CONFIG.model_dump(), **known})
    except ValidationError as e:
        logger.warning(f"Invalid configuration, using defaults: {e.error_count()} error(s)")
        return DEFAULT_CONFIG


def parse_key_value(text: str) -> dict[str, str]:
    """Parse "key = value" lines, skipping blanks, comments and malformed lines."""
    values: dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        values[key.strip()] = value.strip()
    return values


def load_key_value_config(path: Path | str) -> AnalysisConfig:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        logger.debug(f"No config at {path}, using defaults")
        return DEFAULT_CONFIG
    return merge_config(parse_key_value(text))


def load_json_config(path: Path | str) -> AnalysisConfig:
    """Load a JSON object of settings. Missing or malformed files yield defaults."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError:
        logger.info(f"Config not found at {path}, using defaults")
        return DEFAULT_CONFIG
    except json.JSONDecodeError as e:
        logger.warning(f"Cannot parse {path} ({e.msg}), using defaults")
        return DEFAULT_CONFIG

    if not isinstance(data, dict):
        logger.warning(f"Config {path} is not a JSON object, using defaults")
        return DEFAULT_CONFIG
    return merge_config(data)


def load_config(path: Path | str | None = None) -> AnalysisConfig:
    """Load configuration, choosing the format from the file suffix.

    Returns:
        AnalysisConfig; never fails when the file is missing or malformed
    """
    path = Path(path or DEFAULT_CONFIG_PATH)
    if path.suffix.lower() == ".json":
        return load_json_config(path)
    return load_key_value_config(path)
