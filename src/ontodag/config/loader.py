"""
ontodag.config.loader - Find, load, merge and override configuration.

Configuration comes from three layers, later ones winning:
1. DEFAULT_CONFIG
2. The nearest .ontodag.toml (searched upward from the working directory)
3. ONTODAG_<SECTION>_<KEY> environment variables
"""

from __future__ import annotations

import copy
import json
import logging
import os
import re
from pathlib import Path
from typing import Any

import tomlkit

from ontodag.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG, ENV_PREFIX

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "csv")

_NUMBER_RE = re.compile(r"-?\d+(\.\d+)?([eE][-+]?\d+)?")


def find_config_file(start: Path) -> Path | None:
    """Find the nearest config file, walking up from a directory.

    Args:
        start: Directory to begin searching from.

    Returns:
        Path to .ontodag.toml, or None if not found.
    """
    current = start.resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge two config dicts without modifying either."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _try_parse_env_value(raw: str) -> Any:
    """Parse an environment value into a typed value.

    JSON arrays/objects and numbers (integer or decimal) are decoded,
    "true"/"false" become booleans, anything else
    (including malformed JSON) stays a string.
    """
    lowered = raw.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if raw.startswith(("[", "{")) or _NUMBER_RE.fullmatch(raw):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            return raw
    return raw


def apply_env_overrides(config: dict[str, Any], environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Apply ONTODAG_<SECTION>_<KEY> environment variables.

    Only sections that exist in the config are overridden; the key is the
    rest of the variable name, lower-cased.
    """
    environ = os.environ if environ is None else environ
    result = copy.deepcopy(config)
    for name, raw in environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        rest = name[len(ENV_PREFIX) :].lower()
        section, _, key = rest.partition("_")
        if not key or not isinstance(result.get(section), dict):
            continue
        result[section][key] = _try_parse_env_value(raw)
        logger.debug("Config override from %s", name)
    return result


def load_config(config_path: Path) -> dict[str, Any]:
    """Load a TOML config file merged over the defaults.

    Raises:
        OSError: If the file cannot be read.
        tomlkit.exceptions.ParseError: If the file is not valid TOML.
    """
    content = config_path.read_text(encoding="utf-8")
    user_config = tomlkit.parse(content).unwrap()
    return merge_configs(DEFAULT_CONFIG, user_config)


def get_config(config_path: Path | None = None, start_dir: Path | None = None) -> dict[str, Any]:
    """Resolve the effective configuration.

    Args:
        config_path: Explicit config file; otherwise discovered from start_dir.
        start_dir: Directory to search from (defaults to cwd).

    Returns:
        Config dict with defaults, file values and env overrides applied.
    """
    if config_path is None:
        config_path = find_config_file(start_dir or Path.cwd())
    if config_path is not None:
        logger.debug("Loading config from %s", config_path)
        config = load_config(config_path)
    else:
        config = copy.deepcopy(DEFAULT_CONFIG)
    return apply_env_overrides(config)


def validate_config(config: dict[str, Any]) -> list[str]:
    """Check config values the tool depends on.

    Returns:
        List of error messages (empty when valid).
    """
    errors = []
    parser = config.get("parser", {})
    for key in ("field_delimiter", "comment_prefix", "synonym_prefix"):
        value = parser.get(key)
        if not isinstance(value, str) or not value:
            errors.append(f"parser.{key} must be a non-empty string")

    search = config.get("search", {})
    if not isinstance(search.get("url", ""), str):
        errors.append("search.url must be a string")
    for key in ("timeout", "batch_size"):
        value = search.get(key)
        if value is not None and (not isinstance(value, (int, float)) or value <= 0):
            errors.append(f"search.{key} must be a positive number")

    fmt = config.get("output", {}).get("format")
    if fmt is not None and fmt not in OUTPUT_FORMATS:
        errors.append(f"output.format must be one of {', '.join(OUTPUT_FORMATS)}")
    return errors
