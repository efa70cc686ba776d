"""
courseindex.config - Configuration loading and defaults.

Configuration comes from three layers, later ones winning:

1. DEFAULT_CONFIG
2. The nearest .courseindex.toml, searching from the working directory up
3. COURSEINDEX_<SECTION>_<KEY> environment variables
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit import TOMLDocument

from courseindex.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG, ENV_PREFIX

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "default_config_document",
    "find_config_file",
    "get_config",
    "load_config",
    "merge_configs",
    "parse_toml",
    "parse_toml_document",
]


def parse_toml_document(content: str) -> TOMLDocument:
    """Parse TOML text into a tomlkit document that keeps comments and layout."""
    return tomlkit.parse(content)


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML text into plain Python dicts and lists."""
    return parse_toml_document(content).unwrap()


def find_config_file(start: Path) -> Path | None:
    """Find the nearest configuration file at or above a directory.

    Args:
        start: Directory (or file) to start searching from

    Returns:
        Path to the config file, or None if there is none up to the root
    """
    start = start.resolve()
    if start.is_file():
        start = start.parent

    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge override into a copy of base.

    Nested dicts are merged key by key; any other value in override
    replaces the value in base.
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _try_parse_env_value(value: str) -> Any:
    """Convert an environment variable string to a typed value.

    JSON lists and objects and booleans (any case) are converted.
    Anything else, including malformed JSON, is returned unchanged.
    """
    if value.startswith(("[", "{")):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value

    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False

    return value


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply COURSEINDEX_<SECTION>_<KEY> variables to config in place.

    The first segment after the prefix names the section; the rest, joined
    by underscores, names the key. COURSEINDEX_CATALOG_DEFAULT_FILE sets
    catalog.default_file.
    """
    for name, raw_value in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        section, _, key = name[len(ENV_PREFIX):].lower().partition("_")
        if not section or not key:
            continue
        target = config.setdefault(section, {})
        if not isinstance(target, dict):
            continue
        if isinstance(target.get(key), str):
            target[key] = raw_value
        else:
            target[key] = _try_parse_env_value(raw_value)
    return config


def load_config(config_path: Path) -> dict[str, Any]:
    """Load a configuration file merged over the defaults.

    Environment overrides are applied on top.

    Raises:
        OSError: If the file cannot be read
        tomlkit.exceptions.ParseError: If the file is not valid TOML
    """
    user_config = parse_toml(Path(config_path).read_text(encoding="utf-8"))
    config = merge_configs(DEFAULT_CONFIG, user_config)
    return _apply_env_overrides(config)


def get_config(config_path: Path | None = None, start: Path | None = None) -> dict[str, Any]:
    """Return the effective configuration.

    Args:
        config_path: Explicit config file; searched for when None
        start: Directory to search from (defaults to the working directory)

    Returns:
        Configuration dict; defaults plus environment overrides when no
        config file is found
    """
    if config_path is None:
        config_path = find_config_file(start or Path.cwd())

    if config_path is not None and config_path.exists():
        return load_config(config_path)
    return _apply_env_overrides(copy.deepcopy(DEFAULT_CONFIG))


def default_config_document() -> TOMLDocument:
    """Build a commented TOML document holding the default configuration."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment("courseindex configuration"))
    doc.add(tomlkit.nl())

    catalog = tomlkit.table()
    for key, value in DEFAULT_CONFIG["catalog"].items():
        catalog.add(key, value)
    catalog["default_file"].comment("Used when no file is given on the command line")
    doc.add("catalog", catalog)

    logging_table = tomlkit.table()
    logging_table.add("level", DEFAULT_CONFIG["logging"]["level"])
    logging_table["level"].comment("DEBUG, INFO, WARNING or ERROR")
    doc.add("logging", logging_table)
    return doc
