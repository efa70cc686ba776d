"""
courseindex.commands.config_cmd - Inspect the effective configuration.

- `courseindex config show` - Print merged settings as TOML (or JSON)
- `courseindex config path` - Print the config file in use
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import tomlkit

from courseindex.config import find_config_file, get_config


def run(args: argparse.Namespace) -> int:
    """Run the config command."""
    action = getattr(args, "config_action", None)

    if action == "show":
        return _show(args)
    elif action == "path":
        return _path(args)
    else:
        print("Usage: courseindex config <show|path>", file=sys.stderr)
        return 1


def _show(args: argparse.Namespace) -> int:
    config = get_config(args.config)
    if args.json:
        print(json.dumps(config, indent=2))
    else:
        print(tomlkit.dumps(config), end="")
    return 0


def _path(args: argparse.Namespace) -> int:
    config_path = args.config or find_config_file(Path.cwd())
    if config_path is None:
        print("No configuration file found (using defaults)", file=sys.stderr)
        return 1
    print(config_path)
    return 0
