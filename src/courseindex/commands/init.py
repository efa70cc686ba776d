"""
courseindex.commands.init - Create a .courseindex.toml configuration file.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import tomlkit

from courseindex.config import CONFIG_FILENAME, default_config_document


def run(args: argparse.Namespace) -> int:
    """Write the default configuration to the target directory."""
    directory = Path(getattr(args, "directory", None) or Path.cwd())
    config_path = directory / CONFIG_FILENAME

    if config_path.exists() and not args.force:
        print(f"Error: {config_path} already exists (use --force to overwrite)", file=sys.stderr)
        return 1

    doc = default_config_document()
    if args.default_file:
        doc["catalog"]["default_file"] = args.default_file

    config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    if not args.quiet:
        print(f"Created {config_path}")
    return 0
