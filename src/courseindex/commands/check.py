"""
courseindex.commands.check - Validate a catalog file.

Loads the file the same way every other command does and reports each
skipped record and the number of courses accepted.
"""

from __future__ import annotations

import argparse
import json

from courseindex.commands.common import load_catalog, load_configuration, resolve_catalog_file


def run(args: argparse.Namespace) -> int:
    """
    Run the check command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 if at least one course loaded, 1 otherwise)
    """
    config = load_configuration(args)
    path = resolve_catalog_file(args, config)

    if not args.json and not args.quiet:
        print(f"Loading {path}...")

    _, result = load_catalog(path, config)
    if result is None:
        return 1

    if args.json:
        print(
            json.dumps(
                {
                    "file": str(path),
                    "loaded": result.success_count,
                    "diagnostics": [issue.to_dict() for issue in result.issues],
                },
                indent=2,
            )
        )
    else:
        for message in result.diagnostics:
            print(f"Warning: {message}")
        if not args.quiet:
            print(f"{result.success_count} courses loaded.")

    return 0 if result.ok else 1
