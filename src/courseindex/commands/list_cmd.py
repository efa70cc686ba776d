"""
courseindex.commands.list_cmd - Print the course list in order.
"""

from __future__ import annotations

import argparse
import json
import sys

from courseindex.commands.common import load_catalog, load_configuration, resolve_catalog_file


def run(args: argparse.Namespace) -> int:
    """Run the list command."""
    config = load_configuration(args)
    path = resolve_catalog_file(args, config)

    catalog, result = load_catalog(path, config)
    if result is None:
        return 1
    if not catalog.is_loaded:
        print(f"No courses loaded from {path}.", file=sys.stderr)
        return 1

    if args.json:
        courses = [{"id": course_id, "name": name} for course_id, name in catalog.list_all()]
        print(json.dumps(courses, indent=2))
        return 0

    print("Here is a sample schedule:")
    print()
    for course_id, name in catalog.list_all():
        print(f"{course_id}, {name}")
    return 0
