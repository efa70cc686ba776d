"""
courseindex.commands.show - Print one or more courses with prerequisites.
"""

from __future__ import annotations

import argparse
import json
import sys

from courseindex.commands.common import (
    course_to_dict,
    format_course,
    load_catalog,
    load_configuration,
    resolve_catalog_file,
)


def run(args: argparse.Namespace) -> int:
    """
    Run the show command.

    Returns:
        Exit code (1 if any requested course was not found)
    """
    config = load_configuration(args)
    path = resolve_catalog_file(args, config)

    catalog, result = load_catalog(path, config)
    if result is None:
        return 1
    if not catalog.is_loaded:
        print(f"No courses loaded from {path}.", file=sys.stderr)
        return 1

    found = []
    missing = []
    for course_id in args.courses:
        course = catalog.lookup(course_id)
        if course is None:
            missing.append(course_id)
            if not args.json:
                print(f"Course {course_id} not found.")
                print()
            continue
        found.append(course)
        if not args.json:
            print(format_course(course))
            print()

    if args.json:
        print(
            json.dumps(
                {"courses": [course_to_dict(c) for c in found], "missing": missing},
                indent=2,
            )
        )

    return 1 if missing else 0
