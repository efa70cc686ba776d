"""
courseindex.commands.common - Helpers shared by the catalog commands.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from courseindex.config import get_config
from courseindex.core import Catalog, Course, LoadResult, SourceUnavailable


def load_configuration(args: argparse.Namespace) -> dict[str, Any]:
    """Return the configuration selected by --config (or found by search)."""
    return get_config(getattr(args, "config", None))


def resolve_catalog_file(args: argparse.Namespace, config: dict[str, Any]) -> Path:
    """Catalog file from the command line, or catalog.default_file."""
    file_arg = getattr(args, "file", None)
    if file_arg:
        return Path(file_arg)
    return Path(str(config["catalog"]["default_file"]))


def load_catalog(
    path: Path, config: dict[str, Any], catalog: Catalog | None = None
) -> tuple[Catalog, LoadResult | None]:
    """Load a catalog file into a Catalog, reporting unreadable files.

    Returns:
        Tuple of (catalog, result). result is None when the file could not
        be read; an error has already been printed to stderr.
    """
    if catalog is None:
        catalog = Catalog()
    catalog_config = config["catalog"]
    try:
        result = catalog.load_file(
            path,
            delimiter=catalog_config.get("delimiter", ","),
            encoding=catalog_config.get("encoding", "utf-8"),
        )
    except SourceUnavailable as e:
        print(f"Error: {e}", file=sys.stderr)
        return catalog, None
    return catalog, result


def format_course(course: Course) -> str:
    """Two-line course description used by show and the menu."""
    if course.prerequisites:
        prerequisites = ", ".join(course.prerequisites)
    else:
        prerequisites = "None"
    return f"{course.id}, {course.name}\nPrerequisites: {prerequisites}"


def course_to_dict(course: Course) -> dict[str, Any]:
    return {
        "id": course.id,
        "name": course.name,
        "prerequisites": list(course.prerequisites),
    }
