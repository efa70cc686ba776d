"""
courseindex.core.catalog - Catalog operations used by the CLI.

Thin functions over CourseTree plus the Catalog holder, which owns the
live tree and only replaces it with a load that accepted at least one
course.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from courseindex.core.loader import LoadResult, RecordInput, load_batch
from courseindex.core.models import Course
from courseindex.core.records import read_records
from courseindex.core.tree import CourseTree

logger = logging.getLogger(__name__)

__all__ = ["Catalog", "load_batch", "lookup", "list_all", "size"]


def lookup(tree: CourseTree, course_id: str) -> Course | None:
    """Find a course by identifier (case-insensitive). None when absent."""
    return tree.search(course_id)


def list_all(tree: CourseTree) -> list[tuple[str, str]]:
    """Return (id, name) pairs in ascending identifier order."""
    return [(course.id, course.name) for course in tree.traverse()]


def size(tree: CourseTree) -> int:
    """Return the number of courses in the tree."""
    return tree.size()


class Catalog:
    """Holds the live course tree and applies the replace-on-success policy.

    A load builds a separate tree. It becomes live only when it holds at
    least one course; otherwise the previous tree stays live unchanged.
    """

    def __init__(self) -> None:
        self.tree: CourseTree | None = None
        self.source: str | None = None

    @property
    def is_loaded(self) -> bool:
        return self.tree is not None

    def load(self, records: Iterable[RecordInput], source: str | None = None) -> LoadResult:
        """Load a batch and make it live if any course was accepted.

        The replaced tree is dropped, not cleared, so trees held by earlier
        LoadResults stay intact.

        Args:
            records: Records to load (see load_batch)
            source: Optional description of where the records came from

        Returns:
            The LoadResult of the attempt, whether or not it became live
        """
        result = load_batch(records)
        new_tree = result.tree
        if new_tree is not None and new_tree.size() > 0:
            self.tree = new_tree
            self.source = source
            logger.info("Catalog replaced with %d courses", result.success_count)
        else:
            logger.warning("Load produced no courses, keeping previous catalog")
        return result

    def load_file(
        self,
        path: Path | str,
        delimiter: str = ",",
        encoding: str = "utf-8",
    ) -> LoadResult:
        """Read a catalog file and load it.

        Raises:
            SourceUnavailable: If the file cannot be read. The live tree is untouched.
        """
        records = read_records(path, delimiter=delimiter, encoding=encoding)
        return self.load(records, source=str(path))

    def lookup(self, course_id: str) -> Course | None:
        if self.tree is None:
            return None
        return lookup(self.tree, course_id)

    def list_all(self) -> list[tuple[str, str]]:
        if self.tree is None:
            return []
        return list_all(self.tree)

    def size(self) -> int:
        if self.tree is None:
            return 0
        return size(self.tree)
