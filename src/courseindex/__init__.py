"""
courseindex - Course catalog index with prerequisite-checked loading

courseindex keeps a course catalog in a binary search tree ordered by
course number, and loads CSV catalogs in two passes so that a course is
only accepted when every prerequisite it names exists in the same file.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("courseindex")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from courseindex.core import (
    Catalog,
    Course,
    CourseTree,
    Diagnostic,
    LoadResult,
    SourceUnavailable,
    list_all,
    load_batch,
    lookup,
    size,
)

__all__ = [
    "__version__",
    "Catalog",
    "Course",
    "CourseTree",
    "Diagnostic",
    "LoadResult",
    "SourceUnavailable",
    "list_all",
    "load_batch",
    "lookup",
    "size",
]
