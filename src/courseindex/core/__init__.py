"""
courseindex.core - Course models, the BST index, and batch loading
"""

from courseindex.core.catalog import Catalog, list_all, lookup, size
from courseindex.core.diagnostics import (
    CatalogError,
    Diagnostic,
    DiagnosticKind,
    EmptyIdentifier,
    EmptyName,
    MalformedRecord,
    RecordError,
    SourceUnavailable,
    UnresolvedPrerequisite,
)
from courseindex.core.loader import LoadResult, load_batch
from courseindex.core.models import Course, RawRecord
from courseindex.core.records import canonicalize, read_records, split_record
from courseindex.core.tree import CourseTree

__all__ = [
    "Catalog",
    "CatalogError",
    "Course",
    "CourseTree",
    "Diagnostic",
    "DiagnosticKind",
    "EmptyIdentifier",
    "EmptyName",
    "LoadResult",
    "MalformedRecord",
    "RawRecord",
    "RecordError",
    "SourceUnavailable",
    "UnresolvedPrerequisite",
    "canonicalize",
    "list_all",
    "load_batch",
    "lookup",
    "read_records",
    "size",
    "split_record",
]
