"""
courseindex.core.diagnostics - Load errors and the diagnostics they produce.

Per-record failures are raised as RecordError subclasses by the parsing
and validation helpers and turned into Diagnostic entries by the loader.
SourceUnavailable belongs to the record source and is the only member of
the taxonomy that reaches callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class DiagnosticKind(Enum):
    """Reason a record was rejected."""

    MALFORMED_RECORD = "record.malformed"
    EMPTY_IDENTIFIER = "record.empty_id"
    EMPTY_NAME = "record.empty_name"
    UNRESOLVED_PREREQUISITE = "prerequisite.unresolved"


class CatalogError(Exception):
    """Base class for all course catalog errors."""


class RecordError(CatalogError):
    """A single record could not be accepted."""

    kind: DiagnosticKind

    def __init__(self, message: str, position: int = 0, course_id: str | None = None):
        super().__init__(message)
        self.message = message
        self.position = position
        self.course_id = course_id


class MalformedRecord(RecordError):
    """Record has fewer than the two required fields."""

    kind = DiagnosticKind.MALFORMED_RECORD


class EmptyIdentifier(RecordError):
    """Record's course number field is empty."""

    kind = DiagnosticKind.EMPTY_IDENTIFIER


class EmptyName(RecordError):
    """Record's course name field is empty."""

    kind = DiagnosticKind.EMPTY_NAME


class UnresolvedPrerequisite(RecordError):
    """A listed prerequisite is not defined anywhere in the batch."""

    kind = DiagnosticKind.UNRESOLVED_PREREQUISITE

    def __init__(self, course_id: str, missing_id: str, position: int = 0):
        super().__init__(
            f"Course {course_id} has invalid prerequisite: {missing_id}",
            position=position,
            course_id=course_id,
        )
        self.missing_id = missing_id


class SourceUnavailable(CatalogError):
    """The record source could not be opened or read."""

    def __init__(self, path: Path | str, reason: str = ""):
        message = f"Could not open file {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = Path(path)
        self.reason = reason


@dataclass(frozen=True)
class Diagnostic:
    """A rejected record, reported by the loader.

    Attributes:
        position: Source position of the rejected record.
        kind: Why it was rejected.
        message: Human-readable reason, without the position prefix.
        course_id: Identifier of the rejected course, when one was parsed.
        missing_id: Offending prerequisite for UNRESOLVED_PREREQUISITE.
    """

    position: int
    kind: DiagnosticKind
    message: str
    course_id: str | None = None
    missing_id: str | None = None

    @classmethod
    def from_error(cls, error: RecordError) -> Diagnostic:
        return cls(
            position=error.position,
            kind=error.kind,
            message=error.message,
            course_id=error.course_id,
            missing_id=getattr(error, "missing_id", None),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "position": self.position,
            "kind": self.kind.value,
            "message": self.message,
            "course_id": self.course_id,
            "missing_id": self.missing_id,
        }

    def __str__(self) -> str:
        return f"Line {self.position} skipped - {self.message}"
