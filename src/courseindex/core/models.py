"""
courseindex.core.models - Core data models for the course catalog.

Provides the immutable Course record stored by the index and the
RawRecord carrier handed to the loader by a record source.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Course:
    """
    Represents a single catalog course.

    Attributes:
        id: Canonical (uppercase) course identifier (e.g., "CS101")
        name: Display name, kept exactly as read
        prerequisites: Canonical identifiers of required courses, in input order
    """

    id: str
    name: str
    prerequisites: tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return f"{self.id}, {self.name}"


@dataclass(frozen=True)
class RawRecord:
    """One unparsed record and where it came from.

    Attributes:
        position: 1-based source position (file line number when read from a file).
        fields: Trimmed string fields in record order.
    """

    position: int
    fields: tuple[str, ...]
