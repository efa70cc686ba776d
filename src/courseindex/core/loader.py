"""
Course batch loading.

Builds a fresh CourseTree from unvalidated records in two phases:

1. Parse: every record is checked on its own and turned into a candidate
   Course. Records missing an identifier or a name are skipped.
2. Validate: every prerequisite of every candidate must name some course
   in the whole parsed batch. Candidates with an unknown prerequisite are
   skipped; the rest are inserted into a new tree.

Rejections never abort a load. Each one becomes a Diagnostic, and the
result reports how many courses were inserted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence, Union

from courseindex.core.diagnostics import (
    Diagnostic,
    EmptyIdentifier,
    EmptyName,
    MalformedRecord,
    RecordError,
    UnresolvedPrerequisite,
)
from courseindex.core.models import Course, RawRecord
from courseindex.core.records import FIELD_WHITESPACE, canonicalize, split_record
from courseindex.core.tree import CourseTree

logger = logging.getLogger(__name__)

RecordInput = Union[RawRecord, Sequence[str], str]


@dataclass(frozen=True)
class Candidate:
    """A parsed course waiting for prerequisite validation.

    index is the 1-based place of the record in the loader input, which
    can differ from position when RawRecords arrive out of order.
    """

    position: int
    course: Course
    index: int = 0


@dataclass
class LoadResult:
    """Outcome of one batch load.

    Attributes:
        tree: Newly built tree, or None when no course was accepted.
        success_count: Number of courses inserted into the tree.
        issues: Structured diagnostics, in input order.
    """

    tree: CourseTree | None
    success_count: int = 0
    issues: list[Diagnostic] = field(default_factory=list)

    @property
    def diagnostics(self) -> list[str]:
        """Human-readable diagnostic strings, in input order."""
        return [str(issue) for issue in self.issues]

    @property
    def ok(self) -> bool:
        return self.success_count > 0


def parse_record(fields: Sequence[str], position: int = 0) -> Course:
    """Build a candidate Course from one record's fields.

    Field 0 is the course number, field 1 the name, and any further
    non-empty fields are prerequisite course numbers.

    Args:
        fields: Record fields
        position: Source position, attached to any raised error

    Returns:
        Course with canonical identifier and prerequisites

    Raises:
        MalformedRecord: Fewer than two fields
        EmptyIdentifier: Course number is empty
        EmptyName: Course name is empty
    """
    fields = [f.strip(FIELD_WHITESPACE) for f in fields]

    if len(fields) < 2:
        raise MalformedRecord(
            "Invalid format (missing course number or name)", position=position
        )

    course_id, name = fields[0], fields[1]
    if not course_id:
        message = "Course number is empty"
        if name:
            message += f" (Course name: {name})"
        raise EmptyIdentifier(message, position=position)

    course_id = canonicalize(course_id)
    if not name:
        raise EmptyName(
            f"Course name is empty (Course number: {course_id})",
            position=position,
            course_id=course_id,
        )

    prerequisites = tuple(canonicalize(p) for p in fields[2:] if p)
    return Course(id=course_id, name=name, prerequisites=prerequisites)


def check_prerequisites(course: Course, known_ids: set[str], position: int = 0) -> None:
    """Ensure every prerequisite of a course is a known identifier.

    Raises:
        UnresolvedPrerequisite: For the first prerequisite not in known_ids
    """
    for prerequisite in course.prerequisites:
        if prerequisite not in known_ids:
            raise UnresolvedPrerequisite(course.id, prerequisite, position=position)


def _as_raw_records(records: Iterable[RecordInput]) -> Iterator[tuple[int, RawRecord]]:
    """Normalize loader input to (input index, RawRecord) pairs.

    Plain field sequences and unsplit lines get 1-based positions in
    iteration order. RawRecords keep their own position.
    """
    for index, record in enumerate(records, start=1):
        if isinstance(record, RawRecord):
            yield index, record
        elif isinstance(record, str):
            yield index, RawRecord(position=index, fields=tuple(split_record(record)))
        else:
            yield index, RawRecord(position=index, fields=tuple(record))


def _parse_indexed(
    records: Iterable[RecordInput],
) -> tuple[list[Candidate], list[tuple[int, Diagnostic]]]:
    candidates: list[Candidate] = []
    rejected: list[tuple[int, Diagnostic]] = []

    for index, record in _as_raw_records(records):
        try:
            course = parse_record(record.fields, position=record.position)
        except RecordError as e:
            diagnostic = Diagnostic.from_error(e)
            rejected.append((index, diagnostic))
            logger.info("Skipped record: %s", diagnostic)
            continue
        candidates.append(Candidate(position=record.position, course=course, index=index))

    logger.debug("Parsed %d candidates, %d skipped", len(candidates), len(rejected))
    return candidates, rejected


def _validate_indexed(
    candidates: Sequence[Candidate],
) -> tuple[list[Candidate], list[tuple[int, Diagnostic]]]:
    known_ids = {candidate.course.id for candidate in candidates}
    accepted: list[Candidate] = []
    rejected: list[tuple[int, Diagnostic]] = []

    for candidate in candidates:
        try:
            check_prerequisites(candidate.course, known_ids, position=candidate.position)
        except UnresolvedPrerequisite as e:
            diagnostic = Diagnostic.from_error(e)
            rejected.append((candidate.index, diagnostic))
            logger.info("Skipped record: %s", diagnostic)
            continue
        accepted.append(candidate)

    return accepted, rejected


def parse_records(
    records: Iterable[RecordInput],
) -> tuple[list[Candidate], list[Diagnostic]]:
    """Parse phase: turn records into the staging batch.

    Returns:
        Tuple of (candidates in input order, diagnostics for skipped records)
    """
    candidates, rejected = _parse_indexed(records)
    return candidates, [diagnostic for _, diagnostic in rejected]


def validate_batch(
    candidates: Sequence[Candidate],
) -> tuple[list[Candidate], list[Diagnostic]]:
    """Validation phase: keep candidates whose prerequisites all exist.

    A prerequisite only has to name some candidate of the batch. Scan
    order does not matter, and neither self-references nor cycles are
    detected.

    Returns:
        Tuple of (accepted candidates in input order, rejection diagnostics)
    """
    accepted, rejected = _validate_indexed(candidates)
    return accepted, [diagnostic for _, diagnostic in rejected]


def load_batch(records: Iterable[RecordInput]) -> LoadResult:
    """Build a new CourseTree from a batch of records.

    Args:
        records: RawRecords, field sequences, or unsplit lines

    Returns:
        LoadResult with the new tree (None if empty), the number of
        inserted courses, and diagnostics in input order
    """
    candidates, parse_rejected = _parse_indexed(records)
    accepted, validation_rejected = _validate_indexed(candidates)

    tree = CourseTree()
    success_count = 0
    for candidate in accepted:
        tree.insert(candidate.course)
        success_count += 1

    # Each input record yields at most one diagnostic, so indices are unique.
    rejected = sorted(parse_rejected + validation_rejected, key=lambda pair: pair[0])
    issues = [diagnostic for _, diagnostic in rejected]
    logger.info("%d courses loaded, %d records skipped", success_count, len(issues))

    return LoadResult(
        tree=tree if success_count else None,
        success_count=success_count,
        issues=issues,
    )
