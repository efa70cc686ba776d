"""
courseindex.core.records - Record splitting and canonicalization.

Pure helpers shared by the loader and the lookup path, plus the file
reader that turns a CSV catalog into RawRecord objects.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from courseindex.core.diagnostics import SourceUnavailable
from courseindex.core.models import RawRecord

logger = logging.getLogger(__name__)

# Characters trimmed from both ends of every field
FIELD_WHITESPACE = " \t\r\n"


def canonicalize(course_id: str) -> str:
    """Return the canonical (uppercase) form of a course identifier."""
    return course_id.upper()


def split_record(line: str, delimiter: str = ",") -> list[str]:
    """Split one catalog line into trimmed fields.

    Empty fields in the middle of a line are kept so that positional
    meaning is preserved. A single trailing delimiter does not produce a
    trailing empty field.

    Examples:
        'CS101, Intro ' -> ['CS101', 'Intro']
        'CS201,Data,CS101,' -> ['CS201', 'Data', 'CS101']
        ',Intro' -> ['', 'Intro']

    Args:
        line: Raw line text, with or without its line terminator
        delimiter: Field separator

    Returns:
        List of trimmed field strings (empty list for an empty line)
    """
    line = line.rstrip("\r\n")
    if not line:
        return []

    parts = line.split(delimiter)
    if line.endswith(delimiter):
        parts.pop()
    return [part.strip(FIELD_WHITESPACE) for part in parts]


def iter_records(lines: Iterable[str], delimiter: str = ",") -> Iterator[RawRecord]:
    """Convert catalog lines to RawRecords, numbering lines from 1.

    Blank lines are skipped but still counted, so positions always match
    the line numbers of the source.
    """
    for line_number, line in enumerate(lines, start=1):
        if not line.strip(FIELD_WHITESPACE):
            continue
        yield RawRecord(position=line_number, fields=tuple(split_record(line, delimiter)))


def read_records(
    path: Path | str,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> list[RawRecord]:
    """Read every record from a catalog file.

    The file is read completely before any record is returned so that an
    unreadable source is reported before loading starts.

    Args:
        path: Catalog file path
        delimiter: Field separator
        encoding: Text encoding of the file

    Returns:
        RawRecords in file order

    Raises:
        SourceUnavailable: If the file cannot be opened, read or decoded
    """
    path = Path(path)
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(path, str(e)) from e

    records = list(iter_records(text.splitlines(), delimiter))
    logger.debug("Read %d records from %s", len(records), path)
    return records
