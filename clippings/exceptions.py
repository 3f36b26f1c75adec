# clippings/exceptions.py
from typing import List, NamedTuple


class ClippingsError(Exception):
    """Base class for errors raised while converting a clippings export."""


class ParseError(ClippingsError):
    """A record (or one of its lines) could not be parsed."""


class ExtractionError(ParseError):
    """A low-level field extraction found nothing to extract."""


class RecordBoundaryError(ClippingsError):
    """Raised in strict mode when a record does not hold exactly three lines."""

    def __init__(self, line_number: int, line_count: int):
        self.line_number = line_number
        self.line_count = line_count
        super().__init__(
            f"record starting at line {line_number} has {line_count} lines, expected 3"
        )


class SkippedRecord(NamedTuple):
    line_number: int
    lines: List[str]
    reason: str
