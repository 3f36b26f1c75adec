# clippings/parsers/splitter.py

from typing import Iterable, Iterator, List, NamedTuple
from ..config import DELIMITER
from ..exceptions import RecordBoundaryError

RECORD_SIZE = 3


class RecordGroup(NamedTuple):
    start_line: int      # 1-based line number of the group's first line
    lines: List[str]


def split_records(lines: Iterable[str], strict: bool = False) -> Iterator[RecordGroup]:
    """
    Group raw lines into three-line records.

    In the default mode empty lines and delimiter lines are ignored and a
    group is closed purely by count, so a record with a missing or extra
    line shifts every record after it. A trailing partial group is still
    yielded so the caller can report it.

    In strict mode groups are closed by the delimiter instead and any group
    that does not hold exactly three lines raises RecordBoundaryError.

    Args:
        lines: Raw lines without line terminators, in file order
        strict: Validate record boundaries against the delimiter
    """
    if strict:
        yield from _split_on_delimiter(lines)
        return

    group: List[str] = []
    start_line = 0
    for line_number, line in enumerate(lines, 1):
        if line == "" or line == DELIMITER:
            continue
        if not group:
            start_line = line_number
        group.append(line)
        if len(group) == RECORD_SIZE:
            yield RecordGroup(start_line, group)
            group = []

    if group:
        yield RecordGroup(start_line, group)


def _split_on_delimiter(lines: Iterable[str]) -> Iterator[RecordGroup]:
    group: List[str] = []
    start_line = 0
    for line_number, line in enumerate(lines, 1):
        if line == "":
            continue
        if line == DELIMITER:
            if group:
                yield _checked(start_line, group)
                group = []
            continue
        if not group:
            start_line = line_number
        group.append(line)

    if group:
        yield _checked(start_line, group)


def _checked(start_line: int, group: List[str]) -> RecordGroup:
    if len(group) != RECORD_SIZE:
        raise RecordBoundaryError(start_line, len(group))
    return RecordGroup(start_line, group)
