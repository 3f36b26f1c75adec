# clippings/converter.py

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union
from .config import INPUT_ENCODING
from .exceptions import ParseError, SkippedRecord
from .parsers import parse_record, split_records
from .shelf import BookShelf

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of one conversion run."""
    shelf: BookShelf
    skipped: List[SkippedRecord] = field(default_factory=list)
    records_read: int = 0
    written: List[Path] = field(default_factory=list)

    @property
    def records_added(self) -> int:
        return self.records_read - len(self.skipped)


def read_lines(path: Union[str, Path]) -> List[str]:
    """Read the whole export, dropping line terminators. I/O errors propagate."""
    with open(path, 'r', encoding=INPUT_ENCODING) as f:
        return [line.rstrip('\n') for line in f]


def build_shelf(lines: Iterable[str], strict: bool = False) -> ConversionResult:
    """
    Split, parse and shelve every record in `lines`.

    Records that fail to parse are dropped and listed in the result's
    `skipped`; with `strict` the first failure is raised instead.

    Raises:
        ParseError: In strict mode, for the first record that fails to parse
        RecordBoundaryError: In strict mode, for a misaligned record
    """
    result = ConversionResult(shelf=BookShelf())

    for group in split_records(lines, strict=strict):
        result.records_read += 1
        try:
            book, clipping = parse_record(group.lines)
        except ParseError as e:
            if strict:
                raise ParseError(f"line {group.start_line}: {e}") from e
            logger.warning(f"Skipping record at line {group.start_line}: {e}")
            result.skipped.append(SkippedRecord(group.start_line, group.lines, str(e)))
            continue
        result.shelf.add(book, clipping)

    logger.info(
        f"Parsed {result.records_added} clippings into {len(result.shelf)} books, "
        f"skipped {len(result.skipped)} records"
    )
    return result


def parse_file(path: Union[str, Path], strict: bool = False) -> ConversionResult:
    logger.info(f"Reading clippings from {path}")
    return build_shelf(read_lines(path), strict=strict)


def generate(path: Union[str, Path], output_dir: Optional[Union[str, Path]] = None,
             strict: bool = False) -> ConversionResult:
    """Parse `path` and write the Markdown output to `output_dir`."""
    result = parse_file(path, strict=strict)
    result.written = result.shelf.render_all(output_dir)
    return result
