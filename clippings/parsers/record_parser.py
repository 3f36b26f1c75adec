# clippings/parsers/record_parser.py

import logging
from datetime import datetime, timezone
from typing import List, Tuple
from pydantic import ValidationError
from ..config import AM_MARKER, PM_OFFSET, BOM
from ..exceptions import ParseError
from ..models import Book, Clipping
from .extractors import (
    extract_author,
    take_numeric_prefix_after_skip,
    take_alphabetic_run,
    take_non_alphabetic_run,
    skip_whitespace,
)

logger = logging.getLogger(__name__)


def parse_book_line(line: str) -> Book:
    """
    Parse a "Title (Tag) (Author)" line into a Book with no clippings.

    Args:
        line: First line of a record

    Returns:
        Book carrying the trimmed title and author

    Raises:
        ParseError: If the title is empty or no author group is found
    """
    line = line.strip().lstrip(BOM).strip()
    split_at = line.find('(')
    if split_at <= 0:
        raise ParseError(f"no title before author group in {line!r}")

    title = line[:split_at]
    author = extract_author(line[split_at:]).strip()
    if not author:
        raise ParseError(f"empty author in {line!r}")

    try:
        return Book(title=title, author=author)
    except ValidationError as e:
        raise ParseError(f"invalid book line {line!r}: {e}") from e


def parse_date_time(text: str) -> datetime:
    """
    Parse a zh-CN Kindle timestamp such as "添加于 2015年2月14日星期六 下午3:21:03".

    Year, month and day come first, then the weekday run and the AM/PM
    marker, then hour, minute and second. Any marker other than 上午 adds
    twelve hours; an hour that lands on 24 or later wraps back by 24.
    The result is UTC with no conversion applied.
    """
    text, year = take_numeric_prefix_after_skip(text)
    text, month = take_numeric_prefix_after_skip(text)
    text, day = take_numeric_prefix_after_skip(text)

    text, _weekday = take_alphabetic_run(text)
    text, marker = take_alphabetic_run(skip_whitespace(text))
    if not marker:
        raise ParseError(f"missing AM/PM marker in {text!r}")

    text, hour = take_numeric_prefix_after_skip(text)
    text, minute = take_numeric_prefix_after_skip(text)
    _, second = take_numeric_prefix_after_skip(text)

    hour += 0 if marker == AM_MARKER else PM_OFFSET
    if hour >= 24:
        hour -= 24

    try:
        return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    except (ValueError, OverflowError) as e:
        raise ParseError(f"invalid timestamp {year}-{month}-{day} {hour}:{minute}:{second}: {e}") from e


def parse_position_and_timestamp(line: str) -> Tuple[str, datetime]:
    """
    Parse "- 您在位置 #116-119的标注 | 添加于 ..." into ("#116-119", datetime).

    The position starts at the first '#' (or the first digit when there is
    none) and runs until the next alphabetic character.
    """
    start = line.find('#')
    if start == -1:
        start = next((i for i, ch in enumerate(line) if ch.isdigit()), -1)
    if start == -1:
        raise ParseError(f"no position in {line!r}")

    remainder, position = take_non_alphabetic_run(line[start:])
    return position, parse_date_time(remainder)


def parse_record(lines: List[str]) -> Tuple[Book, Clipping]:
    """
    Parse the three lines of one record into a Book and its Clipping.

    Raises:
        ParseError: If the record does not have exactly three lines or any
            line fails to parse
    """
    if len(lines) != 3:
        raise ParseError(f"expected 3 lines, got {len(lines)}")

    book_line, meta_line, text = lines
    book = parse_book_line(book_line)
    position, date_time = parse_position_and_timestamp(meta_line)
    clipping = Clipping(position=position, date_time=date_time, text=text)
    logger.debug(f"Parsed clipping {position} from '{book.title}'")
    return book, clipping
