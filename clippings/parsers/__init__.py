"""Parsers for the Kindle "My Clippings" text export."""

from .record_parser import (
    parse_book_line,
    parse_position_and_timestamp,
    parse_date_time,
    parse_record,
)
from .splitter import split_records, RecordGroup

__all__ = [
    'parse_book_line',
    'parse_position_and_timestamp',
    'parse_date_time',
    'parse_record',
    'split_records',
    'RecordGroup',
]
