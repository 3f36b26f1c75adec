# clippings/parsers/extractors.py

import re
from typing import Callable, List, Tuple
from ..exceptions import ExtractionError

_NUMBER_PATTERN = re.compile(r'\D*(\d+)')
_WHITESPACE_PATTERN = re.compile(r'\s*')


def extract_parenthesized(text: str) -> Tuple[str, str]:
    """
    Extract the content of the last of one or more trailing "(...)" groups.

    Each group is consumed in turn and the remaining text is re-examined
    until nothing is left, so "(Tag) (Author)" yields "Author".

    Args:
        text: Text starting with a parenthesized group

    Returns:
        Tuple of (remaining text, content of the last group)

    Raises:
        ExtractionError: If any group is missing, unbalanced, or nested
    """
    text = text.strip()
    while True:
        if not text.startswith('('):
            raise ExtractionError(f"expected '(' at start of {text!r}")

        close = text.find(')', 1)
        if close == -1:
            raise ExtractionError(f"unbalanced parenthesis in {text!r}")

        content = text[1:close]
        if '(' in content:
            raise ExtractionError(f"nested parenthesis in {text!r}")

        text = text[close + 1:].strip()
        if not text:
            return text, content


def extract_first_paren_group(text: str) -> Tuple[str, str]:
    """
    Extract the content between a leading "(" and the next nested "(".

    Handles authors carrying their own parenthetical, e.g.
    "(万维钢(同人于野))" gives "万维钢".
    """
    text = text.strip()
    if not text.startswith('('):
        raise ExtractionError(f"expected '(' at start of {text!r}")

    nested = text.find('(', 1)
    if nested == -1:
        raise ExtractionError(f"no nested parenthesis in {text!r}")
    return text[nested + 1:], text[1:nested]


AUTHOR_STRATEGIES: List[Callable[[str], Tuple[str, str]]] = [
    extract_parenthesized,
    extract_first_paren_group,
]


def extract_author(text: str) -> str:
    """Try each author strategy in order and return the first match."""
    errors = []
    for strategy in AUTHOR_STRATEGIES:
        try:
            _, author = strategy(text)
            return author
        except ExtractionError as e:
            errors.append(str(e))
    raise ExtractionError(f"no author found in {text!r}: {'; '.join(errors)}")


def take_numeric_prefix_after_skip(text: str) -> Tuple[str, int]:
    """
    Skip everything up to the first decimal digit and read the digit run.

    Returns:
        Tuple of (text after the digits, parsed number)

    Raises:
        ExtractionError: If the text holds no digit
    """
    match = _NUMBER_PATTERN.match(text)
    if not match:
        raise ExtractionError(f"no number found in {text!r}")
    return text[match.end():], int(match.group(1))


def take_alphabetic_run(text: str) -> Tuple[str, str]:
    """Read the longest leading run of alphabetic characters (may be empty)."""
    end = 0
    while end < len(text) and text[end].isalpha():
        end += 1
    return text[end:], text[:end]


def skip_whitespace(text: str) -> str:
    return text[_WHITESPACE_PATTERN.match(text).end():]


def take_non_alphabetic_run(text: str) -> Tuple[str, str]:
    """Read the longest leading run of non-alphabetic characters."""
    end = 0
    while end < len(text) and not text[end].isalpha():
        end += 1
    return text[end:], text[:end]
