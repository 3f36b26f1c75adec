# clippings/render/markdown.py

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union
from ..config import DEFAULT_OUTPUT_DIR, INDEX_FILE, SUMMARY_FILE, TIMESTAMP_FORMAT
from ..models import Book, Clipping

logger = logging.getLogger(__name__)


def file_stem(title: str) -> str:
    """File name (without extension) used for a book title."""
    return title.replace('/', '_').replace('\\', '_')


def clipping_to_markdown(clipping: Clipping) -> str:
    return (
        "> &emsp; \n"
        f"> {clipping.text}\n"
        "> \n"
        f"> <p align=\"right\"> {clipping.date_time.strftime(TIMESTAMP_FORMAT)} </p>\n"
        "> &emsp;\n"
    )


def book_to_markdown(book: Book) -> str:
    body = "\r".join(clipping_to_markdown(clipping) for clipping in book.clippings)
    return f"# {book.title} \nAuthor: `{book.author}` \n{body}"


def index_markdown(books: Iterable[Book]) -> str:
    links = "\n".join(f"- [{book.title}](./{file_stem(book.title)}.md)" for book in books)
    return f"# Clipping \r\r{links}"


def summary_markdown(books: Iterable[Book]) -> str:
    links = "\n  ".join(
        f"- [{book.title}](./clipping/{file_stem(book.title)}.md)" for book in books
    )
    return f"- [Clipping](./clipping/{INDEX_FILE}) \r  {links}"


def _write(path: Path, content: str) -> Path:
    # newline='' keeps the \r separators and \n line ends byte-for-byte
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)
    return path


def write_book(book: Book, output_dir: Path) -> Path:
    path = _write(output_dir / f"{file_stem(book.title)}.md", book_to_markdown(book))
    logger.debug(f"Wrote {len(book.clippings)} clippings to {path}")
    return path


def write_shelf(books: Iterable[Book], output_dir: Optional[Union[str, Path]] = None) -> List[Path]:
    """
    Write index.md, summary.md and one file per book.

    Args:
        books: Books to write, in the order they should be listed
        output_dir: Target directory, created if missing (default: ./output)

    Returns:
        Paths of the files written

    Raises:
        OSError: If the directory or any file cannot be written
    """
    output_dir = Path(output_dir if output_dir is not None else DEFAULT_OUTPUT_DIR)
    output_dir.mkdir(parents=True, exist_ok=True)
    books = list(books)

    written = [
        _write(output_dir / INDEX_FILE, index_markdown(books)),
        _write(output_dir / SUMMARY_FILE, summary_markdown(books)),
    ]
    for book in books:
        written.append(write_book(book, output_dir))

    logger.info(f"Wrote {len(books)} books to {output_dir}")
    return written
