# clippings/shelf.py

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union
from .models import Book, Clipping

logger = logging.getLogger(__name__)


class BookShelf:
    """Collects clippings into books, keeping books in first-seen order."""

    def __init__(self):
        self._books: List[Book] = []
        self._index: Dict[Tuple[str, str], Book] = {}

    def add(self, book: Book, clipping: Clipping) -> Book:
        """
        Add a clipping under the given book identity.

        If a book with the same title and author is already on the shelf the
        clipping is appended to it; otherwise `book` is placed at the end of
        the shelf with the clipping as its first entry.

        Args:
            book: Book identity the clipping belongs to
            clipping: Clipping to add

        Returns:
            The shelf's Book that now holds the clipping
        """
        existing = self._index.get(book.identity)
        if existing is not None:
            existing.add_clipping(clipping)
            return existing

        book.add_clipping(clipping)
        self._books.append(book)
        self._index[book.identity] = book
        logger.debug(f"New book on shelf: '{book.title}' by '{book.author}'")
        return book

    def get(self, title: str, author: str) -> Optional[Book]:
        return self._index.get((title, author))

    @property
    def books(self) -> List[Book]:
        return list(self._books)

    @property
    def clipping_count(self) -> int:
        return sum(len(book.clippings) for book in self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def render_all(self, output_dir: Optional[Union[str, Path]] = None) -> List[Path]:
        """Write every book plus index.md and summary.md to `output_dir`."""
        from .render.markdown import write_shelf
        return write_shelf(self, output_dir)
