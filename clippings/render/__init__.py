from .markdown import (
    book_to_markdown,
    clipping_to_markdown,
    index_markdown,
    summary_markdown,
    write_book,
    write_shelf,
)

__all__ = [
    'book_to_markdown',
    'clipping_to_markdown',
    'index_markdown',
    'summary_markdown',
    'write_book',
    'write_shelf',
]
