# clippings/models/clipping.py

from pydantic import BaseModel, ConfigDict, field_validator
from datetime import datetime
from typing import Optional, List, Tuple


class Clipping(BaseModel):
    """A single highlighted passage"""
    model_config = ConfigDict(frozen=True)

    position: str            # Raw location range, e.g. "#116-119"
    date_time: datetime      # UTC, second resolution
    text: str                # Quoted text, unmodified
    mark: Optional[str] = None  # Reserved for note records


class Book(BaseModel):
    """A book and the clippings taken from it, in the order they were added"""

    title: str
    author: str
    clippings: List[Clipping] = []

    @field_validator('title', 'author', mode='before')
    @classmethod
    def strip_whitespace(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator('title')
    @classmethod
    def title_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("title must not be empty")
        return value

    @property
    def identity(self) -> Tuple[str, str]:
        return (self.title, self.author)

    def is_identical(self, other: "Book") -> bool:
        """Two books are the same book when title and author match exactly."""
        return self.identity == other.identity

    def add_clipping(self, clipping: Clipping) -> None:
        self.clippings.append(clipping)
