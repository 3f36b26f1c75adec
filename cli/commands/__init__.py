from .parse import parse
from .generate import generate

__all__ = ['parse', 'generate']
