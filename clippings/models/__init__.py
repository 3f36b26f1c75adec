from .clipping import Book, Clipping

__all__ = ['Book', 'Clipping']
