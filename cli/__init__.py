"""CLI package for clippings2md"""
from .main import cli

__all__ = ['cli']
