"""CLI package for bookshelf"""
from .main import cli

__all__ = ['cli']
