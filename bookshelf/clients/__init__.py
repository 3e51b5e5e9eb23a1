from .google_books import GoogleBooksClient

__all__ = ['GoogleBooksClient']
