# bookshelf/sa/__init__.py
from .database import Database
from .models import Base, Book, LibraryBook, WishlistBook, User

__all__ = [
    'Database',
    'Base',
    'Book',
    'LibraryBook',
    'WishlistBook',
    'User',
]
