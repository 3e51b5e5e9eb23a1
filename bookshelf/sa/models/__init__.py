# bookshelf/sa/models/__init__.py
from .base import Base, TimestampMixin
from .book import Book
from .library import LibraryBook
from .wishlist import WishlistBook
from .user import User

__all__ = [
    'Base',
    'TimestampMixin',
    'Book',
    'LibraryBook',
    'WishlistBook',
    'User',
]
