from .book import BookRepository
from .library import LibraryRepository
from .wishlist import WishlistRepository
from .user import UserRepository

__all__ = ['BookRepository', 'LibraryRepository', 'WishlistRepository', 'UserRepository']
