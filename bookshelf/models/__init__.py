# bookshelf/models/__init__.py
from .book import (
    Tag, ReadingState, ListViewModel, BookListInput, EditBookInput,
    BookMetadata, BookViewModel, BookDetailViewModel, WishlistViewModel
)
from .user import UserViewModel

__all__ = [
    'Tag',
    'ReadingState',
    'ListViewModel',
    'BookListInput',
    'EditBookInput',
    'BookMetadata',
    'BookViewModel',
    'BookDetailViewModel',
    'WishlistViewModel',
    'UserViewModel',
]
