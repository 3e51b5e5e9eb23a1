from typing import Optional
from sqlalchemy.orm import Session, Query
from bookshelf.sa.models import WishlistBook
from bookshelf.utils.text import normalize

class WishlistRepository:
    """Repository for managing WishlistBook entries."""

    SORT_COLUMNS = {
        "title": WishlistBook.title,
        "author": WishlistBook.author,
    }

    def __init__(self, session: Session):
        self.session = session

    def get_entry(self, user_id: str, book_id: str) -> Optional[WishlistBook]:
        return (
            self.session.query(WishlistBook)
            .filter(
                WishlistBook.user_id == user_id,
                WishlistBook.book_id == book_id
            )
            .first()
        )

    def exists(self, user_id: str, book_id: str) -> bool:
        return self.get_entry(user_id, book_id) is not None

    def user_books_query(self, user_id: str, search: str = "") -> Query:
        """Build the query behind a user's wishlist.

        Args:
            user_id: The ID of the user
            search: Optional search term, matched as a substring of the normalized title

        Returns:
            An unordered Query yielding WishlistBook objects
        """
        query = self.session.query(WishlistBook).filter(WishlistBook.user_id == user_id)
        term = normalize(search)
        if term:
            query = query.filter(WishlistBook.normalized_title.contains(term, autoescape=True))
        return query

    def create_entry(
        self,
        user_id: str,
        book_id: str,
        title: str,
        isbn: str = "",
        author: str = "",
        image_path: str = ""
    ) -> WishlistBook:
        """Add a book snapshot to a user's wishlist.

        Args:
            user_id: The ID of the user
            book_id: The external ID of the book
            title: Title at the time the book was wished for
            isbn: Optional ISBN
            author: Optional author(s)
            image_path: Optional cover image URL

        Returns:
            The created (flushed, uncommitted) WishlistBook object
        """
        entry = WishlistBook(
            user_id=user_id,
            book_id=book_id,
            isbn=isbn,
            title=title,
            normalized_title=normalize(title),
            author=author,
            image_path=image_path
        )
        self.session.add(entry)
        self.session.flush()
        return entry

    def delete_entry(self, user_id: str, book_id: str) -> bool:
        """Remove a book from the user's wishlist.

        Returns:
            True if the book was removed, False if it wasn't in the wishlist
        """
        result = (
            self.session.query(WishlistBook)
            .filter(
                WishlistBook.user_id == user_id,
                WishlistBook.book_id == book_id
            )
            .delete()
        )
        return result > 0
