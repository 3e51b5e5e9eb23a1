# bookshelf/sa/models/wishlist.py
from sqlalchemy import String, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class WishlistBook(Base, TimestampMixin):
    """Books that users want to acquire.

    The descriptive columns are a snapshot taken when the entry is created and
    ``book_id`` is not a foreign key into the catalog.
    """
    __tablename__ = 'wishlist'

    user_id: Mapped[str] = mapped_column(String(255), ForeignKey('user.id'), primary_key=True)
    book_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    isbn: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    normalized_title: Mapped[str] = mapped_column(String(500), nullable=False)
    author: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    image_path: Mapped[str] = mapped_column(String, nullable=False, default="")

    # Relationships
    user = relationship('User', back_populates='wishlist_books')

    __table_args__ = (
        Index('idx_wishlist_user_id', 'user_id'),
    )
