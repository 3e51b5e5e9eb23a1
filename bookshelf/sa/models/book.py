# bookshelf/sa/models/book.py
from sqlalchemy import String, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Book(Base, TimestampMixin):
    """A catalog record, shared by every user."""
    __tablename__ = 'book'

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    isbn: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    normalized_title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(String, nullable=True)
    author: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    image_path: Mapped[str] = mapped_column(String, nullable=False, default="")

    # Relationships
    library_entries = relationship('LibraryBook', back_populates='book')

    __table_args__ = (
        Index('idx_book_isbn', 'isbn'),
        Index('idx_book_normalized_title', 'normalized_title'),
    )
