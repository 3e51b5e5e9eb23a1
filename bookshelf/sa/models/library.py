# bookshelf/sa/models/library.py
from datetime import date
from sqlalchemy import String, Float, Date, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class LibraryBook(Base, TimestampMixin):
    """A user's personal record for a book in their library.

    ``tag`` and ``reading_state`` hold the codes of :class:`bookshelf.models.Tag`
    and :class:`bookshelf.models.ReadingState`. A NULL date means "not set".
    """
    __tablename__ = 'library_book'

    user_id: Mapped[str] = mapped_column(String(255), ForeignKey('user.id'), primary_key=True)
    book_id: Mapped[str] = mapped_column(String(255), ForeignKey('book.id'), primary_key=True)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    tag: Mapped[str] = mapped_column(String(1), nullable=False, default="0")
    reading_state: Mapped[str] = mapped_column(String(1), nullable=False, default="0")
    initial_time: Mapped[date | None] = mapped_column(Date, nullable=True)
    final_time: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Relationships
    user = relationship('User', back_populates='library_books')
    book = relationship('Book', back_populates='library_entries')

    __table_args__ = (
        Index('idx_library_book_user_id', 'user_id'),
        Index('idx_library_book_book_id', 'book_id'),
    )
