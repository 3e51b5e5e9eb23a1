# bookshelf/models/book.py

from datetime import date
from enum import Enum
from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict

from bookshelf.config import BooksOptions, OrderOptions

class Tag(str, Enum):
    FICTION = "0"
    NONFICTION = "1"
    MYSTERY = "2"
    SCIENCE_FICTION = "3"

    @property
    def label(self) -> str:
        return _TAG_LABELS[self]

class ReadingState(str, Enum):
    NOT_READ = "0"
    READING = "1"
    ABANDONED = "2"
    READ = "3"

    @property
    def label(self) -> str:
        return _READING_STATE_LABELS[self]

_TAG_LABELS = {
    Tag.FICTION: "Fiction",
    Tag.NONFICTION: "Non-fiction",
    Tag.MYSTERY: "Mystery",
    Tag.SCIENCE_FICTION: "Science fiction",
}

_READING_STATE_LABELS = {
    ReadingState.NOT_READ: "Not read",
    ReadingState.READING: "Reading",
    ReadingState.ABANDONED: "Abandoned",
    ReadingState.READ: "Read",
}

T = TypeVar("T")

class ListViewModel(BaseModel, Generic[T]):
    """One page of a list plus the size of the whole filtered set."""
    results: List[T]
    total_count: int
    page: int = 1
    limit: int = 10

class BookListInput(BaseModel):
    """Sanitized paging, search and ordering parameters for a book list"""
    search: str = ""
    page: int = 1
    order_by: str = "title"
    ascending: bool = True
    limit: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def build(
        cls,
        search: Optional[str],
        page: int,
        order_by: Optional[str],
        ascending: bool,
        limit: int,
        order: OrderOptions,
        per_page: int = 10
    ) -> "BookListInput":
        """Build an input model, replacing anything out of bounds with a default.

        Args:
            search: Title search term, None is treated as empty
            page: 1-based page number, values below 1 become 1
            order_by: Sort key, must be in ``order.allow``
            ascending: Sort direction, ignored when ``order_by`` is rejected
            limit: Page size, values below 1 become ``per_page``
            order: Ordering defaults and whitelist
            per_page: Fallback page size

        Returns:
            The sanitized BookListInput
        """
        if not order_by or order_by not in order.allow:
            order_by = order.by
            ascending = order.ascending

        return cls(
            search=(search or "").strip(),
            page=max(page or 1, 1),
            order_by=order_by,
            ascending=ascending,
            limit=limit if limit and limit > 0 else per_page,
        )

    @classmethod
    def default(cls, options: BooksOptions) -> "BookListInput":
        return cls.build("", 1, options.order.by, options.order.ascending, options.per_page, options.order, options.per_page)

class EditBookInput(BaseModel):
    """Changes to a library entry. ``rating``, ``tag`` and ``reading_state`` of None are left alone."""
    book_id: str
    rating: Optional[float] = None
    tag: Optional[str] = None
    reading_state: Optional[str] = None
    initial_time: Optional[date] = None
    final_time: Optional[date] = None

class BookMetadata(BaseModel):
    """Book data as resolved by an external metadata service"""
    id: str
    isbn: str = ""
    title: str
    author: str = ""
    description: Optional[str] = None
    image_path: str = ""

class BookViewModel(BaseModel):
    """Library list item"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    isbn: str
    title: str
    author: str
    image_path: str
    rating: float
    tag: Tag
    tag_label: str
    reading_state: ReadingState
    reading_state_label: str

    @classmethod
    def from_entry(cls, entry, book) -> "BookViewModel":
        tag = Tag(entry.tag)
        state = ReadingState(entry.reading_state)
        return cls(
            id=book.id,
            isbn=book.isbn,
            title=book.title,
            author=book.author,
            image_path=book.image_path,
            rating=entry.rating,
            tag=tag,
            tag_label=tag.label,
            reading_state=state,
            reading_state_label=state.label,
        )

class BookDetailViewModel(BaseModel):
    """Book detail; the personal fields are None for a catalog-only book"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    isbn: str
    title: str
    description: Optional[str] = None
    author: str
    image_path: str
    rating: Optional[float] = None
    tag: Optional[Tag] = None
    tag_label: Optional[str] = None
    reading_state: Optional[ReadingState] = None
    reading_state_label: Optional[str] = None
    initial_time: Optional[date] = None
    final_time: Optional[date] = None

    @classmethod
    def from_book(cls, book, entry=None) -> "BookDetailViewModel":
        detail = cls(
            id=book.id,
            isbn=book.isbn,
            title=book.title,
            description=book.description,
            author=book.author,
            image_path=book.image_path,
        )
        if entry is not None:
            tag = Tag(entry.tag)
            state = ReadingState(entry.reading_state)
            detail.rating = entry.rating
            detail.tag = tag
            detail.tag_label = tag.label
            detail.reading_state = state
            detail.reading_state_label = state.label
            detail.initial_time = entry.initial_time
            detail.final_time = entry.final_time
        return detail

class WishlistViewModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    isbn: str
    title: str
    author: str
    image_path: str

    @classmethod
    def from_entry(cls, entry) -> "WishlistViewModel":
        return cls(
            id=entry.book_id,
            isbn=entry.isbn,
            title=entry.title,
            author=entry.author,
            image_path=entry.image_path,
        )
