# bookshelf/config.py
"""Runtime options, read from environment variables."""

import os
from typing import List, Optional
from pydantic import BaseModel, Field

DEFAULT_ORDER_ALLOW = ["title", "rating", "tag", "reading_state"]
DEFAULT_GOOGLE_BOOKS_URL = "https://www.googleapis.com/books/v1/volumes"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class OrderOptions(BaseModel):
    """Default ordering for book lists and the whitelist of sortable keys."""
    by: str = "title"
    ascending: bool = True
    allow: List[str] = Field(default_factory=lambda: list(DEFAULT_ORDER_ALLOW))


class BooksOptions(BaseModel):
    per_page: int = 10
    order: OrderOptions = Field(default_factory=OrderOptions)

    @classmethod
    def from_env(cls) -> "BooksOptions":
        allow = os.getenv("BOOKSHELF_ORDER_ALLOW")
        order = OrderOptions(
            by=os.getenv("BOOKSHELF_ORDER_BY", "title"),
            ascending=_env_bool("BOOKSHELF_ORDER_ASCENDING", True),
            allow=[key.strip() for key in allow.split(",") if key.strip()] if allow else list(DEFAULT_ORDER_ALLOW),
        )
        return cls(per_page=int(os.getenv("BOOKSHELF_PER_PAGE", "10")), order=order)


class GoogleBooksApiOptions(BaseModel):
    url: str = DEFAULT_GOOGLE_BOOKS_URL
    api_key: Optional[str] = None
    timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "GoogleBooksApiOptions":
        return cls(
            url=os.getenv("GOOGLE_BOOKS_URL", DEFAULT_GOOGLE_BOOKS_URL),
            api_key=os.getenv("GOOGLE_BOOKS_API_KEY") or None,
            timeout=float(os.getenv("GOOGLE_BOOKS_TIMEOUT", "10")),
        )
