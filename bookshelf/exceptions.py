# bookshelf/exceptions.py


class BookshelfError(Exception):
    """Base class for errors raised by the bookshelf services."""


class NotFoundError(BookshelfError, LookupError):
    """A user, book, library entry or wishlist entry does not exist."""


class InvalidArgumentError(BookshelfError, ValueError):
    """A required identifier is blank or a field value is out of bounds."""


class UpstreamError(BookshelfError):
    """The external metadata service could not be reached or returned garbage."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
