"""Personal book library: library, wishlist and user profile services."""

__version__ = "0.1.0"
