# bookshelf/utils/text.py
import re
import unicodedata

_WHITESPACE = re.compile(r"\s+")


def normalize(value: str | None) -> str:
    """Lower-case, accent-insensitive form used for title and name searches.

    >>> normalize("  Il Grande  Gatsby ")
    'il grande gatsby'
    >>> normalize("Città")
    'citta'
    """
    if not value:
        return ""
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return _WHITESPACE.sub(" ", stripped.casefold()).strip()


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
