# bookshelf/clients/google_books.py
"""Client for the Google Books volumes API."""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote
import requests

from bookshelf.config import GoogleBooksApiOptions
from bookshelf.exceptions import InvalidArgumentError, UpstreamError
from bookshelf.models import BookMetadata
from bookshelf.utils.text import is_blank

logger = logging.getLogger(__name__)


class GoogleBooksClient:
    """Resolves a Google Books volume id into book metadata."""

    def __init__(self, options: Optional[GoogleBooksApiOptions] = None, session: Optional[requests.Session] = None):
        self.options = options or GoogleBooksApiOptions.from_env()
        self.session = session or requests.Session()

    def resolve(self, external_id: str) -> BookMetadata:
        """
        Fetch a single volume.

        Args:
            external_id: The Google Books volume id

        Returns:
            BookMetadata for the volume

        Raises:
            InvalidArgumentError: If the id is blank
            UpstreamError: On network errors, non-2xx responses or an unusable payload
        """
        if is_blank(external_id):
            raise InvalidArgumentError("Book id must not be empty")

        url = f"{self.options.url.rstrip('/')}/{quote(external_id, safe='')}"
        params = {"key": self.options.api_key} if self.options.api_key else None

        logger.info(f"Resolving book {external_id} from {self.options.url}")
        try:
            response = self.session.get(url, params=params, timeout=self.options.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error(f"Google Books returned {status} for {external_id}")
            raise UpstreamError(f"Google Books returned status {status} for {external_id}", status_code=status) from e
        except requests.RequestException as e:
            logger.error(f"Google Books request failed for {external_id}: {e}")
            raise UpstreamError(f"Google Books request failed for {external_id}: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(f"Google Books returned a non-JSON body for {external_id}") from e

        return self.parse_volume(external_id, payload)

    @classmethod
    def parse_volume(cls, external_id: str, payload: Any) -> BookMetadata:
        if not isinstance(payload, dict):
            raise UpstreamError(f"Unexpected Google Books payload for {external_id}")

        info = payload.get("volumeInfo")
        if not isinstance(info, dict) or is_blank(info.get("title")):
            raise UpstreamError(f"Google Books volume {external_id} has no title")

        images = info.get("imageLinks") or {}
        return BookMetadata(
            id=external_id,
            isbn=cls._extract_isbn(info.get("industryIdentifiers") or []),
            title=info["title"].strip(),
            author=", ".join(info.get("authors") or []),
            description=info.get("description"),
            image_path=images.get("thumbnail", ""),
        )

    @staticmethod
    def _extract_isbn(identifiers: List[Dict[str, str]]) -> str:
        """ISBN_13 if present, otherwise ISBN_10, otherwise an empty string"""
        by_type = {i.get("type"): i.get("identifier", "") for i in identifiers if isinstance(i, dict)}
        return by_type.get("ISBN_13") or by_type.get("ISBN_10") or ""
