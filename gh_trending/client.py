"""
HTTP client for the GitHub trending page.
"""

import logging
from typing import List, Optional
from urllib.parse import quote

import requests
from bs4 import BeautifulSoup

from .config import FetchConfig
from .errors import TransportError, UnexpectedStatusError
from .models import Repository
from .parser import parse_trending

logger = logging.getLogger("gh_trending")


class TrendingClient:
    """Client for fetching and parsing the GitHub trending page."""

    def __init__(self, config: FetchConfig):
        """Initialize the trending client."""
        self.config = config
        self.base_url = config.base_url.rstrip("/")

        self.session = requests.Session()
        self.session.headers.update({
            "Accept": "text/html",
            "User-Agent": config.user_agent,
        })

    def build_url(self, language: Optional[str] = None) -> str:
        """Trending page URL, with the language as a path segment when given."""
        if not language:
            return self.base_url
        return f"{self.base_url}/{quote(language, safe='+')}"

    def fetch(self, language: Optional[str] = None) -> BeautifulSoup:
        """
        Fetch the trending page and parse it into a document.

        Args:
            language: Optional language filter; empty means all languages

        Returns:
            The parsed HTML document

        Raises:
            TransportError: If the request itself fails
            UnexpectedStatusError: If GitHub answers with a non-2xx status
        """
        url = self.build_url(language)
        logger.debug(f"Fetching trending page: {url}")

        try:
            response = self.session.get(url, timeout=self.config.timeout)
        except requests.exceptions.RequestException as e:
            raise TransportError(url, e) from e

        if not 200 <= response.status_code < 300:
            raise UnexpectedStatusError(response)

        return BeautifulSoup(response.text, "html.parser")

    def get_trending(self, language: Optional[str] = None) -> List[Repository]:
        """Fetch the trending page and extract its repositories."""
        repositories = parse_trending(self.fetch(language))
        logger.debug(f"Extracted {len(repositories)} repositories for {language or 'all languages'}")
        return repositories
