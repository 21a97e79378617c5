"""
Extraction of repositories from the GitHub trending page markup.
"""

import logging
import re
from typing import List

from bs4 import BeautifulSoup, Tag
from pydantic import ValidationError

from .errors import RowSkipped
from .models import Repository

logger = logging.getLogger("gh_trending")

ROW_SELECTOR = "article.Box-row"
# The trending page has rendered the title as both h1 and h2.
TITLE_SELECTOR = "h1.h3.lh-condensed > a, h2.h3.lh-condensed > a"
LANGUAGE_SELECTOR = 'span[itemprop="programmingLanguage"]'
DESCRIPTION_SELECTOR = "p.col-9"

SEPARATORS = re.compile(r"[,\s/]")
SEPARATOR_CHARS = ", \t\r\n/"


def parse_stars(text: str) -> int:
    """
    Parse a rendered star count such as ``"\\n  12,345\\n"``.

    Raises:
        ValueError: If the text is not a non-negative integer
    """
    stars = int(SEPARATORS.sub("", text))
    if stars < 0:
        raise ValueError(f"negative star count: {stars}")
    return stars


def extract_repository(row: Tag) -> Repository:
    """
    Build a Repository from one trending row.

    Args:
        row: An ``article.Box-row`` element

    Returns:
        The extracted repository

    Raises:
        RowSkipped: If the row has no usable ``/owner/name`` title link
    """
    anchor = row.select_one(TITLE_SELECTOR)
    if anchor is None:
        raise RowSkipped("row has no title link")

    href = anchor.get("href")
    if not href:
        raise RowSkipped("title link has no href attribute")

    segments = href.split("/")
    if len(segments) != 3:
        raise RowSkipped(f"href {href!r} does not split into 3 segments: {segments}")
    _, owner, name = segments
    if not owner or not name:
        raise RowSkipped(f"href {href!r} is missing the owner or the name")

    stars = 0
    stargazers = row.find("a", href=f"{href}/stargazers")
    if stargazers is None:
        logger.warning(f"No stargazers link for {owner}/{name}, using 0")
    else:
        try:
            stars = parse_stars(stargazers.get_text())
        except ValueError as e:
            logger.warning(f"Could not parse stargazers for {owner}/{name}, using 0: {e}")

    language = row.select_one(LANGUAGE_SELECTOR)
    description = row.select_one(DESCRIPTION_SELECTOR)

    return Repository(
        owner=owner,
        name=name,
        stars=stars,
        language=language.get_text().strip(SEPARATOR_CHARS) if language is not None else None,
        description=description.get_text().strip() if description is not None else None,
    )


def parse_trending(document: BeautifulSoup) -> List[Repository]:
    """
    Extract every repository row of a trending page, in document order.

    Rows that cannot be extracted are logged and skipped. A page without any
    rows gives an empty list.
    """
    repositories = []
    rows = document.select(ROW_SELECTOR)
    logger.debug(f"Found {len(rows)} trending rows")

    for index, row in enumerate(rows):
        try:
            repositories.append(extract_repository(row))
        except RowSkipped as e:
            logger.warning(f"Skipping trending row {index}: {e.reason}")
        except ValidationError as e:
            logger.warning(f"Skipping trending row {index}: {e}")

    return repositories
