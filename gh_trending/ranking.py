"""
Ordering of trending repositories.
"""

import logging
from enum import Enum
from typing import Iterable, List, Union

from .models import Repository

logger = logging.getLogger("gh_trending")


class SortKey(str, Enum):
    """Attributes the results can be ranked by."""
    OWNER = "owner"
    NAME = "name"
    LANGUAGE = "language"
    STARS = "stars"


def rank(
    repositories: Iterable[Repository],
    attribute: Union[SortKey, str] = SortKey.STARS,
) -> List[Repository]:
    """
    Return the repositories ordered by ``attribute``.

    Stars sort descending, every other attribute ascending by codepoint.
    Repositories without a language always come after those with one. An
    unknown attribute leaves the encounter order untouched.

    Args:
        repositories: Repositories to rank
        attribute: A SortKey or its string value

    Returns:
        A new, sorted list
    """
    repositories = list(repositories)
    try:
        key = SortKey(attribute)
    except ValueError:
        logger.debug(f"Unknown sort attribute {attribute!r}, keeping encounter order")
        return repositories

    if key is SortKey.STARS:
        return sorted(repositories, key=lambda repo: repo.stars, reverse=True)
    if key is SortKey.OWNER:
        return sorted(repositories, key=lambda repo: repo.owner)
    if key is SortKey.NAME:
        return sorted(repositories, key=lambda repo: repo.name)
    # Missing languages sort last
    return sorted(
        repositories,
        key=lambda repo: (repo.language is None, repo.language or ""),
    )
