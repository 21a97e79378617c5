"""
Field helpers shared by the output renderers.
"""

from typing import Any, Dict, List

from ..models import Repository


class OutputFields:
    """Column layout for rendered repositories."""

    # (header, attribute)
    COLUMNS = [
        ("OWNER", "owner"),
        ("NAME", "name"),
        ("LANG", "language"),
        ("URL", "url"),
        ("STARS", "stars"),
        ("DESC", "description"),
    ]

    @classmethod
    def headers(cls) -> List[str]:
        return [header for header, _ in cls.COLUMNS]


class RepositoryFormatter:
    """Converts Repository objects to the shapes the renderers need."""

    @staticmethod
    def to_dict(repository: Repository) -> Dict[str, Any]:
        """JSON-ready dictionary, missing values as None."""
        return repository.model_dump(mode="json")

    @staticmethod
    def to_row(repository: Repository) -> List[str]:
        """Table cells in OutputFields order, missing values as empty strings."""
        row = []
        for _, attribute in OutputFields.COLUMNS:
            value = getattr(repository, attribute)
            row.append("" if value is None else str(value))
        return row
