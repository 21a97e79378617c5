"""
Model for a trending repository.
"""

from typing import Optional

from pydantic import BaseModel, Field, computed_field, field_validator

GITHUB_URL = "https://github.com"


class Repository(BaseModel):
    """
    A repository as listed on the GitHub trending page.

    ``url`` is derived from ``owner`` and ``name`` and is never parsed from
    the page on its own.
    """
    owner: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    language: Optional[str] = None
    stars: int = Field(0, ge=0)
    description: Optional[str] = None

    model_config = {
        "extra": "ignore",
        "frozen": True,
    }

    @field_validator("language", "description", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        """Strip text fields; anything that strips to nothing is absent."""
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @computed_field
    @property
    def url(self) -> str:
        return f"{GITHUB_URL}/{self.owner}/{self.name}"
