"""
Tests for the Repository model.
"""

import pytest
from pydantic import ValidationError

from gh_trending.models import Repository


def test_url_is_derived():
    """Test that the url is built from owner and name exactly."""
    repo = Repository(owner="psf", name="requests", stars=10)
    assert repo.url == "https://github.com/psf/requests"


def test_url_in_dump():
    """Test that the derived url is part of the serialized record."""
    data = Repository(owner="psf", name="requests").model_dump()
    assert data == {
        "owner": "psf",
        "name": "requests",
        "language": None,
        "stars": 0,
        "description": None,
        "url": "https://github.com/psf/requests",
    }


def test_url_is_not_accepted_as_input():
    """Test that a url passed in is ignored in favour of the derived one."""
    repo = Repository(owner="psf", name="requests", url="https://example.com")
    assert repo.url == "https://github.com/psf/requests"


@pytest.mark.parametrize("field", ["owner", "name"])
def test_owner_and_name_required(field):
    """Test that empty owner or name is rejected."""
    values = {"owner": "psf", "name": "requests"}
    values[field] = ""
    with pytest.raises(ValidationError):
        Repository(**values)


def test_negative_stars_rejected():
    """Test that stars can not be negative."""
    with pytest.raises(ValidationError):
        Repository(owner="psf", name="requests", stars=-1)


def test_blank_text_fields_become_none():
    """Test that language and description never hold empty strings."""
    repo = Repository(owner="psf", name="requests", language="  ", description="\n")
    assert repo.language is None
    assert repo.description is None


def test_text_fields_are_stripped():
    """Test that surrounding whitespace is removed."""
    repo = Repository(owner="psf", name="requests", language=" Python ", description=" HTTP for Humans. ")
    assert repo.language == "Python"
    assert repo.description == "HTTP for Humans."


def test_structural_equality_and_immutability():
    """Test that records compare by value and can not be changed."""
    a = Repository(owner="psf", name="requests", stars=1)
    b = Repository(owner="psf", name="requests", stars=1)
    assert a == b
    with pytest.raises(ValidationError):
        a.stars = 2
