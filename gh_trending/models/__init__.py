"""
Models for trending repositories.
"""

from .repository import Repository

__all__ = [
    'Repository',
]
