"""
Exception types raised by the trending pipeline.
"""

from typing import TYPE_CHECKING, List

import requests

if TYPE_CHECKING:
    from .output.browser import LaunchOutcome


class TrendingError(Exception):
    """Base class for all gh-trending errors."""


class TransportError(TrendingError):
    """The trending page could not be reached at all."""

    def __init__(self, url: str, cause: Exception):
        self.url = url
        super().__init__(f"Failed to reach {url}: {cause}")


class UnexpectedStatusError(TrendingError):
    """The trending page answered with a non-2xx status."""

    def __init__(self, response: requests.Response):
        self.response = response
        self.status_code = response.status_code
        self.url = response.url
        super().__init__(
            f"Received non-2xx response from GitHub: {response.status_code} {response.reason} ({response.url})"
        )


class ConfigConflictError(TrendingError):
    """Mutually exclusive options were selected together."""


class RowSkipped(TrendingError):
    """A single trending row could not be turned into a repository."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class BrowserLaunchError(TrendingError):
    """One or more repositories could not be opened in the browser."""

    def __init__(self, outcomes: List["LaunchOutcome"]):
        self.outcomes = outcomes
        urls = ", ".join(outcome.url for outcome in outcomes)
        super().__init__(f"Failed to open {len(outcomes)} URL(s) in browser: {urls}")

