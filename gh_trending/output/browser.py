"""
Opening trending repositories in the web browser.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, List, Optional

import click

from ..config import OutputConfig
from ..errors import BrowserLaunchError
from ..models import Repository

logger = logging.getLogger("gh_trending")


@dataclass
class LaunchOutcome:
    """Result of opening one URL."""
    url: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BrowserLauncher:
    """Opens every repository URL concurrently and reports failures together."""

    def __init__(self, config: OutputConfig, launch: Optional[Callable[[str], int]] = None):
        self.config = config
        self.launch = launch or click.launch

    def _open(self, url: str) -> LaunchOutcome:
        try:
            code = self.launch(url)
        except OSError as e:
            return LaunchOutcome(url, str(e))
        if code:
            return LaunchOutcome(url, f"browser exited with status {code}")
        return LaunchOutcome(url)

    def open_all(self, repositories: List[Repository]) -> List[LaunchOutcome]:
        """Launch one task per repository and wait for all of them."""
        urls = [repo.url for repo in repositories]
        if not urls:
            return []
        with ThreadPoolExecutor(max_workers=len(urls)) as executor:
            return list(executor.map(self._open, urls))

    def render(self, repositories: List[Repository]) -> None:
        outcomes = self.open_all(repositories)
        failed = [outcome for outcome in outcomes if not outcome.ok]
        for outcome in failed:
            logger.error(f"Could not open {outcome.url}: {outcome.error}")
        if failed:
            raise BrowserLaunchError(failed)
        logger.debug(f"Opened {len(outcomes)} repositories in browser")
