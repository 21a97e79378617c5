"""
Output dispatch for trending repositories.
"""

import logging
from typing import List

from rich.console import Console

from ..config import OutputConfig, OutputFormat
from ..models import Repository
from .browser import BrowserLauncher
from .json_output import JSONRenderer
from .table_output import TableRenderer

logger = logging.getLogger("gh_trending")


class OutputGenerator:
    """Main class for presenting ranked repositories."""

    def __init__(self, config: OutputConfig, console: Console):
        """
        Initialize the output generator.

        Args:
            config: Output configuration settings
            console: Console that receives the rendered results
        """
        self.config = config
        self.console = console

    def render(self, repositories: List[Repository]) -> None:
        """
        Present the repositories in the configured way.

        Args:
            repositories: Ranked repositories to present
        """
        if self.config.open_in_browser:
            renderer = BrowserLauncher(self.config)
        elif self.config.resolved_format is OutputFormat.JSON:
            renderer = JSONRenderer(self.config, self.console)
        else:
            renderer = TableRenderer(self.config, self.console)

        logger.debug(f"Rendering {len(repositories)} repositories with {type(renderer).__name__}")
        renderer.render(repositories)
