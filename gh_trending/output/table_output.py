"""
Table rendering of trending repositories.
"""

import logging
from typing import List

import click
from rich.console import Console
from rich.table import Table

from ..config import OutputConfig
from ..models import Repository
from .utils import OutputFields, RepositoryFormatter

logger = logging.getLogger("gh_trending")


class TableRenderer:
    """Prints repositories as a table, or as tab-separated lines when piped."""

    def __init__(self, config: OutputConfig, console: Console):
        self.config = config
        self.console = console

    def render(self, repositories: List[Repository]) -> None:
        rows = [RepositoryFormatter.to_row(repo) for repo in repositories]

        if not self.console.is_terminal:
            logger.debug("Output is not a terminal, writing tab-separated rows")
            for row in rows:
                click.echo("\t".join(row), file=self.console.file)
            return

        table = Table(box=None, header_style="bold", pad_edge=False)
        for header in OutputFields.headers():
            table.add_column(header, overflow="fold" if header == "DESC" else "ellipsis")
        for row in rows:
            table.add_row(*row)
        self.console.print(table, markup=False)
