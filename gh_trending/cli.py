"""
Command-line interface for the gh-trending tool.
"""

import logging
import sys
from typing import List, Optional, Sequence

import click
from rich.console import Console
from rich.text import Text

from . import __version__
from .client import TrendingClient
from .config import OutputConfig, OutputFormat, Settings, TrendingConfig
from .errors import ConfigConflictError, TrendingError
from .models import Repository
from .output import OutputGenerator
from .ranking import SortKey, rank

# Results go to stdout, diagnostics to stderr
console = Console()
err_console = Console(stderr=True)


class RichConsoleHandler(logging.Handler):
    def emit(self, record):
        try:
            msg = self.format(record)
            level = record.levelname

            if level == 'DEBUG':
                err_console.print(Text(msg, style="dim"))
            elif level == 'INFO':
                err_console.print(Text(msg))
            elif level == 'WARNING':
                err_console.print(Text(msg, style="yellow"))
            elif level == 'ERROR':
                err_console.print(Text(msg, style="red"))
            elif level == 'CRITICAL':
                err_console.print(Text(msg, style="red bold"))
        except Exception:
            self.handleError(record)

# Configure root logger
logging.basicConfig(
    level=logging.WARNING,
    format="%(message)s",
    handlers=[RichConsoleHandler()]
)

logger = logging.getLogger("gh_trending")


def collect_trending(
    client: TrendingClient,
    languages: Optional[Sequence[str]] = None,
    sort_key: SortKey = SortKey.STARS,
) -> List[Repository]:
    """
    Fetch the trending repositories for every language filter and rank them.

    Args:
        client: Client used to fetch each trending page
        languages: Language filters; when empty the unfiltered page is used
        sort_key: Attribute to rank the merged results by

    Returns:
        All repositories, ranked once over the concatenated results
    """
    repositories = []
    for language in languages or [None]:
        repositories.extend(client.get_trending(language))
    logger.debug(f"Collected {len(repositories)} repositories, ranking by {sort_key}")
    return rank(repositories, sort_key)


@click.command()
@click.version_option(version=__version__)
@click.argument("languages", nargs=-1)
@click.option(
    "-w",
    "--web",
    "open_in_browser",
    is_flag=True,
    default=False,
    help="Open in web browser",
)
@click.option(
    "-s",
    "--sort",
    "sort_key",
    type=click.Choice([key.value for key in SortKey]),
    default=SortKey.STARS.value,
    show_default=True,
    help="Sort key for results",
)
@click.option(
    "-o",
    "--output",
    "output_format",
    type=click.Choice([fmt.value for fmt in OutputFormat]),
    default=None,
    help="Output format [default: table]",
)
@click.option(
    "--base-url",
    envvar="GH_TRENDING_BASE_URL",
    default=None,
    help="Trending page URL (can also be set via GH_TRENDING_BASE_URL env var)",
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Request timeout in seconds",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Enable debug mode for more verbose output",
)
def cli(
    languages: Sequence[str],
    open_in_browser: bool,
    sort_key: str,
    output_format: Optional[str],
    base_url: Optional[str],
    timeout: Optional[float],
    debug: bool,
):
    """Show trending repositories, optionally filtered by LANGUAGES."""
    logging.getLogger().setLevel(logging.DEBUG if debug else logging.WARNING)

    try:
        config = TrendingConfig(
            languages=list(languages),
            sort_key=SortKey(sort_key),
            output=OutputConfig(
                output_format=output_format,
                open_in_browser=open_in_browser,
            ),
        )
    except ConfigConflictError as e:
        raise click.UsageError(str(e)) from e

    fetch_config = Settings().fetch
    if base_url:
        fetch_config = fetch_config.model_copy(update={"base_url": base_url})
    if timeout is not None:
        fetch_config = fetch_config.model_copy(update={"timeout": timeout})

    client = TrendingClient(fetch_config)

    try:
        repositories = collect_trending(client, config.languages, config.sort_key)
        OutputGenerator(config.output, console).render(repositories)
    except TrendingError as e:
        logger.debug("Trending command failed", exc_info=True)
        raise click.ClickException(str(e)) from e


def main():
    """Entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        logger.exception("Unhandled exception")
        err_console.print(Text(f"Unhandled error: {e}", style="red"))
        sys.exit(1)
