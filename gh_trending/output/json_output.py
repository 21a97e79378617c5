"""
JSON rendering of trending repositories.
"""

import json
from typing import List

from rich.console import Console

from ..config import OutputConfig
from ..models import Repository
from .utils import RepositoryFormatter


class JSONRenderer:
    """Prints repositories as a pretty-printed JSON array."""

    def __init__(self, config: OutputConfig, console: Console):
        self.config = config
        self.console = console

    def render(self, repositories: List[Repository]) -> None:
        payload = [RepositoryFormatter.to_dict(repo) for repo in repositories]
        self.console.print_json(json.dumps(payload), indent=2)
