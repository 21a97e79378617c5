"""
Configuration management for gh-trending.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__
from .errors import ConfigConflictError
from .ranking import SortKey

TRENDING_URL = "https://github.com/trending"


class OutputFormat(str, Enum):
    JSON = "json"
    TABLE = "table"


class FetchConfig(BaseModel):
    """Trending page request configuration."""
    base_url: str = Field(
        TRENDING_URL,
        description="GitHub trending page URL"
    )
    user_agent: str = Field(
        f"gh-trending/{__version__}",
        description="User-Agent header sent with every request"
    )
    timeout: Optional[float] = Field(
        None,
        description="Request timeout in seconds (None uses the transport default)"
    )


class OutputConfig(BaseModel):
    """Presentation configuration."""
    output_format: Optional[OutputFormat] = Field(
        None,
        description="Explicitly requested output format"
    )
    open_in_browser: bool = Field(
        False,
        description="Open every result in the web browser instead of printing"
    )

    @model_validator(mode="after")
    def check_browser_conflict(self):
        if self.open_in_browser and self.output_format is not None:
            raise ConfigConflictError(
                "Cannot select an output format when opening in browser"
            )
        return self

    @property
    def resolved_format(self) -> OutputFormat:
        return self.output_format or OutputFormat.TABLE


class TrendingConfig(BaseModel):
    """Everything a single invocation needs, passed through the pipeline."""
    languages: List[str] = Field(
        default_factory=list,
        description="Language filters; empty means all languages"
    )
    sort_key: SortKey = Field(
        SortKey.STARS,
        description="Attribute used to rank the results"
    )
    output: OutputConfig = Field(default_factory=OutputConfig)


class Settings(BaseSettings):
    """Settings read from the environment."""
    fetch: FetchConfig = FetchConfig()

    model_config = SettingsConfigDict(
        env_prefix="GH_TRENDING_",
        env_nested_delimiter="__",
    )
