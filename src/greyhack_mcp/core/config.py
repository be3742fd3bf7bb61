"""Server settings loaded from environment variables.

Every setting is read with the ``GREYHACK_MCP_`` prefix, except the GitHub
token which keeps its conventional ``GITHUB_TOKEN`` name. Values are
validated when the settings object is created, so a bad configuration
fails at startup instead of on the first tool call.
"""

import logging
from typing import Optional

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration of the greyhack MCP server."""

    model_config = SettingsConfigDict(env_prefix="GREYHACK_MCP_", extra="ignore")

    # GitHub code search
    github_token: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("GITHUB_TOKEN", "github_token")
    )
    github_api_url: str = "https://api.github.com"
    github_timeout: float = Field(default=10.0, gt=0)
    github_max_retries: int = Field(default=1, ge=0)
    github_retry_delay: float = Field(default=1.0, ge=0)

    # Dispatcher
    tool_timeout: float = Field(default=30.0, gt=0)

    log_level: str = "INFO"

    @field_validator("github_token")
    @classmethod
    def _blank_token_is_missing(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("github_api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def github_search_budget(self) -> float:
        """Longest a search can take: every attempt timing out plus the backoff sleeps between them."""
        backoff = self.github_retry_delay * (2**self.github_max_retries - 1)
        return self.github_timeout * (self.github_max_retries + 1) + backoff

    @model_validator(mode="after")
    def _search_fits_tool_timeout(self) -> "Settings":
        # A timed out worker thread cannot be cancelled, so a search must finish within the tool timeout.
        if self.github_search_budget > self.tool_timeout:
            raise ValueError(
                f"GitHub search may take up to {self.github_search_budget}s "
                f"(timeout {self.github_timeout}s x {self.github_max_retries + 1} attempts plus backoff), "
                f"which exceeds tool_timeout {self.tool_timeout}s."
            )
        return self
