"""
Configuration settings for the submission service
"""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Closing markup of the projects grid, right before the "load more" container
DEFAULT_INSERTION_ANCHOR = '</div>\n\n        <div class="load-more-container">'

# Category slugs accepted by the submission form
CATEGORY_VISUALIZER = "visualizer"
CATEGORY_GAME = "game"
CATEGORY_TOOL = "tool"
CATEGORY_WEBSITE = "website"
CATEGORY_APP = "app"
CATEGORY_OTHER = "other"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Moderation (Anthropic Messages API)
    claude_api_key: Optional[str] = Field(default=None, alias="CLAUDE_API_KEY")
    anthropic_api_url: str = Field(default="https://api.anthropic.com", alias="ANTHROPIC_API_URL")
    moderation_model: str = Field(default="claude-3-haiku-20240307", alias="MODERATION_MODEL")
    moderation_max_tokens: int = Field(default=256, alias="MODERATION_MAX_TOKENS")

    # Publishing (GitHub contents API)
    github_token: Optional[str] = Field(default=None, alias="GITHUB_TOKEN")
    github_api_url: str = Field(default="https://api.github.com", alias="GITHUB_API_URL")
    github_repo: str = Field(default="SoloOrTroll/claudecreations", alias="GITHUB_REPO")
    github_path: str = Field(default="index.html", alias="GITHUB_PATH")
    github_branch: str = Field(default="main", alias="GITHUB_BRANCH")
    insertion_anchor: str = Field(default=DEFAULT_INSERTION_ANCHOR, alias="INSERTION_ANCHOR")

    # Logging
    log_dir: str = Field(default="./logs", alias="LOG_DIR")


# Instantiate settings object
settings = Settings()

LOGS_DIR = Path(settings.log_dir)
