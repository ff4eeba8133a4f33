"""
Configuration data models for gh-not.

These models define the structure of ~/.config/gh-not/config.json, with
validation and type safety via Pydantic.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CacheConfig(BaseModel):
    """
    Where the notification snapshot lives and how long it stays fresh.
    """
    ttl_in_hours: int = Field(
        default=1,
        ge=0,
        description="Refetch notifications once the cache is this old (0 = always)"
    )
    path: Optional[Path] = Field(
        default=None,
        description="Cache file (defaults to $XDG_CACHE_HOME/gh-not/notifications.json)"
    )


class GitHubConfig(BaseModel):
    """
    How notifications are fetched.
    """
    include_read: bool = Field(
        default=False,
        description="Also fetch notifications already marked as read"
    )
    enrich_subjects: bool = Field(
        default=True,
        description="Look up state and author of issues and pull requests"
    )


class GhNotConfig(BaseModel):
    """
    Main configuration for gh-not.
    """
    model_config = ConfigDict(extra="ignore")

    cache: CacheConfig = Field(default_factory=CacheConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
