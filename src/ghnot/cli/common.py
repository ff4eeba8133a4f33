"""
Shared helpers for CLI commands.
"""

import logging
import sys

import typer

from ghnot.core.cache import FileCache
from ghnot.core.config import GhNotConfig, get_default_cache_path, load_config
from ghnot.core.github import GitHubNotificationsClient
from ghnot.core.manager import NotificationManager


def configure_logging(debug: bool = False) -> None:
    """
    Configure logging for all commands.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def get_config(ctx: typer.Context) -> GhNotConfig:
    """Return the config loaded by the main callback, loading it if needed."""
    obj = ctx.ensure_object(dict)
    if obj.get("config") is None:
        obj["config"] = load_config()
    config: GhNotConfig = obj["config"]
    return config


def build_manager(config: GhNotConfig) -> NotificationManager:
    """Create a manager over the configured cache file and GitHub."""
    path = config.cache.path or get_default_cache_path()
    cache = FileCache.from_hours(config.cache.ttl_in_hours, path)
    client = GitHubNotificationsClient(
        include_read=config.github.include_read,
        enrich_subjects=config.github.enrich_subjects,
    )
    return NotificationManager(cache, client)
