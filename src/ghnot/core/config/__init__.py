"""
Configuration models and loading.

This module provides Pydantic models for gh-not configuration
with multi-layer merging: defaults < user < env vars.
"""

from .env import load_user_env
from .loader import (
    get_default_cache_path,
    get_user_config_path,
    get_xdg_cache_home,
    get_xdg_config_home,
    load_config,
)
from .models import CacheConfig, GhNotConfig, GitHubConfig

__all__ = [
    # Models
    "CacheConfig",
    "GhNotConfig",
    "GitHubConfig",
    # Loader functions
    "get_default_cache_path",
    "get_user_config_path",
    "get_xdg_cache_home",
    "get_xdg_config_home",
    "load_config",
    "load_user_env",
]
