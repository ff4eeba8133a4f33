"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < env vars
"""

import json
import os
from pathlib import Path
from typing import Any

from .models import GhNotConfig

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off", "")


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_xdg_cache_home() -> Path:
    """
    Get XDG cache home directory.

    Returns:
        Path to cache directory (defaults to ~/.cache)
    """
    if xdg_home := os.environ.get("XDG_CACHE_HOME"):
        return Path(xdg_home)
    return Path.home() / ".cache"


def get_user_config_path() -> Path:
    """
    Get path to user configuration file.

    Returns:
        Path to ~/.config/gh-not/config.json (or XDG equivalent)
    """
    return get_xdg_config_home() / "gh-not" / "config.json"


def get_default_cache_path() -> Path:
    """Path of the notification snapshot when none is configured."""
    return get_xdg_cache_home() / "gh-not" / "notifications.json"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Values in `override` take precedence over values in `base`.
    Nested dicts are merged, not replaced.

    Example:
        >>> deep_merge({"a": 1, "b": {"x": 10}}, {"b": {"y": 20}})
        {'a': 1, 'b': {'x': 10, 'y': 20}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON file, returning None if it doesn't exist or is invalid.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON as dict, or None if file doesn't exist or can't be parsed
    """
    if not path.exists():
        return None

    try:
        with path.open() as f:
            data = json.load(f)
            if isinstance(data, dict):
                return data
            return None
    except (json.JSONDecodeError, OSError) as e:
        # A broken config file falls back to defaults
        print(f"Warning: Failed to parse config at {path}: {e}")
        return None


def _parse_bool(name: str, raw: str) -> bool | None:
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    print(f"Warning: Invalid {name} value '{raw}', ignoring")
    return None


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Supported env vars:
        GH_NOT_CACHE_TTL_HOURS - overrides cache.ttl_in_hours
        GH_NOT_CACHE_PATH - overrides cache.path
        GH_NOT_INCLUDE_READ - overrides github.include_read
        GH_NOT_ENRICH_SUBJECTS - overrides github.enrich_subjects

    Args:
        config_dict: Configuration dictionary to override

    Returns:
        Configuration dictionary with env var overrides applied
    """
    result = config_dict.copy()

    if ttl_str := os.environ.get("GH_NOT_CACHE_TTL_HOURS"):
        try:
            ttl = int(ttl_str)
            if ttl < 0:
                print(f"Warning: GH_NOT_CACHE_TTL_HOURS must be >= 0, got {ttl}, ignoring")
            else:
                result["cache"] = {**result.get("cache", {}), "ttl_in_hours": ttl}
        except ValueError:
            print(f"Warning: Invalid GH_NOT_CACHE_TTL_HOURS value '{ttl_str}', ignoring")

    if path_str := os.environ.get("GH_NOT_CACHE_PATH"):
        result["cache"] = {**result.get("cache", {}), "path": path_str}

    for env_name, key in (
        ("GH_NOT_INCLUDE_READ", "include_read"),
        ("GH_NOT_ENRICH_SUBJECTS", "enrich_subjects"),
    ):
        raw = os.environ.get(env_name)
        if raw is None:
            continue
        value = _parse_bool(env_name, raw)
        if value is not None:
            result["github"] = {**result.get("github", {}), key: value}

    return result


def get_default_config() -> dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Dictionary with default configuration values
    """
    return {
        "cache": {"ttl_in_hours": 1},
        "github": {"include_read": False, "enrich_subjects": True},
    }


def load_config(config_path: Path | None = None) -> GhNotConfig:
    """
    Load configuration with multi-layer merging.

    Configuration precedence (highest to lowest):
        1. Environment variables (GH_NOT_*)
        2. User config (~/.config/gh-not/config.json, or config_path)
        3. Hardcoded defaults

    The result is not cached; callers pass the config object around.

    Args:
        config_path: Explicit config file instead of the user config

    Returns:
        Validated GhNotConfig instance with cache.path resolved

    Raises:
        ValidationError: If the merged config fails Pydantic validation
    """
    merged = get_default_config()

    if user_config := load_json_file(config_path or get_user_config_path()):
        merged = deep_merge(merged, user_config)

    merged = apply_env_overrides(merged)

    config = GhNotConfig(**merged)

    if config.cache.path is None:
        config.cache.path = get_default_cache_path()
    else:
        config.cache.path = config.cache.path.expanduser()

    return config
