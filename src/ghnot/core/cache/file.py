"""
File-backed expiring cache.

Stores one JSON document per path. The file's modification time is the
last-write timestamp; nothing else is stored alongside the value.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from datetime import timedelta
from pathlib import Path
from typing import Any

from pydantic_core import to_json

logger = logging.getLogger(__name__)


class FileCache:
    """
    Expiring cache stored in a single JSON file.

    Example:
        >>> cache = FileCache.from_hours(1, Path("~/.cache/gh-not/notifications.json"))
        >>> if cache.expired():
        ...     cache.write(fresh_notifications)
        >>> raw = cache.read(default=[])
    """

    def __init__(
        self,
        path: Path,
        ttl: timedelta,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize the cache.

        Args:
            path: JSON file holding the value
            ttl: How long a write stays fresh
            clock: Returns the current time as a POSIX timestamp
        """
        self._path = Path(path)
        self._ttl = ttl
        self._clock = clock

    @classmethod
    def from_hours(cls, ttl_in_hours: int, path: Path) -> FileCache:
        return cls(path, timedelta(hours=ttl_in_hours))

    @property
    def path(self) -> Path:
        return self._path

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def read(self, default: Any = None) -> Any:
        try:
            content = self._path.read_bytes()
        except FileNotFoundError:
            logger.debug("cache doesn't exist: %s", self._path)
            return default

        return json.loads(content)

    def write(self, value: Any) -> None:
        serialized = to_json(value, indent=2)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_bytes(serialized)
        logger.debug("cache written: %s (%d bytes)", self._path, len(serialized))

    def expired(self) -> bool:
        try:
            written_at = self._path.stat().st_mtime
        except FileNotFoundError:
            return True

        return self._clock() >= written_at + self._ttl.total_seconds()
