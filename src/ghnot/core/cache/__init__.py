"""
Expiring last-known-good storage.

Example:
    >>> from ghnot.core.cache import FileCache
    >>> cache = FileCache.from_hours(1, Path("/tmp/gh-not/notifications.json"))
    >>> cache.expired()
    True
"""

from ghnot.core.cache.backend import ExpiringReadWriter
from ghnot.core.cache.file import FileCache
from ghnot.core.cache.memory import MemoryCache

__all__ = ["ExpiringReadWriter", "FileCache", "MemoryCache"]
