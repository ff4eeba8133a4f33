"""
In-memory expiring cache.

Behaves like FileCache (values go through the same JSON encoding) but keeps
everything in the instance. Useful in tests and for one-shot runs that
should not touch the disk.
"""

from __future__ import annotations

import json
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Any

from pydantic_core import to_json


class MemoryCache:
    """Expiring cache held in memory."""

    def __init__(
        self,
        ttl: timedelta,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._ttl = ttl
        self._clock = clock
        self._content: bytes | None = None
        self._written_at: float | None = None

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def read(self, default: Any = None) -> Any:
        if self._content is None:
            return default
        return json.loads(self._content)

    def write(self, value: Any) -> None:
        self._content = to_json(value)
        self._written_at = self._clock()

    def expired(self) -> bool:
        if self._written_at is None:
            return True
        return self._clock() >= self._written_at + self._ttl.total_seconds()
