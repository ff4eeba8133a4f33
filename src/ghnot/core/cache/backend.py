"""
Expiring cache protocol.

This module defines the ExpiringReadWriter protocol that cache backends
implement, so the file-backed cache can be swapped for an in-memory one
(or anything else) without touching the manager or the sync logic.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ExpiringReadWriter(Protocol):
    """
    Protocol for a persisted slot with a time-to-live.

    Backends are responsible for:
    - Serializing values on write and decoding them on read
    - Treating "never written" as a cold start rather than an error
    - Reporting whether the slot is older than its TTL

    Backends do not lock; concurrent writers race and the last one wins.
    """

    def read(self, default: Any = None) -> Any:
        """
        Read the persisted value.

        Args:
            default: Returned when nothing has been written yet

        Returns:
            The decoded value, or ``default`` on cold start

        Raises:
            OSError: If the slot exists but cannot be read
            ValueError: If the persisted content cannot be decoded
        """
        ...

    def write(self, value: Any) -> None:
        """
        Serialize and persist a value.

        Args:
            value: JSON-compatible value or pydantic model(s)

        Raises:
            OSError: If the value cannot be persisted
            pydantic_core.PydanticSerializationError: If it cannot be serialized
        """
        ...

    def expired(self) -> bool:
        """
        Check whether the slot needs refreshing.

        Returns:
            True if nothing was written yet or the last write is at least
            one TTL old

        Raises:
            OSError: On failures other than the slot being absent
        """
        ...
