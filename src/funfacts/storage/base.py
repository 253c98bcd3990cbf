from typing import Protocol


class KeyValueStore(Protocol):
    """Interface for string-keyed persistent storage."""

    async def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent.

        Raises:
            StorageError: If the backing store cannot be read.
        """
        ...

    async def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value.

        Raises:
            StorageError: If the backing store cannot be written.
        """
        ...

    async def delete(self, key: str) -> None:
        """Remove ``key``; a missing key is not an error.

        Raises:
            StorageError: If the backing store cannot be written.
        """
        ...
