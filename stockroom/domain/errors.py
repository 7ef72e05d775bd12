"""Error taxonomy shared by the keyed store and the persistence adapter.

Store errors are raised synchronously by :class:`~stockroom.repositories.memory.keyed_store.KeyedStore`.
Persistence errors are carried inside a
:class:`~stockroom.domain.value_objects.outcomes.PersistenceResult` and only
raised when the caller asks for it via ``raise_for_status()``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class StockroomError(Exception):
    """Base class for every error raised by this package."""


class StoreError(StockroomError):
    """Base class for keyed store failures."""


class DuplicateIdentityError(StoreError):
    def __init__(self, entity_id: int) -> None:
        self.entity_id = entity_id
        super().__init__(f"Item with ID {entity_id} already exists.")


class NotFoundError(StoreError):
    def __init__(self, entity_id: int) -> None:
        self.entity_id = entity_id
        super().__init__(f"Item with ID {entity_id} not found.")


class InvalidValueError(StoreError, ValueError):
    def __init__(self, reason: str, value: Any = None) -> None:
        self.reason = reason
        self.value = value
        super().__init__(reason)


class PersistenceError(StockroomError):
    """Base class for failures while saving or loading a store."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class SerializationError(PersistenceError):
    """The document could not be encoded, or the file does not hold a valid document."""


class StorageIOError(PersistenceError):
    """The operating system refused to read or write the file."""


__all__ = [
    "StockroomError",
    "StoreError",
    "DuplicateIdentityError",
    "NotFoundError",
    "InvalidValueError",
    "PersistenceError",
    "SerializationError",
    "StorageIOError",
]
