from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

from stockroom.domain.entities import InventoryItem
from stockroom.domain.value_objects.enums import PersistenceStatus
from stockroom.domain.value_objects.ids import ItemId
from stockroom.domain.value_objects.outcomes import PersistenceResult
from stockroom.repositories.file import JsonPersistenceAdapter
from stockroom.repositories.memory import KeyedStore

_SAMPLE_ITEMS = [
    (1, "Laptop", 5),
    (2, "Keyboard", 15),
    (3, "Mouse", 25),
    (4, "Monitor", 10),
    (5, "USB Cable", 50),
]


class InventoryApp:
    """Inventory log backed by a JSON file.

    - Each instance owns a fresh in-memory store; ``load_data`` replaces it
      with the file content.
    - ``save_data``/``load_data`` print a one-line status and return the
      underlying :class:`PersistenceResult` so callers can branch on it.
    """

    def __init__(self, file_path: Optional[Path | str] = None, *, indent: Optional[int] = None) -> None:
        if file_path is None or indent is None:
            from stockroom.config.settings import settings

            file_path = settings.data_file if file_path is None else file_path
            indent = settings.json_indent if indent is None else indent
        self._path = Path(file_path)
        self._store: KeyedStore[InventoryItem] = KeyedStore()
        self._persistence: JsonPersistenceAdapter[InventoryItem] = JsonPersistenceAdapter(
            InventoryItem, indent=indent
        )

    @property
    def path(self) -> Path:
        return self._path

    @property
    def store(self) -> KeyedStore[InventoryItem]:
        return self._store

    def seed_sample_data(self, now: Optional[datetime] = None) -> None:
        now = now or datetime.now()
        for item_id, name, quantity in _SAMPLE_ITEMS:
            self._store.add(
                InventoryItem(id=ItemId(item_id), name=name, quantity=quantity, date_added=now)
            )

    def save_data(self) -> PersistenceResult:
        result = self._persistence.save(self._store, self._path)
        if result.status is PersistenceStatus.SAVED:
            print(f"Data saved to {self._path}")
        else:
            print(f"Error saving file: {result.error}")
        return result

    def load_data(self) -> PersistenceResult:
        result = self._persistence.load(self._store, self._path)
        if result.status is PersistenceStatus.LOADED:
            print("Data loaded successfully.")
        elif result.status is PersistenceStatus.ABSENT:
            print("No existing file found.")
        else:
            print(f"Error loading file: {result.error}")
        return result

    def print_all_items(self) -> None:
        for item in self._store.list_all():
            print(item.describe())
