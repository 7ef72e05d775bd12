from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import List, Optional

from stockroom.domain.entities import ElectronicItem, GroceryItem
from stockroom.domain.errors import StoreError
from stockroom.domain.interfaces import E
from stockroom.domain.value_objects.ids import ItemId
from stockroom.repositories.memory import KeyedStore

logger = logging.getLogger(__name__)


class WarehouseManager:
    """Holds one store per warehouse variant and reports operations to stdout.

    The stores are generic; nothing here branches on the item variant except
    the seeding, which has to build concrete items.
    """

    def __init__(self) -> None:
        self._electronics: KeyedStore[ElectronicItem] = KeyedStore()
        self._groceries: KeyedStore[GroceryItem] = KeyedStore()

    @property
    def electronics(self) -> KeyedStore[ElectronicItem]:
        return self._electronics

    @property
    def groceries(self) -> KeyedStore[GroceryItem]:
        return self._groceries

    def seed_data(self, today: Optional[date] = None) -> None:
        today = today or date.today()
        self._electronics.add(
            ElectronicItem(
                id=ItemId(1), name="Laptop", quantity=10, brand="Dell", warranty_months=24
            )
        )
        self._electronics.add(
            ElectronicItem(
                id=ItemId(2), name="Smartphone", quantity=15, brand="Samsung", warranty_months=12
            )
        )
        self._groceries.add(
            GroceryItem(
                id=ItemId(1), name="Apples", quantity=50, expiry_date=today + timedelta(days=7)
            )
        )
        self._groceries.add(
            GroceryItem(id=ItemId(2), name="Milk", quantity=20, expiry_date=today + timedelta(days=5))
        )

    @staticmethod
    def format_all_items(store: KeyedStore[E]) -> List[str]:
        return [item.describe() for item in store.list_all()]  # type: ignore[attr-defined]

    def print_all_items(self, store: KeyedStore[E]) -> None:
        for line in self.format_all_items(store):
            print(line)
        print()

    def increase_stock(self, store: KeyedStore[E], item_id: int, quantity: int) -> bool:
        try:
            item = store.adjust_quantity(item_id, quantity)
        except StoreError as exc:
            logger.warning("Stock update failed", extra={"entity_id": item_id, "error": str(exc)})
            print(f"Error updating stock: {exc}")
            return False
        print(f"Stock increased for Item ID {item_id}. New Qty: {item.quantity}")
        return True

    def remove_item_by_id(self, store: KeyedStore[E], item_id: int) -> bool:
        try:
            store.remove(item_id)
        except StoreError as exc:
            logger.warning("Item removal failed", extra={"entity_id": item_id, "error": str(exc)})
            print(f"Error removing item: {exc}")
            return False
        print(f"Item ID {item_id} removed.")
        return True
