from .base import StockItem
from .inventory_item import InventoryItem
from .warehouse_items import ElectronicItem, GroceryItem, WarehouseItem

__all__ = [
    "StockItem",
    "InventoryItem",
    "ElectronicItem",
    "GroceryItem",
    "WarehouseItem",
]
