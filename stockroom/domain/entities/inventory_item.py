from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import StockItem


class InventoryItem(StockItem):
    """Record kept by the inventory log."""

    date_added: datetime = Field(..., description="When the item was logged")

    def describe(self) -> str:
        added = self.date_added.strftime("%Y-%m-%d %H:%M:%S")
        return f"{super().describe()}, Added: {added}"
