from __future__ import annotations

from datetime import date
from typing import Annotated, Literal, Union

from pydantic import Field, field_validator

from .base import StockItem


class ElectronicItem(StockItem):
    kind: Literal["electronic"] = "electronic"
    brand: str = Field(..., description="Manufacturer")
    warranty_months: int = Field(..., ge=0, description="Warranty length in months")

    @field_validator("brand")
    @classmethod
    def _brand_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("brand must not be empty")
        return v

    def describe(self) -> str:
        return (
            f"[Electronic] ID: {self.id}, Name: {self.name}, Brand: {self.brand}, "
            f"Warranty: {self.warranty_months} months, Qty: {self.quantity}"
        )


class GroceryItem(StockItem):
    kind: Literal["grocery"] = "grocery"
    expiry_date: date = Field(..., description="Best-before date")

    def describe(self) -> str:
        return (
            f"[Grocery] ID: {self.id}, Name: {self.name}, "
            f"Expiry: {self.expiry_date:%Y-%m-%d}, Qty: {self.quantity}"
        )


# Closed set of warehouse variants, tagged by ``kind`` in serialized form.
WarehouseItem = Annotated[Union[ElectronicItem, GroceryItem], Field(discriminator="kind")]
