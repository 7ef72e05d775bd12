from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..value_objects.ids import ItemId


class StockItem(BaseModel):
    """Fields shared by every stocked record.

    Assignment is validated, so ``quantity`` cannot be driven negative by a
    direct attribute write either.
    """

    id: ItemId = Field(..., ge=0, description="Unique identifier within one store")
    name: str = Field(..., description="Display name")
    quantity: int = Field(..., ge=0, description="Units in stock")

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        return v

    def describe(self) -> str:
        return f"ID: {self.id}, Name: {self.name}, Qty: {self.quantity}"
