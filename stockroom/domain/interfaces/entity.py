from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable


@runtime_checkable
class StockedEntity(Protocol):
    """Capability every stored item must expose.

    ``id`` is the sole identity key within a store. ``quantity`` is the
    mutable, non-negative stock count the store is allowed to overwrite.
    """

    id: int
    quantity: int


E = TypeVar("E", bound=StockedEntity)
