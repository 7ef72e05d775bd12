from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator

from stockroom.domain.errors import DuplicateIdentityError, InvalidValueError, NotFoundError
from stockroom.domain.interfaces import E

from .. import EntityRepo

logger = logging.getLogger(__name__)


def _check_quantity(value: object) -> int:
    # bool is an int subclass but never a valid stock count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValueError("Quantity must be an integer.", value)
    if value < 0:
        raise InvalidValueError("Quantity cannot be negative.", value)
    return value


class KeyedStore(EntityRepo[E]):
    """In-memory implementation of :class:`EntityRepo`.

    - Entities are held in a dict keyed by ``id``; iteration follows insertion order.
    - Every mutation is all-or-nothing: checks run before the mapping is touched.
    - Entities are stored by reference, so ``get_by_id`` returns the live object.
    """

    def __init__(self, entities: Iterable[E] = ()) -> None:
        self._items: Dict[int, E] = {}
        self.replace_all(entities)

    def add(self, entity: E) -> None:
        if entity.id in self._items:
            raise DuplicateIdentityError(entity.id)
        _check_quantity(entity.quantity)
        self._items[entity.id] = entity
        logger.debug("Added entity", extra={"entity_id": entity.id})

    def get_by_id(self, entity_id: int) -> E:
        try:
            return self._items[entity_id]
        except KeyError:
            raise NotFoundError(entity_id) from None

    def remove(self, entity_id: int) -> None:
        if self._items.pop(entity_id, None) is None:
            raise NotFoundError(entity_id)
        logger.debug("Removed entity", extra={"entity_id": entity_id})

    def update_quantity(self, entity_id: int, new_quantity: int) -> E:
        _check_quantity(new_quantity)
        entity = self.get_by_id(entity_id)
        entity.quantity = new_quantity
        logger.debug(
            "Updated quantity", extra={"entity_id": entity_id, "quantity": new_quantity}
        )
        return entity

    def adjust_quantity(self, entity_id: int, delta: int) -> E:
        """Add ``delta`` (possibly negative) to the current quantity.

        Fails with ``NotFoundError`` or ``InvalidValueError`` without touching
        the store when the id is unknown or the result would be negative.
        """
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise InvalidValueError("Quantity change must be an integer.", delta)
        current = self.get_by_id(entity_id).quantity
        return self.update_quantity(entity_id, current + delta)

    def list_all(self) -> list[E]:
        return list(self._items.values())

    def replace_all(self, entities: Iterable[E]) -> None:
        staged: Dict[int, E] = {}
        for entity in entities:
            if entity.id in staged:
                raise DuplicateIdentityError(entity.id)
            _check_quantity(entity.quantity)
            staged[entity.id] = entity
        self._items = staged
        logger.debug("Replaced store content", extra={"count": len(staged)})

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._items

    def __iter__(self) -> Iterator[E]:
        return iter(self.list_all())
