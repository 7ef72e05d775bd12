"""Repository interfaces and implementations.

This package defines the abstract :class:`EntityRepo` interface for stocked
entities and its concrete pieces: the in-memory store under
:mod:`stockroom.repositories.memory` and the JSON file adapter under
:mod:`stockroom.repositories.file`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable

from stockroom.domain.interfaces import E


class EntityRepo(ABC, Generic[E]):
    """Keyed repository over entities exposing ``id`` and ``quantity``."""

    @abstractmethod
    def add(self, entity: E) -> None:
        """
        Insert a new entity.

        Example:
            >>> repo.add(InventoryItem(id=1, name="Laptop", quantity=5, date_added=now))

        :param entity: Entity whose ``id`` is not yet taken.
        :raises DuplicateIdentityError: if an entity with the same id exists.
        """

    @abstractmethod
    def get_by_id(self, entity_id: int) -> E:
        """
        Fetch an entity by identifier.

        :param entity_id: Identifier to look up.
        :return: The stored entity.
        :raises NotFoundError: if no entity has that id.
        """

    @abstractmethod
    def remove(self, entity_id: int) -> None:
        """
        Delete the entity with ``entity_id``.

        :raises NotFoundError: if no entity has that id.
        """

    @abstractmethod
    def update_quantity(self, entity_id: int, new_quantity: int) -> E:
        """
        Overwrite the quantity of an existing entity.

        :raises InvalidValueError: if ``new_quantity`` is negative.
        :raises NotFoundError: if no entity has that id.
        """

    @abstractmethod
    def list_all(self) -> list[E]:
        """Return a snapshot list of every stored entity."""

    @abstractmethod
    def replace_all(self, entities: Iterable[E]) -> None:
        """Swap the whole content for ``entities``; nothing changes if the batch is invalid."""
