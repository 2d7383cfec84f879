"""Generic in-memory repository for one family of inventory items.

The repository owns its items exclusively and enforces three invariants:

- IDs are unique
- stored quantities are never negative
- only ``add`` and ``remove`` change membership

It performs no I/O and no logging. It is not thread-safe: ``update_quantity``
is a read-then-write, so concurrent callers would need to serialize access
to an instance.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from warehouse.domain.exceptions import (
    DuplicateItemError,
    InvalidQuantityError,
    ItemNotFoundError,
)
from warehouse.domain.model.items import InventoryItem

T = TypeVar("T", bound=InventoryItem)


class InventoryRepository(Generic[T]):

    def __init__(self) -> None:
        self._items: dict[int, T] = {}

    def add(self, item: T) -> None:
        """Store a new item.

        Raises DuplicateItemError if the ID is taken; the stored item is
        left untouched.
        """
        if item.id in self._items:
            raise DuplicateItemError(item.id)
        self._items[item.id] = item

    def get(self, item_id: int) -> T:
        """Return the stored item.

        Callers must not change its quantity directly; use
        ``update_quantity``.
        """
        try:
            return self._items[item_id]
        except KeyError:
            raise ItemNotFoundError(item_id) from None

    def remove(self, item_id: int) -> None:
        if item_id not in self._items:
            raise ItemNotFoundError(item_id)
        del self._items[item_id]

    def update_quantity(self, item_id: int, new_quantity: int) -> None:
        """Set the quantity of a stored item.

        The sign is checked before existence: a negative value raises
        InvalidQuantityError even for an unknown ID.
        """
        if new_quantity < 0:
            raise InvalidQuantityError(new_quantity)
        self.get(item_id).set_quantity(new_quantity)

    def list_all(self) -> list[T]:
        """Return every item in insertion order."""
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items
