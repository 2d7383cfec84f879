"""Item variants stored in the warehouse.

Every variant satisfies the ``InventoryItem`` capability structurally: the
repository only ever touches ``id``, ``name``, ``quantity`` and
``set_quantity``. Variant-specific fields (brand, warranty, expiry date)
are never inspected outside the variant itself.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from warehouse.domain.exceptions import InvalidQuantityError


class InventoryItem(Protocol):
    """Capability contract for anything the repository can store.

    ``quantity`` is read-only; the single mutation entry point is
    ``set_quantity``, which must refuse negative values.
    """

    @property
    def id(self) -> int: ...

    @property
    def name(self) -> str: ...

    @property
    def quantity(self) -> int: ...

    def set_quantity(self, quantity: int) -> None: ...


def _checked_quantity(quantity: int) -> int:
    if quantity < 0:
        raise InvalidQuantityError(quantity)
    return quantity


class ElectronicItem:
    """An electronic device with a brand and a warranty period."""

    def __init__(
        self,
        id: int,
        name: str,
        quantity: int,
        brand: str,
        warranty_months: int,
    ) -> None:
        self._id = id
        self._name = name
        self._quantity = _checked_quantity(quantity)
        self._brand = brand
        self._warranty_months = warranty_months

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def brand(self) -> str:
        return self._brand

    @property
    def warranty_months(self) -> int:
        return self._warranty_months

    def set_quantity(self, quantity: int) -> None:
        self._quantity = _checked_quantity(quantity)

    def __str__(self) -> str:
        return (
            f"[E] #{self._id} {self._name} ({self._brand}) - "
            f"Qty: {self._quantity}, Warranty: {self._warranty_months}m"
        )

    def __repr__(self) -> str:
        return (
            f"ElectronicItem(id={self._id!r}, name={self._name!r}, "
            f"quantity={self._quantity!r}, brand={self._brand!r}, "
            f"warranty_months={self._warranty_months!r})"
        )


class GroceryItem:
    """A perishable grocery product with an expiry date."""

    def __init__(self, id: int, name: str, quantity: int, expiry_date: date) -> None:
        self._id = id
        self._name = name
        self._quantity = _checked_quantity(quantity)
        self._expiry_date = expiry_date

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def expiry_date(self) -> date:
        return self._expiry_date

    def set_quantity(self, quantity: int) -> None:
        self._quantity = _checked_quantity(quantity)

    def __str__(self) -> str:
        return (
            f"[G] #{self._id} {self._name} - "
            f"Qty: {self._quantity}, Expires: {self._expiry_date.isoformat()}"
        )

    def __repr__(self) -> str:
        return (
            f"GroceryItem(id={self._id!r}, name={self._name!r}, "
            f"quantity={self._quantity!r}, expiry_date={self._expiry_date!r})"
        )
