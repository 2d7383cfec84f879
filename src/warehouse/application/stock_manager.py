"""Application service: warehouse stock operations.

The manager owns one repository per item family and composes repository
primitives into stock operations. It is the single place where domain
errors are caught: every operation returns a ``StockOutcome`` and none of
them raises a DomainException to its caller.
"""

from __future__ import annotations

import logging
from enum import Enum

from warehouse.application.dto import StockOutcome
from warehouse.domain.exceptions import DomainException, InvalidQuantityError
from warehouse.domain.model.items import ElectronicItem, GroceryItem, InventoryItem
from warehouse.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class ItemFamily(str, Enum):
    ELECTRONICS = "electronics"
    GROCERIES = "groceries"


class WarehouseManager:

    def __init__(self) -> None:
        self._electronics: InventoryRepository[ElectronicItem] = InventoryRepository()
        self._groceries: InventoryRepository[GroceryItem] = InventoryRepository()

    @property
    def electronics(self) -> InventoryRepository[ElectronicItem]:
        return self._electronics

    @property
    def groceries(self) -> InventoryRepository[GroceryItem]:
        return self._groceries

    def repository(self, family: ItemFamily | str) -> InventoryRepository:
        """Return the repository holding the given item family."""
        family = ItemFamily(family)
        if family is ItemFamily.ELECTRONICS:
            return self._electronics
        return self._groceries

    # --- Stock operations -----------------------------------------------------

    def add_item(self, repo: InventoryRepository, item: InventoryItem) -> StockOutcome:
        try:
            repo.add(item)
        except DomainException as exc:
            return self._failure("AddItem", item.id, exc)
        return self._success("AddItem", item.id, f"Item #{item.id} added.", item.quantity)

    def increase_stock(
        self, repo: InventoryRepository, item_id: int, delta: int
    ) -> StockOutcome:
        """Add ``delta`` (possibly negative) to an item's quantity.

        A result below zero is reported as InvalidQuantityError without
        touching the repository.
        """
        try:
            new_quantity = repo.get(item_id).quantity + delta
            if new_quantity < 0:
                raise InvalidQuantityError(
                    new_quantity, "Resulting quantity cannot be negative."
                )
            repo.update_quantity(item_id, new_quantity)
        except DomainException as exc:
            return self._failure("IncreaseStock", item_id, exc)
        return self._success(
            "IncreaseStock",
            item_id,
            f"Stock updated for #{item_id}. New Qty: {new_quantity}",
            new_quantity,
        )

    def set_quantity(
        self, repo: InventoryRepository, item_id: int, new_quantity: int
    ) -> StockOutcome:
        try:
            repo.update_quantity(item_id, new_quantity)
        except DomainException as exc:
            return self._failure("SetQuantity", item_id, exc)
        return self._success(
            "SetQuantity",
            item_id,
            f"Quantity set for #{item_id}. New Qty: {new_quantity}",
            new_quantity,
        )

    def remove_item(self, repo: InventoryRepository, item_id: int) -> StockOutcome:
        try:
            repo.remove(item_id)
        except DomainException as exc:
            return self._failure("RemoveItem", item_id, exc)
        return self._success("RemoveItem", item_id, f"Item #{item_id} removed.")

    # --- Reporting ------------------------------------------------------------

    @staticmethod
    def _success(
        operation: str, item_id: int, message: str, quantity: int | None = None
    ) -> StockOutcome:
        logger.info(message)
        return StockOutcome(
            operation=operation, item_id=item_id, message=message, quantity=quantity
        )

    @staticmethod
    def _failure(operation: str, item_id: int, exc: DomainException) -> StockOutcome:
        message = f"[{operation} Error] {exc}"
        logger.info(message)
        return StockOutcome(
            operation=operation, item_id=item_id, message=message, error=exc
        )
