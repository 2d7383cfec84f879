"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from warehouse.domain.repository.inventory_repository import InventoryRepository


@dataclass(frozen=True)
class InventoryLineDTO:
    id: int
    name: str
    quantity: int
    detail: str  # variant rendering, e.g. "[E] #1 Laptop (Dell) - Qty: 10, Warranty: 24m"


class ShowInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self) -> list[InventoryLineDTO]:
        return [
            InventoryLineDTO(
                id=item.id,
                name=item.name,
                quantity=item.quantity,
                detail=str(item),
            )
            for item in self._inventory_repo.list_all()
        ]
