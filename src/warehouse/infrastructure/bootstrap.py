"""Composition root: builds the warehouse the CLI works on.

There is no persistence; every process starts from an empty (or freshly
seeded) in-memory warehouse.
"""

from __future__ import annotations

from warehouse.application.seed import seed_sample_data
from warehouse.application.stock_manager import WarehouseManager
from warehouse.infrastructure.config import WarehouseSettings


def warehouse_manager(settings: WarehouseSettings) -> WarehouseManager:
    manager = WarehouseManager()
    if settings.seed_sample_data:
        seed_sample_data(manager)
    return manager
