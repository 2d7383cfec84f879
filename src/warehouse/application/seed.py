"""Sample stock used by the demo and the CLI.

Seeding goes straight to the repositories: the records are known to be
valid, so a DomainException here is a programming error and propagates.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, timedelta

from warehouse.application.stock_manager import WarehouseManager
from warehouse.domain.model.items import ElectronicItem, GroceryItem

logger = logging.getLogger(__name__)


def add_months(start: date, months: int) -> date:
    """Shift a date by whole months, clamping to the last day of the month."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def seed_sample_data(manager: WarehouseManager, today: date | None = None) -> None:
    """Populate both repositories with the sample electronics and groceries."""
    today = today or date.today()

    electronics = [
        ElectronicItem(1, "Laptop", 10, "Dell", 24),
        ElectronicItem(2, "Smartphone", 25, "Samsung", 12),
        ElectronicItem(3, "Router", 15, "Starlink", 14),
        ElectronicItem(4, "Smartwatch", 25, "Iphone", 6),
        ElectronicItem(5, "Televisions", 12, "Sony", 10),
    ]
    groceries = [
        GroceryItem(101, "Rice 5kg", 40, add_months(today, 12)),
        GroceryItem(102, "Milk 1L", 20, today + timedelta(days=10)),
        GroceryItem(103, "Eggs Tray", 30, today + timedelta(days=11)),
        GroceryItem(104, "Salt 1Kg", 5, today + timedelta(days=6)),
        GroceryItem(105, "Spaghetti", 10, today + timedelta(days=8)),
    ]

    for item in electronics:
        manager.electronics.add(item)
    for item in groceries:
        manager.groceries.add(item)

    logger.debug(
        "Seeded %d electronic and %d grocery items",
        len(electronics),
        len(groceries),
    )
