"""CLI commands for changing stock levels.

Each command works on a freshly built warehouse; nothing is persisted
between invocations.
"""

from __future__ import annotations

import click

from warehouse.application.dto import StockOutcome
from warehouse.infrastructure.bootstrap import warehouse_manager
from warehouse.infrastructure.cli.inventory_commands import FAMILY_CHOICE
from warehouse.infrastructure.config import WarehouseSettings


def _report(outcome: StockOutcome) -> None:
    if not outcome.succeeded:
        raise click.ClickException(outcome.message)
    click.echo(outcome.message)


@click.command("increase")
@click.option("--family", required=True, type=FAMILY_CHOICE, help="Item family.")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--delta", required=True, type=int, help="Amount to add (may be negative).")
@click.pass_obj
def stock_increase(settings: WarehouseSettings, family: str, item_id: int, delta: int) -> None:
    """Increase (or decrease) an item's stock by a delta."""
    manager = warehouse_manager(settings)
    _report(manager.increase_stock(manager.repository(family), item_id, delta))


@click.command("set")
@click.option("--family", required=True, type=FAMILY_CHOICE, help="Item family.")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--quantity", required=True, type=int, help="New absolute quantity.")
@click.pass_obj
def stock_set(settings: WarehouseSettings, family: str, item_id: int, quantity: int) -> None:
    """Set an item's quantity."""
    manager = warehouse_manager(settings)
    _report(manager.set_quantity(manager.repository(family), item_id, quantity))


@click.command("remove")
@click.option("--family", required=True, type=FAMILY_CHOICE, help="Item family.")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.pass_obj
def stock_remove(settings: WarehouseSettings, family: str, item_id: int) -> None:
    """Remove an item from the warehouse."""
    manager = warehouse_manager(settings)
    _report(manager.remove_item(manager.repository(family), item_id))
