"""CLI commands for viewing inventory."""

from __future__ import annotations

import click

from warehouse.application.seed import seed_sample_data
from warehouse.application.show_inventory import ShowInventoryHandler
from warehouse.application.stock_manager import ItemFamily, WarehouseManager
from warehouse.domain.model.items import GroceryItem
from warehouse.domain.repository.inventory_repository import InventoryRepository
from warehouse.infrastructure.bootstrap import warehouse_manager
from warehouse.infrastructure.config import WarehouseSettings

FAMILY_CHOICE = click.Choice([f.value for f in ItemFamily])

_HEADINGS = {
    ItemFamily.GROCERIES: "Grocery Items:",
    ItemFamily.ELECTRONICS: "Electronic Items:",
}


def _print_items(repo: InventoryRepository) -> None:
    lines = ShowInventoryHandler(inventory_repo=repo).handle()
    if not lines:
        click.echo("  No items found.")
        return
    for line in lines:
        click.echo(f"  {line.detail}")


@click.command("list")
@click.option("--family", type=FAMILY_CHOICE, default=None, help="Only list one item family.")
@click.pass_obj
def inventory_list(settings: WarehouseSettings, family: str | None) -> None:
    """List the items in the warehouse."""
    manager = warehouse_manager(settings)
    families = [ItemFamily(family)] if family else list(_HEADINGS)

    for i, fam in enumerate(families):
        if i:
            click.echo()
        click.echo(_HEADINGS[fam])
        _print_items(manager.repository(fam))


@click.command("demo")
def inventory_demo() -> None:
    """Seed sample stock and replay the error-handling walkthrough."""
    click.echo("Warehouse Inventory App")
    manager = WarehouseManager()
    seed_sample_data(manager)

    for fam, heading in _HEADINGS.items():
        click.echo()
        click.echo(heading)
        _print_items(manager.repository(fam))

    click.echo()
    click.echo("Custom Exceptions:")

    duplicate = GroceryItem(
        101, "Rice 5kg (Duplicate)", 5, manager.groceries.get(101).expiry_date
    )
    added = manager.add_item(manager.groceries, duplicate)
    if added.succeeded:
        click.echo(added.message)
    else:
        click.echo(f"[Duplicate Add Error] {added.error}")

    outcomes = [
        manager.remove_item(manager.electronics, 999),
        manager.set_quantity(manager.groceries, 102, -10),
        manager.increase_stock(manager.electronics, 1, 5),
    ]
    for outcome in outcomes:
        click.echo(outcome.message)
