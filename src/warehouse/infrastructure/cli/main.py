import click

from warehouse.infrastructure.cli.inventory_commands import inventory_demo, inventory_list
from warehouse.infrastructure.cli.stock_commands import (
    stock_increase,
    stock_remove,
    stock_set,
)
from warehouse.infrastructure.config import LOG_LEVELS, WarehouseSettings
from warehouse.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override WAREHOUSE_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Warehouse Inventory: stock manager for electronics and groceries"""
    settings = WarehouseSettings()
    if log_level is not None:
        settings = settings.model_copy(update={"log_level": log_level.upper()})
    configure_logging(settings)
    ctx.obj = settings


@cli.group()
def stock() -> None:
    """Change stock levels."""


# Register subcommands
cli.add_command(inventory_demo)
cli.add_command(inventory_list)
stock.add_command(stock_increase)
stock.add_command(stock_remove)
stock.add_command(stock_set)
