import click

from petstore.infrastructure.cli.inventory_commands import (
    inventory_add,
    inventory_by_type,
    inventory_list,
    inventory_remove,
    inventory_show,
    inventory_update,
)
from petstore.infrastructure.config import get_settings
from petstore.infrastructure.logging_config import setup_logging


@click.group()
def cli() -> None:
    """Pet Store: manage the pet inventory."""
    setup_logging(get_settings().log_level)


@cli.group()
def inventory() -> None:
    """Manage the pet inventory."""


# Register subcommands
inventory.add_command(inventory_add)
inventory.add_command(inventory_by_type)
inventory.add_command(inventory_list)
inventory.add_command(inventory_remove)
inventory.add_command(inventory_show)
inventory.add_command(inventory_update)
