import click

from stockflow.domain.exceptions import DomainException
from stockflow.infrastructure.bootstrap import settings
from stockflow.infrastructure.cli.inventory_commands import inventory_low
from stockflow.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_lookup,
    product_search,
    product_seed,
    product_update,
)
from stockflow.infrastructure.cli.sell_commands import sell
from stockflow.infrastructure.logging_config import LOG_LEVELS, configure_logging


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(sorted(LOG_LEVELS), case_sensitive=False),
    default=None,
    help="Log verbosity (default: STOCKFLOW_LOG_LEVEL or WARNING).",
)
def cli(log_level: str | None) -> None:
    """StockFlow — inventory and point of sale for a single store"""
    try:
        level = log_level or settings().log_level
    except DomainException as exc:
        raise click.ClickException(str(exc))
    configure_logging(level)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def inventory() -> None:
    """Inventory reports."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_lookup)
product.add_command(product_search)
product.add_command(product_seed)
product.add_command(product_update)
inventory.add_command(inventory_low)
cli.add_command(sell)
