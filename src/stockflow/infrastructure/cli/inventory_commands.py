"""CLI commands for inventory reports."""

from __future__ import annotations

import click

from stockflow.application.low_stock import ShowLowStockHandler
from stockflow.infrastructure.bootstrap import product_catalog

_STATUS_LABELS = {
    "OUT_OF_STOCK": "Out of Stock",
    "LOW_STOCK": "Low Stock",
}


def status_label(status: str) -> str:
    return _STATUS_LABELS.get(status, status)


@click.command("low")
def inventory_low() -> None:
    """Show products at or below their reorder threshold."""
    handler = ShowLowStockHandler(catalog=product_catalog())
    lines = handler.handle()

    if not lines:
        click.echo("No products with low inventory.")
        return

    click.echo(f"{'Product':<30} {'In Stock':>9} {'Threshold':>10} {'Status':>14}")
    click.echo("-" * 66)
    for line in lines:
        click.echo(
            f"{line.product_name[:30]:<30} {line.stock:>9} {line.threshold:>10} "
            f"{status_label(line.status):>14}"
        )
