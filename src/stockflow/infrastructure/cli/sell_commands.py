"""CLI command for the point-of-sale flow.

One invocation is one sale: the cart lives only for the duration of the
command and is committed (or abandoned) before it exits.
"""

from __future__ import annotations

from typing import TextIO

import click

from stockflow.application.add_to_cart import AddToCartHandler
from stockflow.application.complete_sale import CompleteSaleHandler
from stockflow.application.dto import cart_to_dto
from stockflow.application.low_stock import LowStockMonitor
from stockflow.domain.exceptions import DomainException
from stockflow.domain.model.cart import Cart
from stockflow.infrastructure.bootstrap import product_catalog
from stockflow.infrastructure.cli.inventory_commands import status_label
from stockflow.infrastructure.scanner.stream_barcode_source import StreamBarcodeSource


def _parse_item(raw: str) -> tuple[str, int, str | None]:
    """Parse 'BARCODE[:QTY][@PRICE]' into (barcode, quantity, price)."""
    spec = raw.strip()
    price = None
    if "@" in spec:
        spec, price = spec.rsplit("@", 1)
        price = price.strip()
    qty = 1
    if ":" in spec:
        spec, qty_str = spec.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for barcode '{spec}'."
            )
    barcode = spec.strip()
    if not barcode:
        raise click.BadParameter(
            f"Invalid item format '{raw}'. Expected 'BARCODE[:QTY][@PRICE]'."
        )
    return barcode, qty, price


def _display_cart(cart: Cart) -> None:
    dto = cart_to_dto(cart)
    click.echo(f"  {'Item':<30} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*58}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name[:30]:<30} {item.quantity:>5} {item.sale_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*58}")
    click.echo(f"  {'Total':<30} {dto.total:>27}")


@click.command("sell")
@click.option("--item", "items", multiple=True, help="Item as 'BARCODE[:QTY][@PRICE]'. Repeatable.")
@click.option("--scan", is_flag=True, default=False, help="Read scanned barcodes, one per line; blank line finishes.")
@click.option(
    "--scan-from",
    "scan_stream",
    type=click.File("r"),
    default="-",
    help="File to read scanned barcodes from with --scan (default: stdin).",
)
def sell(items: tuple[str, ...], scan: bool, scan_stream: TextIO) -> None:
    """Ring up a sale and decrement stock.

    Items that cannot be added (unknown barcode, not enough stock) are
    reported and skipped; the rest of the sale goes through.
    """
    if not items and not scan:
        raise click.ClickException("Nothing to sell — pass --item and/or --scan")

    parsed = [_parse_item(raw) for raw in items]

    catalog = product_catalog()
    cart = Cart()
    add_handler = AddToCartHandler(catalog=catalog)

    for barcode, qty, price in parsed:
        try:
            line = add_handler.handle(cart, barcode, quantity=qty, sale_price=price)
        except DomainException as exc:
            click.echo(f"Skipped {barcode}: {exc}", err=True)
            continue
        click.echo(f"{line.product.name} added to cart.")

    if scan:
        source = StreamBarcodeSource(scan_stream)

        def on_scanned(code: str) -> None:
            try:
                line = add_handler.handle_scan(cart, code)
            except DomainException as exc:
                click.echo(f"Skipped {code}: {exc}", err=True)
                return
            click.echo(f"{line.product.name} quantity now {line.quantity}.")

        source.on_detected(on_scanned)
        source.start()

    if not cart.is_empty:
        _display_cart(cart)

    with LowStockMonitor(catalog) as monitor:
        try:
            receipt = CompleteSaleHandler(catalog=catalog).handle(cart)
        except DomainException as exc:
            raise click.ClickException(str(exc))
        alerts = monitor.drain_alerts()

    click.echo()
    click.echo(f"Sale complete! Total: {receipt.total}  ({receipt.completed_at})")
    for outcome in receipt.outcomes:
        if outcome.applied:
            click.echo(f"  {outcome.product_name}: sold {outcome.quantity}, {outcome.remaining_stock} left")
        else:
            click.echo(f"  {outcome.product_name}: NOT updated — {outcome.error}")

    for alert in alerts:
        click.echo(f"  ! {alert.product_name} is {status_label(alert.status)} ({alert.stock} left)")

    if not receipt.fully_applied:
        failed = sum(1 for o in receipt.outcomes if not o.applied)
        raise click.ClickException(f"{failed} line(s) could not be applied to stock")
