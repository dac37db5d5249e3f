"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from stockflow.application.add_product import AddProductHandler
from stockflow.application.dto import product_to_dto
from stockflow.application.prefill_product import PrefillProductDetailsHandler
from stockflow.application.search_products import SearchProductsHandler
from stockflow.application.seed_catalog import SeedCatalogHandler
from stockflow.application.update_product import UpdateProductHandler
from stockflow.domain.exceptions import AdapterUnavailableError, DomainException
from stockflow.domain.gateway.product_lookup import ProductDetails
from stockflow.domain.repository.product_catalog import ProductCatalog
from stockflow.infrastructure import bootstrap
from stockflow.infrastructure.bootstrap import product_catalog


def _fetch_details(catalog: ProductCatalog, barcode: str) -> ProductDetails:
    handler = PrefillProductDetailsHandler(catalog=catalog, lookup=bootstrap.product_lookup())
    try:
        return handler.handle(barcode)
    except AdapterUnavailableError:
        click.echo("Could not fetch product details. Please enter manually.", err=True)
        return ProductDetails()
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _print_products(products) -> None:
    click.echo(f"{'Barcode':<15} {'Name':<30} {'MRP':>10} {'Stock':>7} {'Reorder':>8}")
    click.echo("-" * 74)
    for p in products:
        click.echo(
            f"{p.barcode:<15} {p.name[:30]:<30} {p.mrp:>10} {p.stock:>7} {p.low_inventory_factor:>8}"
        )


@click.command("add")
@click.option("--barcode", required=True, help="Barcode; becomes the product ID.")
@click.option("--name", default=None, help="Product name.")
@click.option("--description", default=None, help="Product description.")
@click.option("--mrp", required=True, help="Maximum retail price (e.g. 100.00).")
@click.option("--cost-code", default="", help="Internal cost price code.")
@click.option("--stock", required=True, type=int, help="Quantity in stock.")
@click.option("--threshold", default=0, type=int, help="Low inventory threshold.")
@click.option("--ean", default=None, help="EAN (defaults to the barcode).")
@click.option("--fetch", is_flag=True, default=False, help="Prefill name/description from the product database.")
def product_add(
    barcode: str,
    name: str | None,
    description: str | None,
    mrp: str,
    cost_code: str,
    stock: int,
    threshold: int,
    ean: str | None,
    fetch: bool,
) -> None:
    """Add a new product to the catalog."""
    catalog = product_catalog()

    if fetch:
        details = _fetch_details(catalog, barcode)
        name = name or details.name
        if description is None:
            description = details.description

    if not name:
        raise click.ClickException("Product name is required (pass --name or --fetch)")

    handler = AddProductHandler(catalog=catalog)
    try:
        product = handler.handle(
            barcode=barcode,
            name=name,
            mrp=mrp,
            stock=stock,
            low_inventory_factor=threshold,
            description=description or "",
            cost_price_code=cost_code,
            ean=ean,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{product.name}' added ({product.barcode}) at {product.mrp}, stock {product.stock}")


@click.command("lookup")
@click.option("--barcode", required=True, help="Barcode to look up.")
def product_lookup(barcode: str) -> None:
    """Fetch name and description for a barcode."""
    details = _fetch_details(product_catalog(), barcode)
    if details.is_empty:
        click.echo(f"No details found for {barcode}.")
        return
    click.echo(f"Name:        {details.name}")
    click.echo(f"Description: {details.description}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    catalog = product_catalog()
    try:
        products = catalog.list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    _print_products([product_to_dto(p) for p in products])


@click.command("search")
@click.argument("query")
def product_search(query: str) -> None:
    """Search products by name or barcode."""
    handler = SearchProductsHandler(catalog=product_catalog())
    results = handler.handle(query)

    if not results:
        click.echo(f"No products match '{query}'.")
        return

    _print_products(results)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID (barcode).")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--mrp", default=None, help="New MRP (e.g. 29.99).")
@click.option("--cost-code", default=None, help="New cost price code.")
@click.option("--stock", default=None, type=int, help="New stock quantity.")
@click.option("--threshold", default=None, type=int, help="New low inventory threshold.")
def product_update(
    product_id: str,
    name: str | None,
    description: str | None,
    mrp: str | None,
    cost_code: str | None,
    stock: int | None,
    threshold: int | None,
) -> None:
    """Edit a product."""
    handler = UpdateProductHandler(catalog=product_catalog())

    try:
        product = handler.handle(
            product_id=product_id,
            name=name,
            description=description,
            mrp=mrp,
            cost_price_code=cost_code,
            stock=stock,
            low_inventory_factor=threshold,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} updated: MRP {product.mrp}, stock {product.stock}")


@click.command("seed")
def product_seed() -> None:
    """Load demo products into an empty catalog."""
    handler = SeedCatalogHandler(catalog=product_catalog())

    try:
        count = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if count:
        click.echo(f"Seeded {count} demo products.")
    else:
        click.echo("Catalog already has products; nothing seeded.")
