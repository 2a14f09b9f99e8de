"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.context import (
    CliContext,
    cli_error,
    pass_cli_context,
)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--description", default=None, help="Short description.")
@click.option("--category", "category_id", type=int, default=None, help="Category ID.")
@click.option("--seller", "seller_id", type=int, default=None, help="Seller (customer) ID.")
@pass_cli_context
def product_add(
    ctx: CliContext,
    name: str,
    price: str,
    description: str | None,
    category_id: int | None,
    seller_id: int | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(
        product_repo=ctx.product_repository(),
        customer_repo=ctx.customer_repository(),
    )

    try:
        product = handler.handle(
            name=name,
            price=price,
            description=description,
            category_id=category_id,
            seller_id=seller_id,
        )
    except DomainException as exc:
        raise cli_error(exc)

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@pass_cli_context
def product_list(ctx: CliContext) -> None:
    """List all products in the catalog."""
    products = ctx.product_repository().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>10}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--description", default=None, help="New description.")
@pass_cli_context
def product_update(
    ctx: CliContext,
    product_id: int,
    name: str | None,
    price: str | None,
    description: str | None,
) -> None:
    """Update a product's name, price or description."""
    handler = UpdateProductHandler(product_repo=ctx.product_repository())

    try:
        product = handler.handle(
            product_id=product_id, name=name, price=price, description=description
        )
    except DomainException as exc:
        raise cli_error(exc)

    click.echo(f"Product #{product.id} '{product.name}' updated ({product.price})")
