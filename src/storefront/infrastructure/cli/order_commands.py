"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO, OrderItemSpec
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.cli.context import (
    CliContext,
    cli_error,
    pass_cli_context,
)


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,2:5' (product ID : quantity) into an OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'.",
                param_hint="--items",
            )
        id_str, qty_str = pair.rsplit(":", 1)
        try:
            product_id = int(id_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid product ID '{id_str}'.", param_hint="--items"
            )
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product {product_id}.",
                param_hint="--items",
            )
        specs.append(OrderItemSpec(product_id=product_id, quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer.name} <{dto.customer.email}> (#{dto.customer.id})")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Updated:  {dto.updated_at}")
    click.echo()
    click.echo(f"  {'ID':>5} {'Product':<20} {'Qty':>5} {'Price':>12}")
    click.echo(f"  {'-'*45}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:>5} {item.product_name:<20} {item.quantity:>5} {item.price:>12}"
        )
    click.echo(f"  {'-'*45}")
    click.echo(f"  {'Order Total':<27} {dto.total:>18}")


@click.command("create")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
@pass_cli_context
def order_create(ctx: CliContext, customer_id: int, items: str) -> None:
    """Create a new order."""
    specs = _parse_items(items)

    try:
        dto = ctx.order_service().create_order(customer_id, specs)
    except DomainException as exc:
        raise cli_error(exc)

    click.echo(f"Order #{dto.id} created")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@pass_cli_context
def order_show(ctx: CliContext, order_id: int) -> None:
    """Show details of an existing order."""
    try:
        dto = ctx.order_service().get_order(order_id)
    except DomainException as exc:
        raise cli_error(exc)

    _display_order(dto)


@click.command("list")
@click.option("--customer", "customer_id", type=int, default=None, help="Only this customer's orders.")
@pass_cli_context
def order_list(ctx: CliContext, customer_id: int | None) -> None:
    """List orders, optionally for a single customer."""
    service = ctx.order_service()
    try:
        if customer_id is None:
            dtos = service.get_orders()
        else:
            dtos = service.get_orders_by_customer(customer_id)
    except DomainException as exc:
        raise cli_error(exc)

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<24} {'Items':>5} {'Total':>12} {'Status':<12}")
    click.echo("-" * 63)
    for dto in dtos:
        click.echo(
            f"{dto.id:<6} {dto.customer.name:<24} {len(dto.items):>5} {dto.total:>12} {dto.status:<12}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option(
    "--status",
    required=True,
    help=f"New status ({', '.join(s.value for s in OrderStatus)}).",
)
@pass_cli_context
def order_status(ctx: CliContext, order_id: int, status: str) -> None:
    """Move an order to a new fulfillment status."""
    try:
        dto = ctx.order_service().update_order_status(order_id, status)
    except DomainException as exc:
        raise cli_error(exc)

    click.echo(f"Order #{dto.id} is now {dto.status}.")
