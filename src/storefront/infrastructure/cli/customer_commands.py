"""CLI commands for customers."""

from __future__ import annotations

import click

from storefront.application.register_customer import RegisterCustomerHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.customer import CustomerRole
from storefront.infrastructure.cli.context import (
    CliContext,
    cli_error,
    pass_cli_context,
)


@click.command("add")
@click.option("--first-name", required=True, help="First name.")
@click.option("--last-name", default=None, help="Last name.")
@click.option("--email", required=True, help="Email address (unique).")
@click.option(
    "--role",
    type=click.Choice([r.value for r in CustomerRole]),
    default=CustomerRole.CUSTOMER.value,
    show_default=True,
)
@pass_cli_context
def customer_add(
    ctx: CliContext,
    first_name: str,
    last_name: str | None,
    email: str,
    role: str,
) -> None:
    """Register a new customer."""
    handler = RegisterCustomerHandler(customer_repo=ctx.customer_repository())

    try:
        customer = handler.handle(
            first_name=first_name, last_name=last_name, email=email, role=role
        )
    except DomainException as exc:
        raise cli_error(exc)

    click.echo(f"Customer #{customer.id} {customer.display_name} registered")


@click.command("list")
@pass_cli_context
def customer_list(ctx: CliContext) -> None:
    """List all customers."""
    customers = ctx.customer_repository().list_all()

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Email':<30} {'Role':<8}")
    click.echo("-" * 70)
    for c in customers:
        click.echo(f"{c.id:<6} {c.display_name:<24} {c.email:<30} {c.role.value:<8}")
