import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import open_database
from storefront.infrastructure.cli.context import CliContext, cli_error
from storefront.infrastructure.cli.customer_commands import customer_add, customer_list
from storefront.infrastructure.cli.order_commands import (
    order_create,
    order_list,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)
from storefront.infrastructure.config import get_settings
from storefront.infrastructure.observability import setup_logging


@click.group()
@click.option("--database-url", default=None, help="Override the configured database URL.")
@click.pass_context
def cli(ctx: click.Context, database_url: str | None) -> None:
    """Storefront: customers, catalog and orders"""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    try:
        database = open_database(settings, database_url)
    except DomainException as exc:
        raise cli_error(exc)
    ctx.call_on_close(database.close)
    ctx.obj = CliContext(settings=settings, database=database)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def customer() -> None:
    """Manage customers."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
customer.add_command(customer_add)
customer.add_command(customer_list)
