"""Objects shared by every CLI command through ``click.Context.obj``."""

from __future__ import annotations

from dataclasses import dataclass

import click

from storefront.application.order_service import OrderService
from storefront.domain.exceptions import DomainException
from storefront.infrastructure import bootstrap
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.database import Database


@dataclass
class CliContext:
    settings: Settings
    database: Database

    def order_service(self) -> OrderService:
        return bootstrap.order_service(self.database, self.settings)

    def product_repository(self):
        return bootstrap.product_repository(self.database)

    def customer_repository(self):
        return bootstrap.customer_repository(self.database)


pass_cli_context = click.make_pass_decorator(CliContext)


def cli_error(exc: DomainException) -> click.ClickException:
    """Render a domain error with its code and the entity or field it names."""
    payload = exc.to_dict()
    details = ", ".join(
        f"{key}={value}" for key, value in payload.items() if key not in ("code", "message")
    )
    message = f"[{payload['code']}] {payload['message']}"
    if details:
        message = f"{message} ({details})"
    return click.ClickException(message)
