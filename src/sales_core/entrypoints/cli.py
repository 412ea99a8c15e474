"""Command-line demonstration of the sales order workflow."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import click

from sales_core.application.dtos import (
    OrderLineRequest,
    PlaceSalesOrderRequest,
    RegisterCustomerRequest,
)
from sales_core.application.use_cases import PlaceSalesOrderUseCase, RegisterCustomerUseCase
from sales_core.domain.exceptions import DomainException, InvalidStateError
from sales_core.domain.value_objects.currency import DEFAULT_LOCALE
from sales_core.infrastructure import SystemTimeProvider, UuidIdGenerator

if TYPE_CHECKING:
    from sales_core.application.ports import IdGenerator, TimeProvider
    from sales_core.domain.entities import Customer, SalesOrder

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
PAST_ORDER_DATE = "2023-05-15T10:30:00Z"
PEN_LOCALE = "es_PE"


@dataclass
class CliContext:
    """Adapters shared by the CLI commands; replaced in tests."""

    time_provider: TimeProvider = field(default_factory=SystemTimeProvider)
    id_generator: IdGenerator = field(default_factory=UuidIdGenerator)


def describe_order(label: str, customer: Customer, order: SalesOrder, locale: str) -> str:
    total = customer.last_order_price
    formatted_total = total.format(locale) if total is not None else "-"
    return (
        f"{label} - Customer: {customer.name}, ID: {customer.id}, "
        f"Ordered At: {order.get_formatted_ordered_at()}, "
        f"State: {order.state}, Total: {formatted_total}"
    )


def run_demo(context: CliContext, customer_name: str, locale: str) -> None:
    """Run both demonstration scenarios, echoing one line per order.

    Ends by confirming the already shipped order again; the expected
    rejection is reported as an error line and the run still succeeds.

    Raises:
        DomainException: Whatever the domain rejects first.
    """
    customer = RegisterCustomerUseCase(context.id_generator).execute(
        RegisterCustomerRequest(name=customer_name)
    )
    place_order = PlaceSalesOrderUseCase(context.time_provider, context.id_generator)

    # Scenario 1: USD order placed now
    real_time = place_order.execute(
        PlaceSalesOrderRequest(
            customer=customer,
            currency_code="USD",
            lines=(
                OrderLineRequest(quantity=2, unit_price_amount=100),
                OrderLineRequest(quantity=20, unit_price_amount=50),
            ),
        )
    )
    click.echo(describe_order("Real-time Order", customer, real_time.order, locale))

    # Scenario 2: PEN order with a past date, confirmed and shipped
    manual = place_order.execute(
        PlaceSalesOrderRequest(
            customer=customer,
            currency_code="PEN",
            lines=(OrderLineRequest(quantity=1, unit_price_amount=150),),
            ordered_at=PAST_ORDER_DATE,
            ship=True,
        )
    )
    click.echo(describe_order("Manual Order", customer, manual.order, PEN_LOCALE))

    # Shipped orders cannot be confirmed again
    try:
        manual.order.confirm()
    except InvalidStateError as e:
        click.echo(f"Error: {e}", err=True)


@click.group()
@click.option(
    "--log-level",
    envvar="SALES_CORE_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging verbosity.",
)
@click.pass_context
def main(ctx: click.Context, log_level: str) -> None:
    """Sales order domain model demonstrations."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if ctx.obj is None:
        ctx.obj = CliContext()


@main.command()
@click.option("--customer", "customer_name", default="John Doe", show_default=True)
@click.option(
    "--locale",
    envvar="SALES_CORE_LOCALE",
    default=DEFAULT_LOCALE,
    show_default=True,
    help="Locale for the USD order total (en_US or en-US style).",
)
@click.pass_obj
def demo(context: CliContext, customer_name: str, locale: str) -> None:
    """Place a USD order and a shipped PEN order for one customer."""
    try:
        run_demo(context, customer_name, locale)
    except DomainException as e:
        logger.debug("Demo stopped on domain error", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
