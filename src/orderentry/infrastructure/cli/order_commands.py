"""CLI commands for placing orders."""

from __future__ import annotations

from pathlib import Path

import click

from orderentry.application.build_order import BuildOrderHandler
from orderentry.application.dto import OrderItemSpec, OrderSummary
from orderentry.domain.exceptions import DomainException
from orderentry.infrastructure.bootstrap import place_order_handler, product_repository


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'WID-1:3,GAD-2:5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'SKU:Quantity'."
            )
        sku, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for SKU '{sku}'."
            )
        specs.append(OrderItemSpec(sku=sku.strip(), quantity=qty))
    return specs


def _display_summary(summary: OrderSummary) -> None:
    click.echo(f"Order {summary.order_number} placed  (id={summary.order_id})")
    click.echo(f"Customer: #{summary.customer_id}")
    click.echo()
    click.echo(f"  {'Net Total':<27} {str(summary.net_total):>12}")
    for entry in summary.taxes:
        click.echo(f"  {entry.description:<27} {entry.rate:>12}")
    click.echo(f"  {'-'*40}")
    click.echo(f"  {'Total':<27} {str(summary.total):>12}")


@click.command("place")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'SKU:Qty,SKU:Qty'.")
@click.pass_obj
def order_place(data_dir: Path, customer_id: int, items: str) -> None:
    """Validate, fulfill and price a new order."""
    specs = _parse_items(items)

    builder = BuildOrderHandler(product_repo=product_repository(data_dir))
    handler = place_order_handler(data_dir)

    try:
        order = builder.handle(customer_id=customer_id, item_specs=specs)
        summary = handler.handle(order)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_summary(summary)
