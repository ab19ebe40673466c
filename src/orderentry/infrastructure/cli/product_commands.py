"""CLI commands for the product catalog."""

from __future__ import annotations

from pathlib import Path

import click

from orderentry.infrastructure.bootstrap import product_repository


@click.command("list")
@click.pass_obj
def product_list(data_dir: Path) -> None:
    """List all products in the catalog."""
    products = product_repository(data_dir).list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'SKU':<12} {'Name':<20} {'Price':>10}")
    click.echo("-" * 44)
    for p in products:
        click.echo(f"{p.sku:<12} {p.name:<20} {str(p.price):>10}")
