import logging
from pathlib import Path

import click

from orderentry.infrastructure.bootstrap import DEFAULT_DATA_DIR
from orderentry.infrastructure.cli.order_commands import order_place
from orderentry.infrastructure.cli.product_commands import product_list

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar="ORDERENTRY_DATA_DIR",
    show_default=True,
    help="Directory holding the JSON data files.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, verbose: bool) -> None:
    """Order Entry: validate, fulfill and price orders."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    ctx.obj = data_dir


@cli.group()
def order() -> None:
    """Place orders."""


@cli.group()
def product() -> None:
    """Browse the product catalog."""


# Register subcommands
order.add_command(order_place)
product.add_command(product_list)
