import click

from stockroom.infrastructure.bootstrap import FILE_ENV_VAR, inventory_repository
from stockroom.infrastructure.cli.context import CliContext
from stockroom.infrastructure.cli.inventory_commands import (
    inventory_add,
    inventory_list,
    inventory_remove,
    inventory_search,
    inventory_total,
    inventory_update,
)
from stockroom.infrastructure.cli.menu import inventory_menu
from stockroom.infrastructure.log_config import setup_logging


@click.group()
@click.option(
    "--file",
    "file_path",
    type=click.Path(dir_okay=False),
    envvar=FILE_ENV_VAR,
    help="Inventory file (default: data/inventory.txt).",
)
@click.option("--verbose", "-v", is_flag=True, help="Log load/save details.")
@click.pass_context
def cli(ctx: click.Context, file_path: str | None, verbose: bool) -> None:
    """Stockroom: retail inventory manager"""
    setup_logging(verbose)
    ctx.obj = CliContext(repository=inventory_repository(file_path))


# Register subcommands
cli.add_command(inventory_add)
cli.add_command(inventory_list)
cli.add_command(inventory_menu)
cli.add_command(inventory_remove)
cli.add_command(inventory_search)
cli.add_command(inventory_total)
cli.add_command(inventory_update)
