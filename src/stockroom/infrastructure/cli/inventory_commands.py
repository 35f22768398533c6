"""One-shot CLI commands: each loads the file, runs one action, and
saves again if the action changed anything."""

from __future__ import annotations

import click

from stockroom.application.add_item import AddItemHandler
from stockroom.application.remove_item import RemoveItemHandler
from stockroom.application.search_item import SearchItemHandler
from stockroom.application.show_inventory import ShowInventoryHandler, TotalValueHandler
from stockroom.application.update_quantity import UpdateQuantityHandler
from stockroom.domain.exceptions import DomainException
from stockroom.infrastructure.cli.context import CliContext, pass_context
from stockroom.infrastructure.cli.render import inventory_table, item_line


@click.command("list")
@pass_context
def inventory_list(ctx: CliContext) -> None:
    """List all items with their stock value."""
    inventory = ShowInventoryHandler(ctx.load()).handle()
    for line in inventory_table(inventory):
        click.echo(line)


@click.command("add")
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, help="Units to add (> 0).")
@click.option("--price", required=True, help="Unit price (e.g. 2.50).")
@pass_context
def inventory_add(ctx: CliContext, name: str, quantity: str, price: str) -> None:
    """Add a new item, or restock an existing one."""
    store = ctx.load()
    handler = AddItemHandler(store)

    try:
        result = handler.handle(name=name, quantity=quantity, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    ctx.save(store)
    item = result.item
    verb = "Restocked" if result.restocked else "Added"
    click.echo(f"{verb} '{item.name}': qty={item.quantity}, price={item.price}")


@click.command("remove")
@click.option("--name", required=True, help="Item name.")
@pass_context
def inventory_remove(ctx: CliContext, name: str) -> None:
    """Remove an item entirely."""
    store = ctx.load()

    try:
        item = RemoveItemHandler(store).handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    ctx.save(store)
    click.echo(f"Removed '{item.name}'")


@click.command("update")
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, help="New stock level (>= 0).")
@pass_context
def inventory_update(ctx: CliContext, name: str, quantity: str) -> None:
    """Set an item's stock level. 0 marks it out of stock."""
    store = ctx.load()

    try:
        item = UpdateQuantityHandler(store).handle(name=name, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    ctx.save(store)
    click.echo(f"'{item.name}' quantity set to {item.quantity}")


@click.command("search")
@click.option("--name", required=True, help="Item name (case-insensitive).")
@pass_context
def inventory_search(ctx: CliContext, name: str) -> None:
    """Show a single item."""
    item = SearchItemHandler(ctx.load()).handle(name)
    if item is None:
        click.echo(f"Not found: '{name}'")
        return
    click.echo(item_line(item))


@click.command("total")
@pass_context
def inventory_total(ctx: CliContext) -> None:
    """Show the total value of all stock."""
    total = TotalValueHandler(ctx.load()).handle()
    click.echo(f"Total inventory value: ${total}")
