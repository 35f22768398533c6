"""Interactive numbered menu.

Changes are kept in memory until "Save & exit"; "Exit without saving"
(or end of input) discards them.
"""

from __future__ import annotations

import click

from stockroom.application.add_item import AddItemHandler
from stockroom.application.load_inventory import LoadInventoryHandler
from stockroom.application.remove_item import RemoveItemHandler
from stockroom.application.save_inventory import SaveInventoryHandler
from stockroom.application.search_item import SearchItemHandler
from stockroom.application.show_inventory import ShowInventoryHandler, TotalValueHandler
from stockroom.application.update_quantity import UpdateQuantityHandler
from stockroom.domain.exceptions import DomainException
from stockroom.domain.model.store import InventoryStore
from stockroom.infrastructure.cli.context import CliContext, pass_context
from stockroom.infrastructure.cli.render import inventory_table, item_line

MENU = """\
  1. List all items
  2. Add / restock item
  3. Remove item
  4. Update quantity
  5. Search item
  6. Show total inventory value
  7. Save & exit
  8. Exit without saving"""


def _ask(label: str) -> str:
    return click.prompt(label, default="", show_default=False, prompt_suffix=" ").strip()


def _list(store: InventoryStore) -> None:
    for line in inventory_table(ShowInventoryHandler(store).handle()):
        click.echo(f"  {line}")


def _add(store: InventoryStore) -> None:
    name = _ask("  Item name  :")
    if not name:
        click.echo("Cancelled.")
        return
    quantity = _ask("  Quantity   :")
    price = _ask("  Price ($)  :")
    result = AddItemHandler(store).handle(name=name, quantity=quantity, price=price)
    item = result.item
    verb = "Restocked" if result.restocked else "Added"
    click.echo(f"[OK] {verb} '{item.name}': qty={item.quantity}, price={item.price}")


def _remove(store: InventoryStore) -> None:
    name = _ask("  Item name to remove:")
    if not name:
        click.echo("Cancelled.")
        return
    item = RemoveItemHandler(store).handle(name)
    click.echo(f"[OK] Removed '{item.name}'.")


def _update(store: InventoryStore) -> None:
    name = _ask("  Item name    :")
    if not name:
        click.echo("Cancelled.")
        return
    quantity = _ask("  New quantity :")
    item = UpdateQuantityHandler(store).handle(name=name, quantity=quantity)
    click.echo(f"[OK] '{item.name}' quantity -> {item.quantity}")


def _search(store: InventoryStore) -> None:
    name = _ask("  Search name:")
    if not name:
        click.echo("Cancelled.")
        return
    item = SearchItemHandler(store).handle(name)
    if item is None:
        click.echo(f"  Not found: '{name}'")
    else:
        click.echo(f"  {item_line(item)}")


def _total(store: InventoryStore) -> None:
    click.echo(f"  Total inventory value: ${TotalValueHandler(store).handle()}")


ACTIONS = {
    "1": _list,
    "2": _add,
    "3": _remove,
    "4": _update,
    "5": _search,
    "6": _total,
}


def run_menu(ctx: CliContext) -> None:
    handler = LoadInventoryHandler(ctx.repository, source=ctx.source)
    try:
        store, report = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Loaded {report.loaded} item(s) from '{report.source}'.")
    if report.warnings:
        click.echo(f"{len(report.warnings)} line(s) skipped:", err=True)
        for warning in report.warnings:
            click.echo(f"  {warning}", err=True)

    while True:
        click.echo(MENU)
        try:
            choice = _ask("Choice:")
        except click.Abort:
            click.echo()
            break

        action = ACTIONS.get(choice)
        if action is not None:
            try:
                action(store)
            except click.Abort:
                click.echo()
                break
            except DomainException as exc:
                click.echo(f"[ERROR] {exc}", err=True)
        elif choice == "7":
            try:
                written = SaveInventoryHandler(ctx.repository).handle(store)
            except DomainException as exc:
                click.echo(f"[ERROR] {exc}", err=True)
                continue
            click.echo(f"{written} item(s) saved to '{ctx.source}'.")
            return
        elif choice == "8":
            click.echo("Exiting without saving.")
            return
        else:
            click.echo(f"Unknown option '{choice}'. Try 1-8.")

    click.echo("Input closed; exiting without saving.")


@click.command("menu")
@pass_context
def inventory_menu(ctx: CliContext) -> None:
    """Interactive menu; nothing is written until 'Save & exit'."""
    run_menu(ctx)
