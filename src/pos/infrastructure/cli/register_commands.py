"""Interactive register session.

The session owns one Cart for as long as the process runs.  Lines are
addressed by product code; the cart is cleared after a successful
checkout and left untouched after a failed one.
"""

from __future__ import annotations

import click

from pos.application.checkout import CheckoutHandler
from pos.application.dto import CartItemSpec
from pos.application.fill_cart import FillCartHandler
from pos.application.show_sale import ShowSaleHandler
from pos.domain.exceptions import DomainException, StorageError
from pos.domain.model.cart import Cart, CartLine
from pos.infrastructure.bootstrap import new_cart
from pos.infrastructure.cli.context import CliContext
from pos.infrastructure.cli.formatting import display_cart, display_sale

HELP_TEXT = """\
Commands:
  add CODE [QTY]   add units of a product (default 1)
  remove CODE      drop a line
  set CODE QTY     change a line's quantity (0 removes it)
  show             print the cart
  clear            empty the cart
  checkout         record the sale
  help             this text
  quit             leave the register"""


class RegisterSession:

    def __init__(self, app: CliContext, cart: Cart) -> None:
        self._app = app
        self.cart = cart

    def run_command(self, line: str) -> bool:
        """Execute one command line. Returns False when the session should end."""
        parts = line.split()
        if not parts:
            return True
        command, args = parts[0].lower(), parts[1:]

        if command in ("quit", "exit"):
            return False

        try:
            if command == "add":
                self._add(args)
            elif command == "remove":
                self._remove(args)
            elif command == "set":
                self._set(args)
            elif command == "show":
                display_cart(self.cart)
            elif command == "clear":
                self.cart.clear()
                click.echo("Cart cleared.")
            elif command == "checkout":
                self._checkout()
            elif command == "help":
                click.echo(HELP_TEXT)
            else:
                click.echo(f"Unknown command '{command}'. Type 'help'.", err=True)
        except StorageError as exc:
            click.echo(f"Error: {exc}", err=True)
            if exc.sale_code:
                click.echo(f"Check sale {exc.sale_code} before retrying.", err=True)
        except DomainException as exc:
            click.echo(f"Error: {exc}", err=True)
        except click.UsageError as exc:
            click.echo(f"Usage: {exc.message}", err=True)
        return True

    # --- Commands -------------------------------------------------------------

    def _add(self, args: list[str]) -> None:
        if len(args) not in (1, 2):
            raise click.UsageError("add CODE [QTY]")
        quantity = self._parse_quantity(args[1]) if len(args) == 2 else 1
        FillCartHandler(self._app.uow()).handle(
            self.cart, [CartItemSpec(product_code=args[0], quantity=quantity)]
        )
        click.echo(f"Added {quantity} x {args[0]}. Total {self.cart.total}")

    def _remove(self, args: list[str]) -> None:
        if len(args) != 1:
            raise click.UsageError("remove CODE")
        line = self._find_line(args[0])
        if line is None:
            click.echo(f"{args[0]} is not in the cart.", err=True)
            return
        self.cart.remove_item(line.product_id)
        click.echo(f"Removed {args[0]}. Total {self.cart.total}")

    def _set(self, args: list[str]) -> None:
        if len(args) != 2:
            raise click.UsageError("set CODE QTY")
        quantity = self._parse_quantity(args[1], allow_zero=True)
        line = self._find_line(args[0])
        if line is None:
            click.echo(f"{args[0]} is not in the cart.", err=True)
            return
        self.cart.set_quantity(line.product_id, quantity)
        click.echo(f"Set {args[0]} to {quantity}. Total {self.cart.total}")

    def _checkout(self) -> None:
        sale = CheckoutHandler(self._app.uow()).handle(self.cart.lines)
        self.cart.clear()
        detail = ShowSaleHandler(self._app.uow()).handle(sale.id)  # type: ignore[arg-type]
        display_sale(detail)

    # --- Helpers --------------------------------------------------------------

    def _find_line(self, code: str) -> CartLine | None:
        for line in self.cart.lines:
            if line.product.code == code:
                return line
        return None

    @staticmethod
    def _parse_quantity(raw: str, allow_zero: bool = False) -> int:
        try:
            quantity = int(raw)
        except ValueError:
            raise click.UsageError(f"Invalid quantity '{raw}'")
        if quantity < 0 or (quantity == 0 and not allow_zero):
            raise click.UsageError(f"Invalid quantity '{raw}'")
        return quantity


@click.command("register")
@click.pass_obj
def register(app: CliContext) -> None:
    """Start an interactive register session."""
    app.ensure_open()
    session = RegisterSession(app, new_cart())
    click.echo("Register open. Type 'help' for commands.")

    while True:
        try:
            line = click.prompt("pos", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            break
        if not session.run_command(line):
            break

    if not session.cart.is_empty:
        click.echo(f"Register closed with {len(session.cart)} unsold line(s) discarded.")
    else:
        click.echo("Register closed.")
