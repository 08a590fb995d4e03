"""CLI commands for checkout and sale history."""

from __future__ import annotations

import click

from pos.application.checkout import CheckoutHandler
from pos.application.dto import CartItemSpec
from pos.application.fill_cart import FillCartHandler
from pos.application.show_sale import ListSalesHandler, ShowSaleHandler
from pos.domain.exceptions import DomainException, StorageError
from pos.infrastructure.bootstrap import new_cart
from pos.infrastructure.cli.context import CliContext
from pos.infrastructure.cli.formatting import display_sale, format_date


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'A1:3,B2:1' into CartItemSpec list. A bare code means one unit."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            specs.append(CartItemSpec(product_code=pair))
            continue
        code, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{code}'."
            )
        specs.append(CartItemSpec(product_code=code.strip(), quantity=qty))
    return specs


@click.command("checkout")
@click.option("--items", required=True, help="Items as 'Code:Qty,Code:Qty'.")
@click.pass_obj
def sale_checkout(app: CliContext, items: str) -> None:
    """Fill a cart with the given items and check it out."""
    specs = _parse_items(items)
    cart = new_cart()

    try:
        FillCartHandler(app.uow()).handle(cart, specs)
        sale = CheckoutHandler(app.uow()).handle(cart.lines)
        detail = ShowSaleHandler(app.uow()).handle(sale.id)  # type: ignore[arg-type]
    except StorageError as exc:
        hint = f" (check 'pos sale show --code {exc.sale_code}' before retrying)" if exc.sale_code else ""
        raise click.ClickException(f"{exc}{hint}")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    cart.clear()
    display_sale(detail)


@click.command("list")
@click.pass_obj
def sale_list(app: CliContext) -> None:
    """List all sales, most recent first."""
    try:
        sales = ListSalesHandler(app.uow()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not sales:
        click.echo("No sales recorded.")
        return

    click.echo(f"{'ID':<6} {'Code':<20} {'Date':<22} {'Total':>12}")
    click.echo("-" * 63)
    for s in sales:
        click.echo(f"{s.id:<6} {s.code:<20} {format_date(s):<22} {str(s.total):>12}")


@click.command("show")
@click.option("--id", "sale_id", type=int, default=None, help="Sale ID to display.")
@click.option("--code", "sale_code", default=None, help="Sale code to display.")
@click.pass_obj
def sale_show(app: CliContext, sale_id: int | None, sale_code: str | None) -> None:
    """Show a sale with its items."""
    if (sale_id is None) == (sale_code is None):
        raise click.UsageError("Give exactly one of --id or --code.")

    handler = ShowSaleHandler(app.uow())
    try:
        detail = handler.handle(sale_id) if sale_id is not None else handler.handle_code(sale_code)  # type: ignore[arg-type]
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_sale(detail)
