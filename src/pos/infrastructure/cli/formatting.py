"""Shared text layout for sales, carts and errors in the terminal."""

from __future__ import annotations

import click

from pos.domain.model.cart import Cart
from pos.domain.model.sale import Sale, SaleDetail


def format_date(sale: Sale) -> str:
    return sale.date.strftime("%Y-%m-%d %H:%M UTC")


def display_sale(detail: SaleDetail) -> None:
    sale = detail.sale
    click.echo(f"Sale #{sale.id}  {sale.code}")
    click.echo(f"Date: {format_date(sale)}")
    click.echo()
    click.echo(f"  {'Code':<10} {'Description':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*63}")
    for line in detail.lines:
        item = line.item
        click.echo(
            f"  {line.product.code:<10} {line.product.description:<24} "
            f"{item.quantity.value:>5} {str(item.price):>10} {str(item.line_total):>10}"
        )
    click.echo(f"  {'-'*63}")
    click.echo(f"  {'Sale Total':<41} {str(sale.total):>22}")


def display_cart(cart: Cart) -> None:
    if cart.is_empty:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Code':<10} {'Description':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*63}")
    for line in cart.lines:
        click.echo(
            f"  {line.product.code:<10} {line.product.description:<24} "
            f"{line.quantity:>5} {str(line.product.price):>10} {str(line.line_total):>10}"
        )
    click.echo(f"  {'-'*63}")
    click.echo(f"  {'Cart Total':<41} {str(cart.total):>22}")
