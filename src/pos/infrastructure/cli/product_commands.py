"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from pos.application.create_product import CreateProductHandler
from pos.application.delete_product import DeleteProductHandler
from pos.application.show_product import ListProductsHandler, ShowProductHandler
from pos.application.update_product import UpdateProductHandler
from pos.domain.exceptions import DomainException
from pos.domain.model.product import Product
from pos.infrastructure.cli.context import CliContext


def _display_product(product: Product) -> None:
    click.echo(f"Product #{product.id}")
    click.echo(f"Code:        {product.code}")
    click.echo(f"Description: {product.description}")
    click.echo(f"Price:       {product.price}")


@click.command("add")
@click.option("--code", required=True, help="Unique product code.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.pass_obj
def product_add(app: CliContext, code: str, description: str, price: str) -> None:
    """Add a new product to the catalog."""
    handler = CreateProductHandler(app.uow())

    try:
        product = handler.handle(code=code, description=description, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.code}' added at {product.price}")


@click.command("list")
@click.pass_obj
def product_list(app: CliContext) -> None:
    """List all products in the catalog."""
    try:
        products = ListProductsHandler(app.uow()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Code':<12} {'Description':<30} {'Price':>10}")
    click.echo("-" * 61)
    for p in products:
        click.echo(f"{p.id:<6} {p.code:<12} {p.description:<30} {str(p.price):>10}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(app: CliContext, product_id: int) -> None:
    """Show a single product."""
    try:
        product = ShowProductHandler(app.uow()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(product)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--code", default=None, help="New code (defaults to the current one).")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.pass_obj
def product_update(
    app: CliContext,
    product_id: int,
    code: str | None,
    description: str | None,
    price: str | None,
) -> None:
    """Edit a product. Options left out keep their current value."""
    try:
        current = ShowProductHandler(app.uow()).handle(product_id)
        product = UpdateProductHandler(app.uow()).handle(
            product_id=product_id,
            code=code if code is not None else current.code,
            description=description if description is not None else current.description,
            price=price if price is not None else current.price,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated")
    _display_product(product)


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(app: CliContext, product_id: int) -> None:
    """Remove a product from the catalog."""
    try:
        deleted = DeleteProductHandler(app.uow()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if deleted:
        click.echo(f"Product #{product_id} deleted.")
    else:
        click.echo(f"Product #{product_id} did not exist; nothing deleted.")
