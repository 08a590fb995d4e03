import click

from pos.infrastructure.cli.context import CliContext
from pos.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from pos.infrastructure.cli.register_commands import register
from pos.infrastructure.cli.sale_commands import sale_checkout, sale_list, sale_show
from pos.infrastructure.logging_config import configure_logging
from pos.infrastructure.settings import get_settings


@click.group()
@click.option("--database-url", default=None, help="SQLAlchemy URL (overrides POS_DATABASE_URL).")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log at INFO level.")
@click.pass_context
def cli(ctx: click.Context, database_url: str | None, verbose: bool) -> None:
    """POS: product catalog, cart and sales ledger"""
    settings = get_settings()
    if database_url:
        settings = settings.model_copy(update={"database_url": database_url})

    configure_logging("INFO" if verbose else settings.log_level)

    app = CliContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)


@cli.command("init")
@click.pass_obj
def init(app: CliContext) -> None:
    """Create the database schema if it does not exist."""
    store = app.store
    click.echo(f"Store ready at {store.url.render_as_string(hide_password=True)}")


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def sale() -> None:
    """Check out and review sales."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
sale.add_command(sale_checkout)
sale.add_command(sale_list)
sale.add_command(sale_show)
cli.add_command(register)
