import click

from ecommerce.domain.exceptions import DomainException
from ecommerce.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
)
from ecommerce.infrastructure.cli.checkout_commands import checkout
from ecommerce.infrastructure.settings import configure_logging, load_settings


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log at DEBUG level.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Shopping cart and checkout."""
    try:
        settings = load_settings()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_clear)
cli.add_command(checkout)
