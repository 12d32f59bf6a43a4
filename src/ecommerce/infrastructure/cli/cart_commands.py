"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from ecommerce.application.add_cart_item import AddCartItemHandler
from ecommerce.application.dto import CartItemSpec
from ecommerce.application.remove_cart_item import RemoveCartItemHandler
from ecommerce.application.show_cart import ShowCartHandler
from ecommerce.domain.exceptions import DomainException
from ecommerce.infrastructure.bootstrap import cart_service
from ecommerce.infrastructure.settings import Settings


@click.command("add")
@click.option("--product-id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price (e.g. 15.00).")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
@click.pass_obj
def cart_add(settings: Settings, product_id: str, name: str, price: str, quantity: int) -> None:
    """Add a product to the cart."""
    handler = AddCartItemHandler(cart_service=cart_service(settings))

    try:
        item = handler.handle(
            CartItemSpec(product_id=product_id, product_name=name, price=price, quantity=quantity)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {item.quantity} x '{item.product_name}' at {item.price}")


@click.command("remove")
@click.option("--product-id", required=True, help="Product ID to remove.")
@click.pass_obj
def cart_remove(settings: Settings, product_id: str) -> None:
    """Remove a product from the cart."""
    handler = RemoveCartItemHandler(cart_service=cart_service(settings))

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Removed product '{product_id}' from the cart.")


@click.command("show")
@click.pass_obj
def cart_show(settings: Settings) -> None:
    """Show the cart contents and total."""
    dto = ShowCartHandler(cart_service=cart_service(settings)).handle()

    if dto.is_empty:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'ID':<8} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*56}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<8} {item.product_name:<20} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*56}")
    click.echo(f"  {'Cart Total':<36} {dto.total:>20}")


@click.command("clear")
@click.pass_obj
def cart_clear(settings: Settings) -> None:
    """Remove everything from the cart."""
    cart_service(settings).clear()
    click.echo("Cart cleared.")
