"""CLI command for checking out the cart."""

from __future__ import annotations

import click

from ecommerce.application.check_out import CheckoutHandler
from ecommerce.domain.exceptions import DomainException
from ecommerce.domain.model.address import AddressInfo
from ecommerce.domain.model.card import Card
from ecommerce.domain.model.checkout import CheckoutResult
from ecommerce.infrastructure.bootstrap import (
    cart_service,
    discount_service,
    payment_service,
    shipment_service,
)
from ecommerce.infrastructure.settings import Settings


def _parse_expiry(raw: str) -> tuple[int, int]:
    """Parse 'MM/YYYY' (or 'MM/YY') into (month, year)."""
    if "/" not in raw:
        raise click.BadParameter(
            f"Invalid expiry '{raw}'. Expected 'MM/YYYY'.", param_hint="--expiry"
        )
    month_str, year_str = raw.split("/", 1)
    try:
        month, year = int(month_str), int(year_str)
    except ValueError:
        raise click.BadParameter(
            f"Invalid expiry '{raw}'. Expected 'MM/YYYY'.", param_hint="--expiry"
        )
    if len(year_str.strip()) == 2:
        year += 2000
    return month, year


@click.command("checkout")
@click.option("--holder", required=True, help="Name on the card.")
@click.option("--card-number", required=True, help="Card number, digits only.")
@click.option("--expiry", required=True, help="Card expiry as 'MM/YYYY'.")
@click.option("--recipient", required=True, help="Who receives the shipment.")
@click.option("--street", required=True)
@click.option("--city", required=True)
@click.option("--postal-code", required=True)
@click.option("--country", required=True)
@click.pass_obj
def checkout(
    settings: Settings,
    holder: str,
    card_number: str,
    expiry: str,
    recipient: str,
    street: str,
    city: str,
    postal_code: str,
    country: str,
) -> None:
    """Charge the cart total (less discount) and ship it if the card is accepted."""
    month, year = _parse_expiry(expiry)
    cart = cart_service(settings)

    try:
        card = Card(holder=holder, number=card_number, expiry_month=month, expiry_year=year)
        address = AddressInfo(
            recipient=recipient,
            street=street,
            city=city,
            postal_code=postal_code,
            country=country,
        )
        handler = CheckoutHandler(
            cart_service=cart,
            payment_service=payment_service(settings),
            shipment_service=shipment_service(settings),
            discount_service=discount_service(settings),
        )
        result = handler.handle(card, address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if result == CheckoutResult.CHARGED.value:
        cart.clear()
    click.echo(result)
