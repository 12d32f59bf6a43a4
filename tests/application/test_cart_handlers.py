"""Tests for the cart use cases (add, remove, show)."""

import pytest

from ecommerce.application.add_cart_item import AddCartItemHandler
from ecommerce.application.dto import CartItemSpec
from ecommerce.application.remove_cart_item import RemoveCartItemHandler
from ecommerce.application.show_cart import ShowCartHandler
from ecommerce.domain.exceptions import EntityNotFoundError, ValidationError
from tests.fakes import FakeCartService


class TestAddCartItem:

    def test_adds_item(self):
        cart = FakeCartService()
        item = AddCartItemHandler(cart).handle(CartItemSpec("1", "Widget", "15.00", 2))

        assert cart.items() == [item]
        assert str(item.line_total) == "$30.00"

    def test_strips_whitespace(self):
        cart = FakeCartService()
        item = AddCartItemHandler(cart).handle(CartItemSpec(" 1 ", " Widget ", "15"))
        assert item.product_id == "1"
        assert item.product_name == "Widget"

    def test_same_product_merges_quantity(self):
        cart = FakeCartService()
        handler = AddCartItemHandler(cart)
        handler.handle(CartItemSpec("1", "Widget", "15.00", 2))
        handler.handle(CartItemSpec("1", "Widget", "15.00", 3))

        assert len(cart.items()) == 1
        assert cart.items()[0].quantity.value == 5

    def test_invalid_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            AddCartItemHandler(FakeCartService()).handle(CartItemSpec("1", "Widget", "abc"))

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            AddCartItemHandler(FakeCartService()).handle(CartItemSpec("1", "Widget", "1", 0))


class TestRemoveCartItem:

    def test_removes_item(self):
        cart = FakeCartService()
        AddCartItemHandler(cart).handle(CartItemSpec("1", "Widget", "15.00"))
        RemoveCartItemHandler(cart).handle("1")
        assert cart.items() == []

    def test_missing_item_rejected(self):
        with pytest.raises(EntityNotFoundError, match="not in the cart"):
            RemoveCartItemHandler(FakeCartService()).handle("42")


class TestShowCart:

    def test_empty_cart(self):
        dto = ShowCartHandler(FakeCartService()).handle()
        assert dto.is_empty
        assert dto.total == "$0.00"

    def test_lists_items_and_total(self):
        cart = FakeCartService()
        add = AddCartItemHandler(cart)
        add.handle(CartItemSpec("1", "Widget", "15.00", 3))
        add.handle(CartItemSpec("2", "Gadget", "25.00", 1))

        dto = ShowCartHandler(cart).handle()

        assert [i.product_name for i in dto.items] == ["Widget", "Gadget"]
        assert dto.items[0].unit_price == "$15.00"
        assert dto.items[0].line_total == "$45.00"
        assert dto.total == "$70.00"
