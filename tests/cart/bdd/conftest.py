"""Shared BDD fixtures and step definitions for the cart."""

import pytest
from pytest_bdd import given, parsers, then, when
from storefront.cart.items import AddToCart, ClearCart, UpdateCartItemQuantity
from storefront.cart.listing import cart_lines
from storefront.shared.locking import process_for_user


@pytest.fixture()
def shopper():
    return "shopper-001"


@pytest.fixture()
def products():
    """Products created by the scenario, keyed by name."""
    return {}


def _line_for(shopper, product):
    return next(line for line in cart_lines(shopper) if str(line.product.id) == str(product.id))


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" priced at {price:f}'))
def a_product(make_product, products, name, price):
    products[name] = make_product(name, price=price)


@given(parsers.cfparse('the shopper has {quantity:d} of "{name}" in the cart'))
@when(parsers.cfparse('the shopper adds {quantity:d} of "{name}" to the cart'))
def add_to_cart(shopper, products, quantity, name):
    command = AddToCart(user_id=shopper, product_id=products[name].id, quantity=quantity)
    process_for_user(shopper, command)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the shopper sets the quantity of "{name}" to {quantity:d}'))
def set_quantity(shopper, products, name, quantity):
    line = _line_for(shopper, products[name])
    process_for_user(
        shopper,
        UpdateCartItemQuantity(user_id=shopper, item_id=line.item.id, quantity=quantity),
    )


@when("the shopper clears the cart")
def clear_cart(shopper):
    process_for_user(shopper, ClearCart(user_id=shopper))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart has {count:d} line"))
@then(parsers.cfparse("the cart has {count:d} lines"))
def cart_has_lines(shopper, count):
    assert len(cart_lines(shopper)) == count


@then(parsers.cfparse('the line for "{name}" has quantity {quantity:d}'))
def line_quantity(shopper, products, name, quantity):
    assert _line_for(shopper, products[name]).item.quantity == quantity
