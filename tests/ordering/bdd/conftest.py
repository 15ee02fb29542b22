"""Shared BDD fixtures and step definitions for checkout."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then, when
from storefront.cart.items import AddToCart
from storefront.cart.listing import cart_lines
from storefront.catalogue.product.repricing import ChangeProductPrice
from storefront.ordering.order.order import Order
from storefront.ordering.order.placement import place_order
from storefront.shared.errors import EmptyCartError
from storefront.shared.locking import process_for_user


@pytest.fixture()
def shopper():
    return "shopper-001"


@pytest.fixture()
def products():
    return {}


@pytest.fixture()
def checkout():
    """Outcome of the last checkout attempt."""
    return {"order": None, "error": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the catalogue has a product "{name}" priced at {price:f}'))
def catalogue_product(make_product, products, name, price):
    products[name] = make_product(name, price=price)


@given(parsers.cfparse('the shopper has {quantity:d} of "{name}" in the cart'))
def filled_cart(shopper, products, quantity, name):
    process_for_user(shopper, AddToCart(user_id=shopper, product_id=products[name].id, quantity=quantity))


@given("the shopper has placed an order")
@when("the shopper places an order")
def places_order(shopper, checkout):
    try:
        checkout["order"] = place_order(shopper, "123 Main St, Springfield")
    except EmptyCartError as exc:
        checkout["error"] = exc


@when(parsers.cfparse('the price of "{name}" changes to {price:f}'))
def price_changes(products, name, price):
    current_domain.process(ChangeProductPrice(product_id=products[name].id, price=price), asynchronous=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('an order is created with status "{status}"'))
def order_created(checkout, status):
    assert checkout["error"] is None
    assert checkout["order"].status == status


@then(parsers.cfparse('the order {part} is "{amount}"'))
def order_amount(checkout, part, amount):
    assert getattr(checkout["order"], part) == amount


@then("the cart is empty")
def cart_is_empty(shopper):
    assert cart_lines(shopper) == []


@then("the checkout is refused because the cart is empty")
def checkout_refused(checkout):
    assert isinstance(checkout["error"], EmptyCartError)
    assert checkout["order"] is None


@then("no order exists")
def no_order():
    assert current_domain.repository_for(Order)._dao.query.all().items == []


@then(parsers.cfparse('the order line for "{name}" is priced at "{price}"'))
def order_line_price(checkout, products, name, price):
    order = current_domain.repository_for(Order).get(checkout["order"].id)
    item = next(i for i in order.items if str(i.product_id) == str(products[name].id))
    assert item.price == price
