"""Storefront domain startup.

``Domain.init()`` auto-discovers only the modules beside ``domain.py`` and one
directory below it. Aggregates, commands, handlers and repositories that live
deeper (``catalogue/product/``, ``ordering/order/``, ...) are imported here
so that every element is registered before the domain initializes.
"""

import importlib

from storefront.domain import storefront

ELEMENT_MODULES = (
    # Catalogue
    "storefront.catalogue.product.events",
    "storefront.catalogue.product.product",
    "storefront.catalogue.product.repository",
    "storefront.catalogue.product.creation",
    "storefront.catalogue.product.repricing",
    "storefront.catalogue.category.category",
    "storefront.catalogue.category.management",
    # Cart
    "storefront.cart.events",
    "storefront.cart.cart",
    "storefront.cart.repository",
    "storefront.cart.items",
    # Identity
    "storefront.identity.user.events",
    "storefront.identity.user.user",
    "storefront.identity.user.repository",
    "storefront.identity.registration",
    # Ordering
    "storefront.ordering.order.events",
    "storefront.ordering.order.order",
    "storefront.ordering.order.repository",
    "storefront.ordering.order.placement",
)

_initialized = False


def load_elements() -> None:
    """Import every module that registers a domain element."""
    for module in ELEMENT_MODULES:
        importlib.import_module(module)


def init_storefront():
    """Register all elements and initialize the domain once per process."""
    global _initialized

    if not _initialized:
        load_elements()
        storefront.init()
        _initialized = True
    return storefront
