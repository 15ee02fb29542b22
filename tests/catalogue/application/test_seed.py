"""Tests for the sample-data seed command."""

from protean import current_domain
from storefront.catalogue.category.management import list_categories
from storefront.catalogue.product.product import Product
from storefront.domain import storefront

import manage


class TestSeed:
    def test_seed_loads_categories_and_products(self):
        created = manage.seed(domain=storefront)

        assert created == len(manage.SAMPLE_PRODUCTS)
        assert len(list_categories()) == len(manage.SAMPLE_CATEGORIES)

        featured = current_domain.repository_for(Product).featured()
        assert {p.name for p in featured} == {p["name"] for p in manage.SAMPLE_PRODUCTS if p.get("featured")}

    def test_seed_is_skipped_when_already_seeded(self):
        manage.seed(domain=storefront)

        assert manage.seed(domain=storefront) == 0
        assert len(current_domain.repository_for(Product)._dao.query.all().items) == len(manage.SAMPLE_PRODUCTS)
