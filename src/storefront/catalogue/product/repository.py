"""Repository for the Product aggregate."""

from storefront.catalogue.product.filters import FEATURED_LIMIT, ProductFilter
from storefront.catalogue.product.product import Product
from storefront.domain import storefront


@storefront.repository(part_of=Product)
class ProductRepository:
    """Product persistence plus the catalogue's listing queries."""

    def query(self, product_filter: ProductFilter | None = None) -> list[Product]:
        """Products matching every predicate of ``product_filter``, sorted and paginated."""
        product_filter = product_filter or ProductFilter()

        queryset = self._dao.query
        criteria = product_filter.criteria()
        if criteria is not None:
            queryset = queryset.filter(criteria)

        return (
            queryset.order_by(product_filter.ordering)
            .offset(product_filter.offset)
            .limit(product_filter.limit)
            .all()
            .items
        )

    def featured(self, limit: int = FEATURED_LIMIT) -> list[Product]:
        return self._dao.query.filter(featured=True).order_by("-created_at").limit(limit).all().items
