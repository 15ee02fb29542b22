"""FastAPI endpoints for the Catalogue: product listing and categories."""

from fastapi import APIRouter, Request
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.api.schemas import CategoryResponse, ProductResponse
from storefront.catalogue.category.management import list_categories
from storefront.catalogue.product.filters import ProductFilter
from storefront.catalogue.product.product import Product
from storefront.shared.errors import NotFound

product_router = APIRouter(prefix="/products", tags=["products"])
category_router = APIRouter(prefix="/categories", tags=["categories"])


# --- Product endpoints ---


@product_router.get("", response_model=list[ProductResponse])
async def list_products(request: Request) -> list[ProductResponse]:
    """Filter, sort and paginate the catalogue.

    Query parameters: categoryId, search, minPrice, maxPrice, brand, sortBy
    (name|price|rating|createdAt), sortOrder (asc|desc), limit, offset.
    """
    product_filter = ProductFilter.from_params(request.query_params)
    products = current_domain.repository_for(Product).query(product_filter)
    return [ProductResponse.from_product(product) for product in products]


@product_router.get("/featured", response_model=list[ProductResponse])
async def featured_products() -> list[ProductResponse]:
    products = current_domain.repository_for(Product).featured()
    return [ProductResponse.from_product(product) for product in products]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    try:
        product = current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise NotFound("Product not found") from None
    return ProductResponse.from_product(product)


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def get_categories() -> list[CategoryResponse]:
    return [CategoryResponse.from_category(category) for category in list_categories()]
