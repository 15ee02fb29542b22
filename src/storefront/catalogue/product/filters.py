"""Product filter: an explicit set of predicates compiled to protean criteria.

Every supplied predicate must hold (conjunction). Absent predicates impose no
constraint, so an empty filter returns the whole catalogue, newest first.
"""

import math
import operator
from dataclasses import dataclass
from functools import reduce

from protean.utils.query import Q

DEFAULT_LIMIT = 12
FEATURED_LIMIT = 8

# Wire sort keys to Product fields
SORT_FIELDS = {
    "name": "name",
    "price": "price",
    "rating": "rating",
    "createdAt": "created_at",
    "created_at": "created_at",
    "created": "created_at",
}


def _parse_float(value):
    if value is None or value == "":
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    # nan never compares true and inf bounds nothing
    return parsed if math.isfinite(parsed) else None


def _parse_int(value, default):
    if value is None or value == "":
        return default
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed


def _clean(value):
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass(frozen=True)
class ProductFilter:
    category_id: str | None = None
    search: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    # Single brand only; multi-brand selection is not supported
    brand: str | None = None
    sort_by: str | None = None
    sort_order: str | None = None
    limit: int = DEFAULT_LIMIT
    offset: int = 0

    @classmethod
    def from_params(cls, params) -> "ProductFilter":
        """Build a filter from raw query-string values.

        Unparseable numbers are dropped instead of rejected, mirroring how an
        absent parameter is treated.
        """
        limit = _parse_int(params.get("limit"), DEFAULT_LIMIT)
        offset = _parse_int(params.get("offset"), 0)

        return cls(
            category_id=_clean(params.get("categoryId")),
            search=_clean(params.get("search")),
            min_price=_parse_float(params.get("minPrice")),
            max_price=_parse_float(params.get("maxPrice")),
            brand=_clean(params.get("brand")),
            sort_by=_clean(params.get("sortBy")),
            sort_order=_clean(params.get("sortOrder")),
            limit=limit if limit > 0 else DEFAULT_LIMIT,
            offset=offset if offset > 0 else 0,
        )

    def predicates(self) -> list[Q]:
        predicates = []

        if self.category_id is not None:
            predicates.append(Q(category_id=self.category_id))

        if self.search:
            predicates.append(Q(name__icontains=self.search) | Q(description__icontains=self.search))

        if self.min_price is not None:
            predicates.append(Q(price__gte=self.min_price))

        if self.max_price is not None:
            predicates.append(Q(price__lte=self.max_price))

        if self.brand is not None:
            predicates.append(Q(brand=self.brand))

        return predicates

    def criteria(self) -> Q | None:
        """All predicates AND-ed together, or ``None`` when there are none."""
        predicates = self.predicates()
        if not predicates:
            return None
        return reduce(operator.and_, predicates)

    @property
    def ordering(self) -> str:
        field = SORT_FIELDS.get(self.sort_by) if self.sort_by else None
        if field is None:
            return "-created_at"

        if (self.sort_order or "").lower() == "desc":
            return f"-{field}"
        return field
