"""
Catalog query engine.

Pure functions over an ordered sequence of products: filtering, sorting and
pagination, plus the derived reads the storefront pages use (featured, related,
best sellers, recommendations). Nothing here mutates the catalog.
"""
import logging
import math
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from schemas import Brand, Category, Pagination, Product, ProductFilters

logger = logging.getLogger(__name__)

FEATURED_COUNT = 6
RELATED_COUNT = 4
BEST_SELLER_COUNT = 10
RECOMMENDED_COUNT = 8
RECOMMENDED_MIN_RATING = 4.5
BRAND_PAGE_LIMIT = 24


class NotFound(Exception):
    """Raised when a product, category or brand lookup has no match."""

    def __init__(self, kind: str, key):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind.capitalize()} not found: {key}")


# sort key and direction per sortBy value; sorted() is stable so ties keep catalog order
_SORTS: Dict[str, Tuple[Callable[[Product], object], bool]] = {
    "popular": (lambda p: p.review_count, True),
    "newest": (lambda p: p.created_at, True),
    "price-low": (lambda p: p.price, False),
    "price-high": (lambda p: p.price, True),
    "rating": (lambda p: p.rating, True),
}


def paginate(items: Sequence, page: int, limit: int) -> Tuple[list, Pagination]:
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be positive")
    total = len(items)
    start = (page - 1) * limit
    meta = Pagination(page=page, limit=limit, total=total, total_pages=math.ceil(total / limit))
    return list(items[start:start + limit]), meta


def sort_products(products: Sequence[Product], sort_by: str = "popular") -> List[Product]:
    key, reverse = _SORTS.get(sort_by, _SORTS["popular"])
    return sorted(products, key=key, reverse=reverse)


def filter_products(catalog: Sequence[Product], filters: ProductFilters) -> List[Product]:
    """Apply every filter axis in a fixed order. AND across axes, OR within one."""
    items = list(catalog)

    if filters.category:
        items = [p for p in items if p.category == filters.category]
    if filters.categories:
        items = [p for p in items if p.category in filters.categories]
    if filters.brands:
        items = [p for p in items if p.brand in filters.brands]
    if filters.price_min is not None:
        items = [p for p in items if p.price >= filters.price_min]
    if filters.price_max is not None:
        items = [p for p in items if p.price <= filters.price_max]
    if filters.search:
        term = filters.search.lower()
        items = [p for p in items if term in p.name.lower() or term in p.brand.lower()]
    if filters.colors:
        items = [p for p in items if any(c in filters.colors for c in p.colors)]
    if filters.sizes:
        items = [p for p in items if any(s in filters.sizes for s in p.sizes)]

    return items


def query_products(
    catalog: Sequence[Product], filters: Optional[ProductFilters] = None
) -> Tuple[List[Product], Pagination]:
    filters = filters or ProductFilters()
    items = sort_products(filter_products(catalog, filters), filters.sort_by)
    page, meta = paginate(items, filters.page, filters.limit)
    logger.debug("query %s -> %d of %d", filters.model_dump(exclude_defaults=True), len(page), meta.total)
    return page, meta


def search_products(
    catalog: Sequence[Product], query: str, filters: Optional[ProductFilters] = None
) -> Tuple[List[Product], Pagination]:
    filters = (filters or ProductFilters()).model_copy(update={"search": query})
    return query_products(catalog, filters)


def find_product(catalog: Sequence[Product], product_id: int) -> Product:
    for p in catalog:
        if p.id == product_id:
            return p
    raise NotFound("product", product_id)


def find_category(categories: Sequence[Category], slug: str) -> Category:
    for c in categories:
        if c.slug == slug:
            return c
    raise NotFound("category", slug)


def find_brand(brands: Sequence[Brand], slug: str) -> Brand:
    for b in brands:
        if b.slug == slug:
            return b
    raise NotFound("brand", slug)


def featured_products(catalog: Sequence[Product], count: int = FEATURED_COUNT) -> List[Product]:
    return list(catalog[:count])


def related_products(catalog: Sequence[Product], product_id: int) -> List[Product]:
    current = find_product(catalog, product_id)
    related = [p for p in catalog if p.id != product_id and p.category == current.category]
    return related[:RELATED_COUNT]


def best_sellers(catalog: Sequence[Product]) -> List[Product]:
    return sorted(catalog, key=lambda p: p.sales_count, reverse=True)[:BEST_SELLER_COUNT]


def recommended_products(catalog: Sequence[Product], user_id: Optional[str] = None) -> List[Product]:
    """Top sellers; a known user only gets highly rated ones."""
    candidates = list(catalog)
    if user_id:
        candidates = [p for p in candidates if p.rating >= RECOMMENDED_MIN_RATING]
    return sorted(candidates, key=lambda p: p.sales_count, reverse=True)[:RECOMMENDED_COUNT]


def sale_products(catalog: Sequence[Product]) -> List[Product]:
    return [p for p in catalog if p.discount > 0]


def brand_products(
    catalog: Sequence[Product],
    brands: Sequence[Brand],
    slug: str,
    page: int = 1,
    limit: int = BRAND_PAGE_LIMIT,
) -> Tuple[Brand, List[Product], Pagination]:
    brand = find_brand(brands, slug)
    items, meta = query_products(catalog, ProductFilters(brands=[brand.name], page=page, limit=limit))
    return brand, items, meta
