import math

import pytest

import catalog
from catalog import NotFound
from fixtures import BRANDS, CATEGORIES
from schemas import Product, ProductFilters


def ids(items):
    return [p.id for p in items]


def test_price_low_first_page(products):
    page, meta = catalog.query_products(products, ProductFilters(sort_by="price-low", limit=5, page=1))
    assert ids(page) == [2, 15, 18, 1, 5]
    assert [p.price for p in page] == sorted(p.price for p in page)
    assert meta.total == 20
    assert meta.total_pages == 4


def test_category_defaults_to_popular_order(products):
    page, meta = catalog.query_products(products, ProductFilters(category="tops"))
    assert sorted(ids(page)) == [1, 2, 3, 19]
    assert ids(page) == [2, 1, 3, 19]
    assert meta.total == 4


def test_category_and_categories_are_anded(products):
    page, _ = catalog.query_products(products, ProductFilters(category="tops", categories=["tops", "bottoms"]))
    assert sorted(ids(page)) == [1, 2, 3, 19]

    page, meta = catalog.query_products(products, ProductFilters(category="tops", categories=["shoes"]))
    assert page == []
    assert meta.total == 0
    assert meta.total_pages == 0


def test_categories_are_ored(products):
    page, meta = catalog.query_products(products, ProductFilters(categories=["shoes", "bags"], limit=20))
    assert sorted(ids(page)) == [10, 11, 12, 13, 14, 15]
    assert meta.total == 6


@pytest.mark.parametrize(
    "brands,lo,hi,search",
    [
        (["Musinsa Standard", "Nike"], None, None, None),
        (None, 40000, 100000, None),
        (["Uniqlo", "Adidas", "COS"], 20000, 60000, None),
        (None, None, 50000, "a"),
        (None, None, None, "PANTS"),
        (["Levi's"], 0, 89000, "denim"),
    ],
)
def test_filter_composition(products, brands, lo, hi, search):
    filters = ProductFilters(brands=brands, price_min=lo, price_max=hi, search=search, limit=50)
    page, _ = catalog.query_products(products, filters)

    def matches(p):
        if brands and p.brand not in brands:
            return False
        if lo is not None and p.price < lo:
            return False
        if hi is not None and p.price > hi:
            return False
        if search and search.lower() not in p.name.lower() and search.lower() not in p.brand.lower():
            return False
        return True

    assert sorted(ids(page)) == sorted(p.id for p in products if matches(p))


def test_search_is_case_insensitive_on_name_and_brand(products):
    page, _ = catalog.query_products(products, ProductFilters(search="nIkE"))
    assert ids(page) == [11]

    page, _ = catalog.query_products(products, ProductFilters(search="PANTS"))
    assert sorted(ids(page)) == [4, 6, 20]


def test_price_bounds_are_inclusive(products):
    page, _ = catalog.query_products(products, ProductFilters(price_min=45000, price_max=45000))
    assert sorted(ids(page)) == [5, 13]


def test_color_and_size_filters(products):
    page, _ = catalog.query_products(products, ProductFilters(colors=["Silver"]))
    assert ids(page) == [16]

    page, meta = catalog.query_products(products, ProductFilters(sizes=["One Size"]))
    assert meta.total == 6
    assert all("One Size" in p.sizes for p in page)


@pytest.mark.parametrize("limit", [1, 3, 5, 7, 12, 20, 25])
def test_pages_reconstruct_the_sorted_collection(products, limit):
    full, _ = catalog.query_products(products, ProductFilters(sort_by="rating", limit=100))
    _, meta = catalog.query_products(products, ProductFilters(sort_by="rating", limit=limit))
    assert meta.total_pages == math.ceil(meta.total / limit)

    joined = []
    for page_no in range(1, meta.total_pages + 1):
        page, _ = catalog.query_products(products, ProductFilters(sort_by="rating", limit=limit, page=page_no))
        joined.extend(page)
    assert ids(joined) == ids(full)


def test_price_sorts_are_reversed(products):
    low, _ = catalog.query_products(products, ProductFilters(sort_by="price-low", limit=20))
    high, _ = catalog.query_products(products, ProductFilters(sort_by="price-high", limit=20))
    assert [p.price for p in low] == list(reversed([p.price for p in high]))


def test_newest_orders_by_creation_time(products):
    page, _ = catalog.query_products(products, ProductFilters(sort_by="newest", limit=20))
    stamps = [p.created_at for p in page]
    assert stamps == sorted(stamps, reverse=True)
    # same creation date keeps catalog order
    assert ids(page)[:2] == [6, 19]


def test_newest_accepts_timestamps_without_offset(products):
    late = products[0].model_dump(by_alias=True)
    late.update(id=99, createdAt="2030-02-01T00:00:00", updatedAt="2030-02-01T09:00:00+09:00")
    product = Product.model_validate(late)
    assert product.created_at.tzinfo is not None

    page, _ = catalog.query_products([*products, product], ProductFilters(sort_by="newest", limit=30))
    assert ids(page)[:3] == [99, 6, 19]


def test_page_beyond_end_is_empty(products):
    page, meta = catalog.query_products(products, ProductFilters(page=3, limit=12))
    assert page == []
    assert meta.page == 3
    assert meta.total == 20
    assert meta.total_pages == 2


def test_empty_catalog():
    page, meta = catalog.query_products([], ProductFilters())
    assert page == []
    assert meta.total == 0
    assert meta.total_pages == 0


def test_non_positive_limit_is_rejected():
    with pytest.raises(ValueError):
        ProductFilters(limit=0)
    with pytest.raises(ValueError):
        catalog.paginate([1, 2, 3], page=1, limit=-1)


def test_search_products_overrides_search_filter(products):
    page, meta = catalog.search_products(products, "bag", ProductFilters(search="ignored"))
    assert sorted(ids(page)) == [13, 15]
    assert meta.total == 2


def test_featured_products(products):
    assert ids(catalog.featured_products(products)) == [1, 2, 3, 4, 5, 6]


def test_related_products(products):
    assert ids(catalog.related_products(products, 1)) == [2, 3, 19]
    assert ids(catalog.related_products(products, 4)) == [5, 6, 20]

    with pytest.raises(NotFound):
        catalog.related_products(products, 999)


def test_best_sellers(products):
    assert ids(catalog.best_sellers(products)) == [10, 2, 8, 11, 4, 18, 1, 14, 20, 5]


def test_recommended_products(products):
    assert ids(catalog.recommended_products(products)) == [10, 2, 8, 11, 4, 18, 1, 14]

    picked = catalog.recommended_products(products, "guest-1")
    assert ids(picked) == [10, 8, 11, 18, 1, 14, 17, 12]
    assert all(p.rating >= 4.5 for p in picked)


def test_recommended_does_not_reorder_catalog(products):
    before = ids(products)
    catalog.recommended_products(products)
    assert ids(products) == before


def test_sale_products_use_authored_discount(products):
    assert ids(catalog.sale_products(products)) == [1, 3, 5, 7, 8, 11, 14, 15, 17, 18, 19]


def test_lookups(products):
    assert catalog.find_product(products, 9).name == "Trench Coat"
    assert catalog.find_category(CATEGORIES, "shoes").product_count == 3
    assert catalog.find_brand(BRANDS, "nike").name == "Nike"

    with pytest.raises(NotFound) as excinfo:
        catalog.find_product(products, 0)
    assert excinfo.value.kind == "product"
    with pytest.raises(NotFound):
        catalog.find_category(CATEGORIES, "hats")
    with pytest.raises(NotFound):
        catalog.find_brand(BRANDS, "gucci")


def test_brand_products(products):
    brand, page, meta = catalog.brand_products(products, BRANDS, "musinsa-standard")
    assert brand.name == "Musinsa Standard"
    assert ids(page) == [1, 5]
    assert meta.limit == 24

    _, page, meta = catalog.brand_products(products, BRANDS, "stylenanda")
    assert page == []
    assert meta.total_pages == 0
