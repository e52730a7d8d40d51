import logging
import os
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import Field

import catalog
from catalog import NotFound
from database import SnapshotStore, create_document, db
from fixtures import BRANDS, CATEGORIES, PRODUCTS, seed_reviews
from reviews import ReviewBook
from schemas import (
    ApiResponse,
    Brand,
    CamelModel,
    CartItem,
    CartSummary,
    Category,
    Product,
    ProductFilters,
    RatingSummary,
    Review,
    ReviewCreate,
    SortBy,
    User,
    WishlistItem,
)
from store import StateStore, StoreRegistry, guest_user

logger = logging.getLogger(__name__)

SNAPSHOT_NAME = os.getenv("STORE_SNAPSHOT_NAME", "musinsa-store")
MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", 1000))

app = FastAPI(title="Musinsa Storefront API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Composition root: one catalog, one review book, one store per client session
review_book = ReviewBook(seed_reviews(), PRODUCTS)
registry = StoreRegistry(
    (lambda session_id: SnapshotStore(db, SNAPSHOT_NAME, session_id)) if db is not None else None,
    max_sessions=MAX_SESSIONS,
)


def get_review_book() -> ReviewBook:
    return review_book


def get_registry() -> StoreRegistry:
    return registry


def get_store(
    session_id: str = Query(..., min_length=1, description="Client session identifier"),
    sessions: StoreRegistry = Depends(get_registry),
) -> StateStore:
    return sessions.get(session_id)


def view_store(
    session_id: str = Query(..., min_length=1, description="Client session identifier"),
    sessions: StoreRegistry = Depends(get_registry),
) -> StateStore:
    return sessions.view(session_id)


# Utilities
def split_csv(value: Optional[str]) -> Optional[List[str]]:
    if not value:
        return None
    items = [v.strip() for v in value.split(",") if v.strip()]
    return items or None


def product_or_404(product_id: int) -> Product:
    return catalog.find_product(PRODUCTS, product_id)


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.get("/")
def root():
    return {"message": "Musinsa Storefront API is running"}


@app.get("/test")
def test_database(sessions: StoreRegistry = Depends(get_registry)):
    response = {
        "backend": "✅ Running",
        "database": "❌ Not Available",
        "database_url": "✅ Set" if os.getenv("DATABASE_URL") else "❌ Not Set",
        "database_name": "✅ Set" if os.getenv("DATABASE_NAME") else "❌ Not Set",
        "connection_status": "Not Connected",
        "persistence": "in-memory",
        "catalog": {"products": len(PRODUCTS), "categories": len(CATEGORIES), "brands": len(BRANDS)},
        "sessions": len(sessions),
    }
    try:
        if db is not None:
            response["database"] = "✅ Available"
            response["connection_status"] = "Connected"
            try:
                db.list_collection_names()
                response["database"] = "✅ Connected & Working"
                response["persistence"] = "mongodb"
            except Exception as e:
                response["database"] = f"⚠️ Connected but Error: {str(e)[:50]}"
    except Exception as e:
        response["database"] = f"❌ Error: {str(e)[:50]}"
    return response


# ---------------------------
# Products
# ---------------------------
def product_filters(
    category: Optional[str] = None,
    categories: Optional[str] = Query(None, description="Comma-separated category slugs"),
    brands: Optional[str] = Query(None, description="Comma-separated brand names"),
    colors: Optional[str] = Query(None, description="Comma-separated colors"),
    sizes: Optional[str] = Query(None, description="Comma-separated sizes"),
    price_min: Optional[int] = Query(None, alias="priceMin", ge=0),
    price_max: Optional[int] = Query(None, alias="priceMax", ge=0),
    search: Optional[str] = None,
    sort_by: SortBy = Query("popular", alias="sortBy"),
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1),
) -> ProductFilters:
    return ProductFilters(
        category=category,
        categories=split_csv(categories),
        brands=split_csv(brands),
        colors=split_csv(colors),
        sizes=split_csv(sizes),
        price_min=price_min,
        price_max=price_max,
        search=search,
        sort_by=sort_by,
        page=page,
        limit=limit,
    )


@app.get("/api/products", response_model=ApiResponse[List[Product]])
def list_products(filters: ProductFilters = Depends(product_filters)):
    items, meta = catalog.query_products(PRODUCTS, filters)
    return ApiResponse(data=items, message="Products fetched successfully", pagination=meta)


@app.get("/api/products/search", response_model=ApiResponse[List[Product]])
def search_products(
    q: str = Query(..., min_length=1, description="Search term"),
    filters: ProductFilters = Depends(product_filters),
):
    items, meta = catalog.search_products(PRODUCTS, q, filters)
    return ApiResponse(data=items, message="Products fetched successfully", pagination=meta)


@app.get("/api/products/featured", response_model=ApiResponse[List[Product]])
def featured_products():
    return ApiResponse(data=catalog.featured_products(PRODUCTS), message="Featured products fetched successfully")


@app.get("/api/products/bestsellers", response_model=ApiResponse[List[Product]])
def best_sellers():
    return ApiResponse(data=catalog.best_sellers(PRODUCTS), message="Best sellers fetched successfully")


@app.get("/api/products/recommended", response_model=ApiResponse[List[Product]])
def recommended_products(user_id: Optional[str] = Query(None, alias="userId")):
    return ApiResponse(
        data=catalog.recommended_products(PRODUCTS, user_id),
        message="Recommended products fetched successfully",
    )


@app.get("/api/products/sale", response_model=ApiResponse[List[Product]])
def sale_products():
    return ApiResponse(data=catalog.sale_products(PRODUCTS), message="Sale products fetched successfully")


@app.get("/api/products/{product_id}", response_model=ApiResponse[Product])
def get_product(product_id: int):
    return ApiResponse(data=product_or_404(product_id), message="Product fetched successfully")


@app.get("/api/products/{product_id}/related", response_model=ApiResponse[List[Product]])
def related_products(product_id: int):
    return ApiResponse(
        data=catalog.related_products(PRODUCTS, product_id),
        message="Related products fetched successfully",
    )


# ---------------------------
# Reviews
# ---------------------------
@app.get("/api/products/{product_id}/reviews", response_model=ApiResponse[List[Review]])
def list_reviews(product_id: int, page: int = Query(1, ge=1), book: ReviewBook = Depends(get_review_book)):
    items, meta = book.list_reviews(product_id, page)
    return ApiResponse(data=items, message="Reviews fetched successfully", pagination=meta)


@app.get("/api/products/{product_id}/reviews/summary", response_model=ApiResponse[RatingSummary])
def review_summary(product_id: int, book: ReviewBook = Depends(get_review_book)):
    product_or_404(product_id)
    return ApiResponse(data=book.rating_summary(product_id), message="Review summary fetched successfully")


@app.post("/api/products/{product_id}/reviews", response_model=ApiResponse[Review])
def create_review(product_id: int, payload: ReviewCreate, book: ReviewBook = Depends(get_review_book)):
    if payload.product_id != product_id:
        raise HTTPException(400, "Review product id does not match the URL")
    review = book.create_review(payload)
    if db is not None:
        try:
            create_document("review", review)
        except Exception:
            logger.warning("Could not mirror review %d to the database", review.id, exc_info=True)
    return ApiResponse(data=review, message="Review created successfully")


# ---------------------------
# Categories & brands
# ---------------------------
@app.get("/api/categories", response_model=ApiResponse[List[Category]])
def list_categories():
    return ApiResponse(data=CATEGORIES, message="Categories fetched successfully")


@app.get("/api/categories/{slug}", response_model=ApiResponse[Category])
def get_category(slug: str):
    return ApiResponse(data=catalog.find_category(CATEGORIES, slug), message="Category fetched successfully")


@app.get("/api/categories/{slug}/products", response_model=ApiResponse[List[Product]])
def category_products(slug: str, filters: ProductFilters = Depends(product_filters)):
    category = catalog.find_category(CATEGORIES, slug)
    items, meta = catalog.query_products(PRODUCTS, filters.model_copy(update={"category": category.slug}))
    return ApiResponse(data=items, message="Products fetched successfully", pagination=meta)


@app.get("/api/brands", response_model=ApiResponse[List[Brand]])
def list_brands():
    return ApiResponse(data=BRANDS, message="Brands fetched successfully")


@app.get("/api/brands/{slug}", response_model=ApiResponse[Brand])
def get_brand(slug: str):
    return ApiResponse(data=catalog.find_brand(BRANDS, slug), message="Brand fetched successfully")


@app.get("/api/brands/{slug}/products", response_model=ApiResponse[List[Product]])
def brand_products(slug: str, page: int = Query(1, ge=1), limit: int = Query(catalog.BRAND_PAGE_LIMIT, ge=1)):
    _, items, meta = catalog.brand_products(PRODUCTS, BRANDS, slug, page, limit)
    return ApiResponse(data=items, message="Products fetched successfully", pagination=meta)


# ---------------------------
# Session: user
# ---------------------------
class SessionOut(CamelModel):
    user: Optional[User] = None
    cart_count: int
    wishlist_count: int


def session_out(store: StateStore) -> SessionOut:
    return SessionOut(user=store.user, cart_count=store.get_cart_count(), wishlist_count=len(store.wishlist_items))


@app.get("/api/session", response_model=SessionOut)
def get_session(store: StateStore = Depends(view_store)):
    return session_out(store)


@app.post("/api/session/guest-login", response_model=SessionOut)
def guest_login(store: StateStore = Depends(get_store)):
    store.set_user(guest_user())
    logger.info("guest login")
    return session_out(store)


@app.post("/api/session/logout", response_model=SessionOut)
def logout(store: StateStore = Depends(get_store)):
    store.logout()
    logger.info("logout, cart and wishlist cleared")
    return session_out(store)


# ---------------------------
# Session: cart
# ---------------------------
class CartAdd(CamelModel):
    product_id: int
    color: str
    size: str
    quantity: int = Field(1, ge=1)


class CartQuantity(CamelModel):
    item_id: str
    quantity: int


class CartRemove(CamelModel):
    item_id: str


class CartOut(CamelModel):
    items: List[CartItem]
    summary: CartSummary


def cart_out(store: StateStore) -> CartOut:
    return CartOut(items=store.cart_items, summary=store.cart_summary())


@app.get("/api/cart", response_model=CartOut)
def get_cart(store: StateStore = Depends(view_store)):
    return cart_out(store)


@app.post("/api/cart/add", response_model=CartOut)
def add_to_cart(payload: CartAdd, store: StateStore = Depends(get_store)):
    product = product_or_404(payload.product_id)
    if payload.color not in product.colors:
        raise HTTPException(400, f"Color not available: {payload.color}")
    if payload.size not in product.sizes:
        raise HTTPException(400, f"Size not available: {payload.size}")
    if store.quantity_in_cart(product.id) + payload.quantity > product.stock:
        raise HTTPException(400, "Insufficient stock")
    store.add_to_cart(product, payload.color, payload.size, payload.quantity)
    return cart_out(store)


@app.post("/api/cart/update", response_model=CartOut)
def update_cart_quantity(payload: CartQuantity, store: StateStore = Depends(get_store)):
    item = store.find_cart_item(payload.item_id)
    if item is not None and payload.quantity > 0:
        in_other_lines = store.quantity_in_cart(item.product.id) - item.quantity
        if in_other_lines + payload.quantity > item.product.stock:
            raise HTTPException(400, "Insufficient stock")
    store.update_cart_quantity(payload.item_id, payload.quantity)
    return cart_out(store)


@app.post("/api/cart/remove", response_model=CartOut)
def remove_from_cart(payload: CartRemove, store: StateStore = Depends(get_store)):
    store.remove_from_cart(payload.item_id)
    return cart_out(store)


@app.post("/api/cart/clear", response_model=CartOut)
def clear_cart(store: StateStore = Depends(get_store)):
    store.clear_cart()
    return cart_out(store)


# ---------------------------
# Session: wishlist
# ---------------------------
class WishlistRef(CamelModel):
    product_id: int


class WishlistOut(CamelModel):
    items: List[WishlistItem]
    count: int


class WishlistMembership(CamelModel):
    product_id: int
    in_wishlist: bool


def wishlist_out(store: StateStore) -> WishlistOut:
    return WishlistOut(items=store.wishlist_items, count=len(store.wishlist_items))


@app.get("/api/wishlist", response_model=WishlistOut)
def get_wishlist(store: StateStore = Depends(view_store)):
    return wishlist_out(store)


@app.post("/api/wishlist/add", response_model=WishlistOut)
def add_to_wishlist(payload: WishlistRef, store: StateStore = Depends(get_store)):
    store.add_to_wishlist(product_or_404(payload.product_id))
    return wishlist_out(store)


@app.post("/api/wishlist/remove", response_model=WishlistOut)
def remove_from_wishlist(payload: WishlistRef, store: StateStore = Depends(get_store)):
    store.remove_from_wishlist(payload.product_id)
    return wishlist_out(store)


@app.post("/api/wishlist/toggle", response_model=WishlistMembership)
def toggle_wishlist(payload: WishlistRef, store: StateStore = Depends(get_store)):
    in_wishlist = store.toggle_wishlist(product_or_404(payload.product_id))
    return WishlistMembership(product_id=payload.product_id, in_wishlist=in_wishlist)


@app.get("/api/wishlist/{product_id}", response_model=WishlistMembership)
def is_in_wishlist(product_id: int, store: StateStore = Depends(view_store)):
    return WishlistMembership(product_id=product_id, in_wishlist=store.is_in_wishlist(product_id))


# ---------------------------
# Session: search history
# ---------------------------
class SearchTerm(CamelModel):
    query: str = Field(..., min_length=1)


@app.get("/api/search-history", response_model=List[str])
def get_search_history(store: StateStore = Depends(view_store)):
    return store.search_history


@app.post("/api/search-history", response_model=List[str])
def add_to_search_history(payload: SearchTerm, store: StateStore = Depends(get_store)):
    store.add_to_search_history(payload.query)
    return store.search_history


@app.delete("/api/search-history", response_model=List[str])
def clear_search_history(store: StateStore = Depends(get_store)):
    store.clear_search_history()
    return store.search_history


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
