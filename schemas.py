"""
Schemas for the Musinsa storefront

Each Pydantic model represents a record served by the storefront or held in a
client session. Attributes are snake_case in Python and camelCase on the wire
(e.g. review_count -> "reviewCount"); both spellings are accepted on input.
"""
from datetime import datetime, timezone
from typing import Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")

SortBy = Literal["popular", "newest", "price-low", "price-high", "rating"]
Fit = Literal["small", "normal", "large"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Product(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int = Field(..., description="Stable product identifier")
    name: str = Field(..., description="Product name")
    brand: str = Field(..., description="Brand display name")
    price: int = Field(..., ge=0, description="Selling price in whole KRW")
    original_price: Optional[int] = Field(None, ge=0, description="Pre-discount reference price")
    discount: int = Field(0, ge=0, le=100, description="Authored discount percentage")
    image: str = Field(..., description="Primary image URL")
    images: List[str] = Field(default_factory=list, description="Detail image URLs")
    colors: List[str] = Field(default_factory=list)
    sizes: List[str] = Field(default_factory=list)
    description: str = ""
    details: List[str] = Field(default_factory=list)
    rating: float = Field(0.0, ge=0, le=5, description="Average rating")
    review_count: int = Field(0, ge=0)
    is_new: bool = False
    category: str = Field(..., description="Category slug")
    subcategory: Optional[str] = None
    stock: int = Field(0, ge=0, description="Units in stock, 0 means sold out")
    sales_count: int = Field(0, ge=0)
    created_at: datetime = Field(..., description="Creation time, UTC when no offset is given")
    updated_at: datetime = Field(..., description="Last update time, UTC when no offset is given")

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class Category(CamelModel):
    id: int
    name: str = Field(..., description="Category display name")
    slug: str = Field(..., description="URL-friendly unique identifier")
    image: str = Field(..., description="Cover image URL")
    product_count: int = Field(0, ge=0, description="Static label, not recomputed")


class Brand(CamelModel):
    id: int
    name: str = Field(..., description="Brand display name, matched against Product.brand")
    slug: str = Field(..., description="URL-friendly unique identifier")
    logo: str
    description: str = ""


class ReviewCreate(CamelModel):
    product_id: int
    user_id: str
    user_name: str
    rating: int = Field(..., ge=1, le=5)
    title: str
    content: str
    images: List[str] = Field(default_factory=list)
    size: str
    color: str
    height: Optional[str] = None
    weight: Optional[str] = None
    fit: Fit = "normal"
    is_verified: bool = False


class Review(ReviewCreate):
    id: int
    helpful_count: int = Field(0, ge=0)
    created_at: str


class RatingSummary(CamelModel):
    average: float
    count: int
    fit: dict


class User(CamelModel):
    id: str
    name: str
    email: str
    is_guest: bool = False


class CartItem(CamelModel):
    id: str = Field(..., description="Line item id, stable across quantity updates")
    product: Product = Field(..., description="Product snapshot taken when the line was created")
    color: str
    size: str
    quantity: int = Field(..., ge=1)
    added_at: str


class WishlistItem(CamelModel):
    id: str
    product: Product
    added_at: str


class CartSummary(CamelModel):
    total: int
    original_total: int
    discount_total: int
    delivery_fee: int
    final_total: int
    count: int


class StoreSnapshot(CamelModel):
    """Persisted session state, restored once when a store is hydrated."""

    user: Optional[User] = None
    cart_items: List[CartItem] = Field(default_factory=list)
    wishlist_items: List[WishlistItem] = Field(default_factory=list)
    search_history: List[str] = Field(default_factory=list)


class ProductFilters(CamelModel):
    category: Optional[str] = None
    categories: Optional[List[str]] = None
    brands: Optional[List[str]] = None
    colors: Optional[List[str]] = None
    sizes: Optional[List[str]] = None
    price_min: Optional[int] = Field(None, ge=0)
    price_max: Optional[int] = Field(None, ge=0)
    search: Optional[str] = None
    sort_by: SortBy = "popular"
    page: int = Field(1, ge=1)
    limit: int = Field(12, ge=1)


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


class ApiResponse(CamelModel, Generic[T]):
    data: T
    message: str
    success: bool = True
    pagination: Optional[Pagination] = None
