"""
Static mock catalog served by the storefront.

Products, categories, brands and seed reviews are authored data: they are
validated into schema models once at import and never mutated afterwards.
"""
from typing import List

from schemas import Brand, Category, Product, Review

UNSPLASH = "https://images.unsplash.com/photo-{}?w={}&h={}&fit=crop"


def _img(photo: str) -> str:
    return UNSPLASH.format(photo, 400, 500)


def _detail(*photos: str) -> List[str]:
    return [UNSPLASH.format(p, 600, 750) for p in photos]


_PRODUCTS = [
    # tops
    {
        "id": 1,
        "name": "Oversized Hoodie",
        "brand": "Musinsa Standard",
        "price": 39000,
        "originalPrice": 49000,
        "discount": 20,
        "image": _img("1556821840-3a63f95609a7"),
        "images": _detail("1556821840-3a63f95609a7", "1521572163474-6864f9cf17ab", "1503341504253-dff4815485f1"),
        "colors": ["Black", "White", "Gray", "Navy"],
        "sizes": ["S", "M", "L", "XL", "XXL"],
        "description": "A comfortable oversized hoodie in soft cotton, made for everyday wear.",
        "details": ["Material: 100% cotton", "Colors: black, white, gray, navy", "Sizes: S-XXL", "Care: cold hand wash recommended"],
        "rating": 4.5,
        "reviewCount": 1247,
        "isNew": True,
        "category": "tops",
        "subcategory": "Hoodies",
        "stock": 150,
        "salesCount": 2847,
        "createdAt": "2024-01-15T00:00:00Z",
        "updatedAt": "2024-01-20T00:00:00Z",
    },
    {
        "id": 2,
        "name": "Basic Crew Neck T-Shirt",
        "brand": "Uniqlo",
        "price": 19900,
        "originalPrice": None,
        "discount": 0,
        "image": _img("1521572163474-6864f9cf17ab"),
        "images": _detail("1521572163474-6864f9cf17ab", "1503341504253-dff4815485f1"),
        "colors": ["White", "Black", "Gray", "Navy", "Red"],
        "sizes": ["XS", "S", "M", "L", "XL"],
        "description": "A simple crew neck tee that goes with any outfit.",
        "details": ["Material: 100% cotton", "Colors: white, black, gray, navy, red", "Sizes: XS-XL"],
        "rating": 4.3,
        "reviewCount": 2156,
        "isNew": False,
        "category": "tops",
        "subcategory": "T-Shirts",
        "stock": 300,
        "salesCount": 5432,
        "createdAt": "2024-01-10T00:00:00Z",
        "updatedAt": "2024-01-18T00:00:00Z",
    },
    {
        "id": 3,
        "name": "Striped Shirt",
        "brand": "Covernat",
        "price": 65000,
        "originalPrice": 85000,
        "discount": 24,
        "image": _img("1602810318383-e386cc2a3ccf"),
        "images": _detail("1602810318383-e386cc2a3ccf", "1594938298603-c8148c4dae35"),
        "colors": ["Blue", "White", "Navy"],
        "sizes": ["S", "M", "L", "XL"],
        "description": "A classic striped shirt, from business casual to daily wear.",
        "details": ["Material: 100% cotton", "Colors: blue, white, navy", "Sizes: S-XL"],
        "rating": 4.6,
        "reviewCount": 892,
        "isNew": True,
        "category": "tops",
        "subcategory": "Shirts",
        "stock": 120,
        "salesCount": 1234,
        "createdAt": "2024-01-12T00:00:00Z",
        "updatedAt": "2024-01-19T00:00:00Z",
    },
    # bottoms
    {
        "id": 4,
        "name": "Wide Denim Pants",
        "brand": "Levi's",
        "price": 89000,
        "originalPrice": None,
        "discount": 0,
        "image": _img("1542272604-787c3835535d"),
        "images": _detail("1542272604-787c3835535d", "1551698618-1dfe5d97d256"),
        "colors": ["Blue", "Black", "Light Blue"],
        "sizes": ["28", "30", "32", "34", "36"],
        "description": "Trendy wide-fit denim with a relaxed silhouette.",
        "details": ["Material: 98% cotton, 2% spandex", "Colors: blue, black, light blue", "Sizes: 28-36"],
        "rating": 4.4,
        "reviewCount": 1456,
        "isNew": False,
        "category": "bottoms",
        "subcategory": "Denim",
        "stock": 89,
        "salesCount": 3456,
        "createdAt": "2024-01-10T00:00:00Z",
        "updatedAt": "2024-01-18T00:00:00Z",
    },
    {
        "id": 5,
        "name": "Slacks",
        "brand": "Musinsa Standard",
        "price": 45000,
        "originalPrice": 59000,
        "discount": 24,
        "image": _img("1594633312681-425c7b97ccd1"),
        "images": _detail("1594633312681-425c7b97ccd1", "1506629905607-d405d7d3b0d2"),
        "colors": ["Black", "Navy", "Gray", "Beige"],
        "sizes": ["28", "30", "32", "34", "36"],
        "description": "Clean-fit slacks that work from the office to the weekend.",
        "details": ["Material: 70% polyester, 30% rayon", "Colors: black, navy, gray, beige"],
        "rating": 4.2,
        "reviewCount": 678,
        "isNew": True,
        "category": "bottoms",
        "subcategory": "Slacks",
        "stock": 156,
        "salesCount": 1876,
        "createdAt": "2024-01-14T00:00:00Z",
        "updatedAt": "2024-01-20T00:00:00Z",
    },
    {
        "id": 6,
        "name": "Cargo Pants",
        "brand": "Stone Island",
        "price": 125000,
        "originalPrice": None,
        "discount": 0,
        "image": _img("1473966968600-fa801b869a1a"),
        "images": _detail("1473966968600-fa801b869a1a", "1551698618-1dfe5d97d256"),
        "colors": ["Khaki", "Black", "Olive"],
        "sizes": ["S", "M", "L", "XL"],
        "description": "Utility cargo pants with plenty of pockets.",
        "details": ["Material: 100% cotton", "Colors: khaki, black, olive", "Sizes: S-XL"],
        "rating": 4.7,
        "reviewCount": 543,
        "isNew": True,
        "category": "bottoms",
        "subcategory": "Cargo Pants",
        "stock": 67,
        "salesCount": 987,
        "createdAt": "2024-01-16T00:00:00Z",
        "updatedAt": "2024-01-21T00:00:00Z",
    },
    # outerwear
    {
        "id": 7,
        "name": "Oversized Blazer",
        "brand": "Andersson Bell",
        "price": 159000,
        "originalPrice": 199000,
        "discount": 20,
        "image": _img("1507003211169-0a1dd7228f2d"),
        "images": _detail("1507003211169-0a1dd7228f2d", "1594938298603-c8148c4dae35"),
        "colors": ["Black", "Navy", "Beige"],
        "sizes": ["S", "M", "L", "XL"],
        "description": "An oversized blazer that dresses up or down.",
        "details": ["Material: 80% polyester, 20% rayon", "Colors: black, navy, beige"],
        "rating": 4.6,
        "reviewCount": 324,
        "isNew": False,
        "category": "outerwear",
        "subcategory": "Blazers",
        "stock": 45,
        "salesCount": 654,
        "createdAt": "2024-01-08T00:00:00Z",
        "updatedAt": "2024-01-16T00:00:00Z",
    },
    {
        "id": 8,
        "name": "Padded Jacket",
        "brand": "The North Face",
        "price": 189000,
        "originalPrice": 229000,
        "discount": 17,
        "image": _img("1551698618-1dfe5d97d256"),
        "images": _detail("1551698618-1dfe5d97d256", "1544966503-7cc5ac882d5f"),
        "colors": ["Black", "Navy", "Red"],
        "sizes": ["S", "M", "L", "XL", "XXL"],
        "description": "A warm, light padded jacket for the winter.",
        "details": ["Material: 100% nylon, fill: 90% down", "Colors: black, navy, red"],
        "rating": 4.8,
        "reviewCount": 1892,
        "isNew": True,
        "category": "outerwear",
        "subcategory": "Padding",
        "stock": 234,
        "salesCount": 4321,
        "createdAt": "2024-01-11T00:00:00Z",
        "updatedAt": "2024-01-18T00:00:00Z",
    },
    {
        "id": 9,
        "name": "Trench Coat",
        "brand": "Burberry",
        "price": 450000,
        "originalPrice": None,
        "discount": 0,
        "image": _img("1539533018447-63fcce2678e3"),
        "images": _detail("1539533018447-63fcce2678e3", "1578662996442-48f60103fc96"),
        "colors": ["Beige", "Black", "Navy"],
        "sizes": ["S", "M", "L"],
        "description": "A classic, refined trench coat.",
        "details": ["Material: 100% cotton", "Colors: beige, black, navy", "Sizes: S-L"],
        "rating": 4.9,
        "reviewCount": 156,
        "isNew": False,
        "category": "outerwear",
        "subcategory": "Coats",
        "stock": 23,
        "salesCount": 234,
        "createdAt": "2024-01-05T00:00:00Z",
        "updatedAt": "2024-01-15T00:00:00Z",
    },
    # shoes
    {
        "id": 10,
        "name": "Classic Sneakers",
        "brand": "Converse",
        "price": 75000,
        "originalPrice": None,
        "discount": 0,
        "image": _img("1549298916-b41d501d3772"),
        "images": _detail("1549298916-b41d501d3772", "1560769629-975ec94e6a86"),
        "colors": ["White", "Black", "Red"],
        "sizes": ["240", "250", "260", "270", "280"],
        "description": "Classic canvas sneakers that go with everything.",
        "details": ["Material: canvas", "Colors: white, black, red", "Sizes: 240-280"],
        "rating": 4.5,
        "reviewCount": 3456,
        "isNew": False,
        "category": "shoes",
        "subcategory": "Sneakers",
        "stock": 189,
        "salesCount": 6789,
        "createdAt": "2024-01-08T00:00:00Z",
        "updatedAt": "2024-01-16T00:00:00Z",
    },
    {
        "id": 11,
        "name": "Running Shoes",
        "brand": "Nike",
        "price": 129000,
        "originalPrice": 149000,
        "discount": 13,
        "image": _img("1542291026-7eec264c27ff"),
        "images": _detail("1542291026-7eec264c27ff", "1560769629-975ec94e6a86"),
        "colors": ["Black", "White", "Blue", "Red"],
        "sizes": ["240", "250", "260", "270", "280", "290"],
        "description": "Cushioned running shoes for training and daily wear.",
        "details": ["Material: mesh, synthetics", "Colors: black, white, blue, red"],
        "rating": 4.7,
        "reviewCount": 2134,
        "isNew": True,
        "category": "shoes",
        "subcategory": "Running",
        "stock": 267,
        "salesCount": 3987,
        "createdAt": "2024-01-13T00:00:00Z",
        "updatedAt": "2024-01-19T00:00:00Z",
    },
    {
        "id": 12,
        "name": "Chelsea Boots",
        "brand": "Dr. Martens",
        "price": 189000,
        "originalPrice": None,
        "discount": 0,
        "image": _img("1549298916-b41d501d3772"),
        "images": _detail("1549298916-b41d501d3772", "1560769629-975ec94e6a86"),
        "colors": ["Black", "Brown"],
        "sizes": ["250", "260", "270", "280"],
        "description": "Classic Chelsea boots in full-grain leather.",
        "details": ["Material: genuine leather", "Colors: black, brown", "Sizes: 250-280"],
        "rating": 4.6,
        "reviewCount": 892,
        "isNew": False,
        "category": "shoes",
        "subcategory": "Boots",
        "stock": 78,
        "salesCount": 1456,
        "createdAt": "2024-01-09T00:00:00Z",
        "updatedAt": "2024-01-17T00:00:00Z",
    },
    # bags
    {
        "id": 13,
        "name": "Minimal Crossbody Bag",
        "brand": "Marhen.J",
        "price": 45000,
        "originalPrice": None,
        "discount": 0,
        "image": _img("1553062407-98eeb64c6a62"),
        "images": _detail("1553062407-98eeb64c6a62", "1584917865442-de89df76afd3"),
        "colors": ["Black", "Brown", "Beige"],
        "sizes": ["One Size"],
        "description": "A simple, practical crossbody bag.",
        "details": ["Material: faux leather", "Colors: black, brown, beige", "Size: one size"],
        "rating": 4.4,
        "reviewCount": 678,
        "isNew": True,
        "category": "bags",
        "subcategory": "Crossbody",
        "stock": 123,
        "salesCount": 1234,
        "createdAt": "2024-01-12T00:00:00Z",
        "updatedAt": "2024-01-19T00:00:00Z",
    },
    {
        "id": 14,
        "name": "Backpack",
        "brand": "JanSport",
        "price": 65000,
        "originalPrice": 79000,
        "discount": 18,
        "image": _img("1553062407-98eeb64c6a62"),
        "images": _detail("1553062407-98eeb64c6a62", "1584917865442-de89df76afd3"),
        "colors": ["Black", "Navy", "Gray", "Red"],
        "sizes": ["One Size"],
        "description": "A sturdy backpack for school, work and travel.",
        "details": ["Material: nylon", "Colors: black, navy, gray, red"],
        "rating": 4.6,
        "reviewCount": 1234,
        "isNew": False,
        "category": "bags",
        "subcategory": "Backpacks",
        "stock": 189,
        "salesCount": 2345,
        "createdAt": "2024-01-10T00:00:00Z",
        "updatedAt": "2024-01-18T00:00:00Z",
    },
    {
        "id": 15,
        "name": "Tote Bag",
        "brand": "Eco Bag",
        "price": 25000,
        "originalPrice": 35000,
        "discount": 29,
        "image": _img("1584917865442-de89df76afd3"),
        "images": _detail("1584917865442-de89df76afd3", "1553062407-98eeb64c6a62"),
        "colors": ["Beige", "White", "Black"],
        "sizes": ["One Size"],
        "description": "An eco-friendly canvas tote for shopping and daily errands.",
        "details": ["Material: canvas", "Colors: beige, white, black"],
        "rating": 4.3,
        "reviewCount": 567,
        "isNew": True,
        "category": "bags",
        "subcategory": "Totes",
        "stock": 234,
        "salesCount": 876,
        "createdAt": "2024-01-14T00:00:00Z",
        "updatedAt": "2024-01-20T00:00:00Z",
    },
    # accessories
    {
        "id": 16,
        "name": "Silver Chain Necklace",
        "brand": "Agatha",
        "price": 89000,
        "originalPrice": None,
        "discount": 0,
        "image": _img("1515562141207-7a88fb7ce338"),
        "images": _detail("1515562141207-7a88fb7ce338", "1506630448388-4e683c67ddb0"),
        "colors": ["Silver"],
        "sizes": ["One Size"],
        "description": "A refined silver chain necklace.",
        "details": ["Material: 925 silver", "Color: silver", "Size: one size"],
        "rating": 4.7,
        "reviewCount": 345,
        "isNew": False,
        "category": "accessories",
        "subcategory": "Necklaces",
        "stock": 67,
        "salesCount": 543,
        "createdAt": "2024-01-07T00:00:00Z",
        "updatedAt": "2024-01-15T00:00:00Z",
    },
    {
        "id": 17,
        "name": "Leather Watch",
        "brand": "Daniel Wellington",
        "price": 159000,
        "originalPrice": 189000,
        "discount": 16,
        "image": _img("1524592094714-0f0654e20314"),
        "images": _detail("1524592094714-0f0654e20314", "1506630448388-4e683c67ddb0"),
        "colors": ["Brown", "Black"],
        "sizes": ["One Size"],
        "description": "A timeless watch on a classic leather strap.",
        "details": ["Material: leather strap, stainless steel", "Colors: brown, black"],
        "rating": 4.8,
        "reviewCount": 892,
        "isNew": True,
        "category": "accessories",
        "subcategory": "Watches",
        "stock": 89,
        "salesCount": 1567,
        "createdAt": "2024-01-15T00:00:00Z",
        "updatedAt": "2024-01-21T00:00:00Z",
    },
    {
        "id": 18,
        "name": "Baseball Cap",
        "brand": "New Era",
        "price": 35000,
        "originalPrice": 45000,
        "discount": 22,
        "image": _img("1588850561407-ed78c282e89b"),
        "images": _detail("1588850561407-ed78c282e89b", "1521369909029-2afed882baee"),
        "colors": ["Black", "Navy", "White", "Red"],
        "sizes": ["One Size"],
        "description": "A classic baseball cap to finish a casual look.",
        "details": ["Material: 100% cotton", "Colors: black, navy, white, red"],
        "rating": 4.5,
        "reviewCount": 1456,
        "isNew": False,
        "category": "accessories",
        "subcategory": "Caps",
        "stock": 178,
        "salesCount": 2876,
        "createdAt": "2024-01-11T00:00:00Z",
        "updatedAt": "2024-01-18T00:00:00Z",
    },
    # more per category
    {
        "id": 19,
        "name": "Knit Sweater",
        "brand": "COS",
        "price": 95000,
        "originalPrice": 120000,
        "discount": 21,
        "image": _img("1434389677669-e08b4cac3105"),
        "images": _detail("1434389677669-e08b4cac3105", "1556821840-3a63f95609a7"),
        "colors": ["Cream", "Gray", "Navy"],
        "sizes": ["S", "M", "L", "XL"],
        "description": "A soft, warm knit sweater for autumn and winter.",
        "details": ["Material: 70% wool, 30% acrylic", "Colors: cream, gray, navy"],
        "rating": 4.6,
        "reviewCount": 567,
        "isNew": True,
        "category": "tops",
        "subcategory": "Knitwear",
        "stock": 89,
        "salesCount": 1098,
        "createdAt": "2024-01-16T00:00:00Z",
        "updatedAt": "2024-01-21T00:00:00Z",
    },
    {
        "id": 20,
        "name": "Jogger Pants",
        "brand": "Adidas",
        "price": 55000,
        "originalPrice": None,
        "discount": 0,
        "image": _img("1594633312681-425c7b97ccd1"),
        "images": _detail("1594633312681-425c7b97ccd1", "1506629905607-d405d7d3b0d2"),
        "colors": ["Black", "Gray", "Navy"],
        "sizes": ["S", "M", "L", "XL"],
        "description": "Comfortable joggers for workouts or lounging at home.",
        "details": ["Material: 60% cotton, 40% polyester", "Colors: black, gray, navy"],
        "rating": 4.4,
        "reviewCount": 789,
        "isNew": False,
        "category": "bottoms",
        "subcategory": "Joggers",
        "stock": 156,
        "salesCount": 2109,
        "createdAt": "2024-01-12T00:00:00Z",
        "updatedAt": "2024-01-19T00:00:00Z",
    },
]

_CATEGORIES = [
    {"id": 1, "name": "Tops", "slug": "tops", "image": UNSPLASH.format("1521572163474-6864f9cf17ab", 120, 120), "productCount": 6},
    {"id": 2, "name": "Bottoms", "slug": "bottoms", "image": UNSPLASH.format("1542272604-787c3835535d", 120, 120), "productCount": 4},
    {"id": 3, "name": "Outerwear", "slug": "outerwear", "image": UNSPLASH.format("1507003211169-0a1dd7228f2d", 120, 120), "productCount": 3},
    {"id": 4, "name": "Shoes", "slug": "shoes", "image": UNSPLASH.format("1549298916-b41d501d3772", 120, 120), "productCount": 3},
    {"id": 5, "name": "Bags", "slug": "bags", "image": UNSPLASH.format("1553062407-98eeb64c6a62", 120, 120), "productCount": 3},
    {"id": 6, "name": "Accessories", "slug": "accessories", "image": UNSPLASH.format("1515562141207-7a88fb7ce338", 120, 120), "productCount": 3},
]

_LOGO = "/placeholder.svg?height=60&width=120"

_BRANDS = [
    {"id": 1, "name": "Musinsa Standard", "slug": "musinsa-standard", "logo": _LOGO, "description": "Musinsa's in-house label"},
    {"id": 2, "name": "Covernat", "slug": "covernat", "logo": _LOGO, "description": "A leading Korean streetwear brand"},
    {"id": 3, "name": "Stylenanda", "slug": "stylenanda", "logo": _LOGO, "description": "Trend-driven womenswear"},
    {"id": 4, "name": "Uniqlo", "slug": "uniqlo", "logo": _LOGO, "description": "Global Japanese apparel brand"},
    {"id": 5, "name": "Nike", "slug": "nike", "logo": _LOGO, "description": "World-famous sportswear brand"},
    {"id": 6, "name": "Adidas", "slug": "adidas", "logo": _LOGO, "description": "German sportswear brand"},
]

_REVIEWS = [
    {
        "id": 1,
        "productId": 1,
        "userId": "user1",
        "userName": "K**",
        "rating": 5,
        "title": "Really happy with this hoodie!",
        "content": "I worried the oversized fit would be too big, but it's just right. Soft fabric, "
                   "great color, and it keeps its shape after washing.",
        "images": [UNSPLASH.format("1556821840-3a63f95609a7", 300, 300)],
        "size": "M",
        "color": "Black",
        "height": "170cm",
        "weight": "65kg",
        "fit": "normal",
        "isVerified": True,
        "helpfulCount": 24,
        "createdAt": "2024-01-20T10:30:00Z",
    },
    {
        "id": 2,
        "productId": 1,
        "userId": "user2",
        "userName": "L**",
        "rating": 4,
        "title": "Lovely color",
        "content": "Ordered the gray and it looks even better than the photos. A bit thick for summer though.",
        "images": [],
        "size": "L",
        "color": "Gray",
        "height": "175cm",
        "weight": "70kg",
        "fit": "normal",
        "isVerified": True,
        "helpfulCount": 12,
        "createdAt": "2024-01-18T14:20:00Z",
    },
    {
        "id": 3,
        "productId": 2,
        "userId": "user3",
        "userName": "P**",
        "rating": 5,
        "title": "The best basic",
        "content": "Uniqlo tees never disappoint. Great quality for the price and they go with everything.",
        "images": [],
        "size": "M",
        "color": "White",
        "height": "168cm",
        "weight": "60kg",
        "fit": "normal",
        "isVerified": True,
        "helpfulCount": 18,
        "createdAt": "2024-01-15T09:15:00Z",
    },
]

PRODUCTS: List[Product] = [Product(**p) for p in _PRODUCTS]
CATEGORIES: List[Category] = [Category(**c) for c in _CATEGORIES]
BRANDS: List[Brand] = [Brand(**b) for b in _BRANDS]


def seed_reviews() -> List[Review]:
    """Fresh copies of the seed reviews; review books append to their own list."""
    return [Review(**r) for r in _REVIEWS]
