# storefront/catalog.py
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

from .api_client import ApiClient, ApiResponse
from .logger import get_logger
from .models import Product, page_number
from .sample_data import SAMPLE_PRODUCTS

logger = get_logger(__name__)

PRODUCTS_ENDPOINT = "/consumer/products"
PAGE_SIZE = 12
FEATURED_FETCH_LIMIT = 12


@dataclass
class ProductQuery:
    """Filters for the product listing; category and brand may be comma-separated."""
    category: Optional[str] = None
    search: Optional[str] = None
    brand: Optional[str] = None
    sort: str = "popularity"  # popularity|price-low|price-high|newest
    page: int = 1
    limit: Optional[int] = None

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        for name in ("category", "search", "brand"):
            value = getattr(self, name)
            if value:
                params[name] = value
        if self.limit is not None:
            params["limit"] = str(self.limit)
        params["page"] = str(self.page)
        params["sort"] = self.sort
        return params


@dataclass
class CatalogPage:
    products: List[Product] = field(default_factory=list)
    total_pages: int = 1
    current_page: int = 1
    is_using_sample_data: bool = False


def _split(value: str) -> List[str]:
    return [part.strip().lower() for part in value.split(",") if part.strip()]


def _contains(haystack: Optional[str], needle: str) -> bool:
    return bool(haystack) and needle in haystack.lower()


def filter_products(products: List[Product], query: ProductQuery) -> List[Product]:
    """Apply a ProductQuery locally; used when the API cannot answer."""
    out = list(products)

    if query.category:
        categories = _split(query.category)
        out = [p for p in out if any(_contains(p.category, c) for c in categories)]

    if query.search:
        needle = query.search.lower()
        out = [
            p for p in out
            if _contains(p.name, needle)
            or _contains(p.brand, needle)
            or _contains(p.description, needle)
        ]

    if query.brand:
        brands = _split(query.brand)
        out = [p for p in out if any(_contains(p.brand, b) for b in brands)]

    if query.sort == "price-low":
        out.sort(key=lambda p: p.unit_price)
    elif query.sort == "price-high":
        out.sort(key=lambda p: p.unit_price, reverse=True)
    elif query.sort == "newest":
        # Sample data has no dates; newest is the reverse of listing order.
        out.reverse()

    return out


def _read_products(response: ApiResponse) -> tuple[List[Product], Dict[str, Any]]:
    """
    Parse a listing body, which is either {"products": [...], ...} or a bare list.
    Raises ValueError/TypeError/KeyError on anything else.
    """
    data = response.json()
    meta: Dict[str, Any] = {}
    if isinstance(data, dict):
        raw = data.get("products") or []
        meta = data
    elif isinstance(data, list):
        raw = data
    else:
        raise ValueError(f"unexpected listing body: {type(data).__name__}")
    return [Product.from_dict(p) for p in raw], meta


def _sample_page(query: ProductQuery) -> CatalogPage:
    products = filter_products(SAMPLE_PRODUCTS, query)
    return CatalogPage(
        products=products,
        total_pages=max(1, math.ceil(len(products) / PAGE_SIZE)),
        current_page=1,
        is_using_sample_data=True,
    )


def list_products(client: ApiClient, query: Optional[ProductQuery] = None) -> CatalogPage:
    query = query or ProductQuery()
    response = client.get(f"{PRODUCTS_ENDPOINT}?{urlencode(query.to_params())}")

    if not response.ok:
        logger.info(
            "Using filtered sample data - catalog answered %d %s",
            response.status, response.status_text,
        )
        return _sample_page(query)

    try:
        products, meta = _read_products(response)
    except (ValueError, TypeError, KeyError) as e:
        logger.warning("Failed to parse catalog response, using sample data: %s", e)
        return CatalogPage(
            products=list(SAMPLE_PRODUCTS),
            total_pages=1,
            current_page=1,
            is_using_sample_data=True,
        )

    return CatalogPage(
        products=products,
        total_pages=page_number(meta.get("totalPages"), 1),
        current_page=page_number(meta.get("currentPage"), 1),
        is_using_sample_data=False,
    )


def featured_products(client: ApiClient, limit: int = 8) -> CatalogPage:
    fallback = CatalogPage(
        products=list(SAMPLE_PRODUCTS[:limit]),
        is_using_sample_data=True,
    )
    response = client.get(f"{PRODUCTS_ENDPOINT}?limit={FEATURED_FETCH_LIMIT}")
    if not response.ok:
        logger.info("Using sample data - backend not available")
        return fallback

    try:
        products, _ = _read_products(response)
    except (ValueError, TypeError, KeyError) as e:
        logger.warning("Failed to parse featured products, using sample data: %s", e)
        return fallback

    if not products:
        return fallback
    return CatalogPage(products=products[:limit])


def _find(products: List[Product], product_id: str) -> Optional[Product]:
    return next((p for p in products if p.id == product_id), None)


def get_product(client: ApiClient, product_id: str) -> Optional[Product]:
    response = client.get(PRODUCTS_ENDPOINT)
    if not response.ok:
        return _find(SAMPLE_PRODUCTS, product_id)

    try:
        products, _ = _read_products(response)
    except (ValueError, TypeError, KeyError) as e:
        logger.error("Failed to fetch product %s: %s", product_id, e)
        return _find(SAMPLE_PRODUCTS, product_id)

    return _find(products, product_id)


def related_products(client: ApiClient, product: Product, limit: int = 4) -> List[Product]:
    if not product.category:
        return []

    fallback = [
        p for p in SAMPLE_PRODUCTS
        if p.category == product.category and p.id != product.id
    ][:limit]

    params = urlencode({"category": product.category, "limit": 8})
    response = client.get(f"{PRODUCTS_ENDPOINT}?{params}")
    if not response.ok:
        return fallback

    try:
        products, _ = _read_products(response)
    except (ValueError, TypeError, KeyError) as e:
        logger.error("Failed to fetch related products for %s: %s", product.id, e)
        return fallback

    return [p for p in products if p.id != product.id][:limit]
