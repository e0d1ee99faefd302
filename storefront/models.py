# storefront/models.py
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Tuple

from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_SIZE = "M"


def page_number(value: Any, default: int) -> int:
    """Pagination counters from the API; missing or junk values fall back to default."""
    try:
        return int(value or default)
    except (TypeError, ValueError):
        return default


def _parse_decimal(value: Any) -> Optional[Decimal]:
    try:
        parsed = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not parsed.is_finite():
        return None
    return parsed


@dataclass(frozen=True)
class Product:
    """
    Catalog entry as served by the storefront API.
    The price is kept as the text the API sent; parse it with unit_price.
    """
    id: str
    name: str
    price: str
    brand: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    sizes: Tuple[str, ...] = ()
    colors: Tuple[str, ...] = ()
    rating: Optional[float] = None
    reviews: Optional[int] = None
    discount: Optional[float] = None
    in_stock: Optional[bool] = None

    @property
    def unit_price(self) -> Decimal:
        parsed = _parse_decimal(self.price)
        if parsed is None:
            logger.warning(
                "Unparseable price %r for product %s; counting it as 0.",
                self.price, self.id,
            )
            return Decimal("0")
        return parsed

    @property
    def discounted_price(self) -> Decimal:
        if not self.discount:
            return self.unit_price
        price = self.unit_price
        return price - price * Decimal(str(self.discount)) / Decimal("100")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        if not isinstance(data, dict):
            raise TypeError(f"product must be an object, got {type(data).__name__}")
        return cls(
            id=str(data["_id"]),
            name=data.get("productName") or "",
            price=str(data.get("price", "0")),
            brand=data.get("brand"),
            category=data.get("category"),
            description=data.get("description"),
            image=data.get("productImage"),
            sizes=tuple(data.get("sizes") or ()),
            colors=tuple(data.get("colors") or ()),
            rating=data.get("rating"),
            reviews=data.get("reviews"),
            discount=data.get("discount"),
            in_stock=data.get("inStock"),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "_id": self.id,
            "productName": self.name,
            "price": self.price,
        }
        optional = {
            "brand": self.brand,
            "category": self.category,
            "description": self.description,
            "productImage": self.image,
            "rating": self.rating,
            "reviews": self.reviews,
            "discount": self.discount,
            "inStock": self.in_stock,
        }
        out.update({k: v for k, v in optional.items() if v is not None})
        if self.sizes:
            out["sizes"] = list(self.sizes)
        if self.colors:
            out["colors"] = list(self.colors)
        return out


@dataclass
class CartEntry:
    """One cart line, keyed by (product id, size)."""
    product: Product
    size: str = DEFAULT_SIZE
    quantity: int = 1

    @property
    def key(self) -> Tuple[str, str]:
        return self.product.id, self.size

    @property
    def subtotal(self) -> Decimal:
        return self.product.unit_price * self.quantity

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CartEntry":
        if not isinstance(data, dict):
            raise TypeError(f"cart entry must be an object, got {type(data).__name__}")
        quantity = data.get("quantity", 1)
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
            raise ValueError(f"invalid cart quantity: {quantity!r}")
        return cls(
            product=Product.from_dict(data["product"]),
            size=str(data.get("size") or DEFAULT_SIZE),
            quantity=quantity,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "product": self.product.to_dict(),
            "size": self.size,
            "quantity": self.quantity,
        }


@dataclass
class User:
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    role: Optional[str] = None  # "consumer" | "seller"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            id=str(data.get("_id", "")),
            name=data.get("name", ""),
            email=data.get("email", ""),
            phone=data.get("phone"),
            role=data.get("role"),
        )


@dataclass
class ShippingAddress:
    street: str
    city: str = ""
    state: str = ""
    pincode: str = ""
    phone: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShippingAddress":
        return cls(
            street=data.get("street", ""),
            city=data.get("city", ""),
            state=data.get("state", ""),
            pincode=data.get("pincode", ""),
            phone=data.get("phone", ""),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "street": self.street,
            "city": self.city,
            "state": self.state,
            "pincode": self.pincode,
            "phone": self.phone,
        }


@dataclass
class OrderLine:
    product_id: str
    quantity: int
    size: str
    price: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderLine":
        return cls(
            product_id=str(data.get("productId", "")),
            quantity=int(data.get("quantity") or 0),
            size=data.get("size", DEFAULT_SIZE),
            price=float(data.get("price") or 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "productId": self.product_id,
            "quantity": self.quantity,
            "size": self.size,
            "price": self.price,
        }


@dataclass
class Order:
    """
    Order as returned by the order history endpoints.
    status is one of order_placed|shipped|delivered|cancelled.
    """
    id: str
    user_id: str = ""
    products: List[OrderLine] = field(default_factory=list)
    total_amount: float = 0.0
    status: str = "order_placed"
    shipping_address: Optional[ShippingAddress] = None
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Order":
        address = data.get("shippingAddress")
        return cls(
            id=str(data.get("_id", "")),
            user_id=str(data.get("userId", "")),
            products=[OrderLine.from_dict(p) for p in data.get("products") or []],
            total_amount=float(data.get("totalAmount") or 0),
            status=data.get("status", "order_placed"),
            shipping_address=(
                ShippingAddress.from_dict(address) if isinstance(address, dict) else None
            ),
            created_at=data.get("createdAt", ""),
            updated_at=data.get("updatedAt", ""),
        )
