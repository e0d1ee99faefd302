# storefront/cart.py
from decimal import Decimal
from typing import Any, Dict, Optional

from .collection import PersistentCollection
from .logger import get_logger
from .models import DEFAULT_SIZE, CartEntry, Product
from .storage import LocalStorage

logger = get_logger(__name__)

CART_STORAGE_KEY = "fashionkart-cart"


class Cart(PersistentCollection[CartEntry]):
    """
    Shopping cart: at most one entry per (product id, size).
    Unknown keys and non-positive quantities are no-ops, never errors.
    """

    kind = "cart"

    def __init__(self, storage: LocalStorage, key: str = CART_STORAGE_KEY):
        super().__init__(storage, key)

    def _decode(self, raw: Dict[str, Any]) -> CartEntry:
        return CartEntry.from_dict(raw)

    def _encode(self, entry: CartEntry) -> Dict[str, Any]:
        return entry.to_dict()

    def get(self, product_id: str, size: str = DEFAULT_SIZE) -> Optional[CartEntry]:
        for entry in self._entries:
            if entry.key == (product_id, size):
                return entry
        return None

    def add(self, product: Product, size: str = DEFAULT_SIZE, quantity: int = 1) -> None:
        if quantity <= 0:
            logger.warning(
                "Ignoring add of %s (%s) with non-positive quantity %d.",
                product.id, size, quantity,
            )
            return
        existing = self.get(product.id, size)
        if existing is not None:
            existing.quantity += quantity
        else:
            self._entries.append(CartEntry(product=product, size=size, quantity=quantity))
        self._commit()

    def remove(self, product_id: str, size: str = DEFAULT_SIZE) -> None:
        self._entries = [e for e in self._entries if e.key != (product_id, size)]
        self._commit()

    def set_quantity(self, product_id: str, quantity: int, size: str = DEFAULT_SIZE) -> None:
        if quantity <= 0:
            self.remove(product_id, size)
            return
        entry = self.get(product_id, size)
        if entry is not None:
            entry.quantity = quantity
        self._commit()

    def clear(self) -> None:
        self._entries = []
        self._commit()

    @property
    def total_items(self) -> int:
        return sum(e.quantity for e in self._entries)

    @property
    def total_price(self) -> Decimal:
        return sum((e.subtotal for e in self._entries), Decimal("0"))
