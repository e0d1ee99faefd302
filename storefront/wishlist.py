# storefront/wishlist.py
from typing import Any, Dict

from .collection import PersistentCollection
from .logger import get_logger
from .models import Product
from .notifications import Notifier
from .storage import LocalStorage

logger = get_logger(__name__)

WISHLIST_STORAGE_KEY = "fashionkart-wishlist"


class Wishlist(PersistentCollection[Product]):
    """Saved products, one entry per product id. Changes are announced via the notifier."""

    kind = "wishlist"

    def __init__(
        self,
        storage: LocalStorage,
        notifier: Notifier,
        key: str = WISHLIST_STORAGE_KEY,
    ):
        self._notifier = notifier
        super().__init__(storage, key)

    def _decode(self, raw: Dict[str, Any]) -> Product:
        return Product.from_dict(raw)

    def _encode(self, entry: Product) -> Dict[str, Any]:
        return entry.to_dict()

    def contains(self, product_id: str) -> bool:
        return any(p.id == product_id for p in self._entries)

    def __contains__(self, product_id: object) -> bool:
        return isinstance(product_id, str) and self.contains(product_id)

    def add(self, product: Product) -> bool:
        if self.contains(product.id):
            logger.debug("Product %s already in wishlist.", product.id)
            return False
        self._entries.append(product)
        self._commit()
        self._notifier.notify(
            "Added to wishlist",
            f"{product.name} has been added to your wishlist.",
        )
        return True

    def remove(self, product_id: str) -> bool:
        removed = next((p for p in self._entries if p.id == product_id), None)
        if removed is None:
            return False
        self._entries = [p for p in self._entries if p.id != product_id]
        self._commit()
        self._notifier.notify(
            "Removed from wishlist",
            f"{removed.name} has been removed from your wishlist.",
        )
        return True

    def clear(self) -> None:
        self._entries = []
        self._commit()
        self._notifier.notify(
            "Wishlist cleared",
            "All items have been removed from your wishlist.",
        )

    @property
    def total_items(self) -> int:
        return len(self._entries)
