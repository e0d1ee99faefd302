# storefront/app.py
from typing import Optional

from .api_client import ApiClient
from .auth import AuthSession
from .cart import Cart
from .logger import get_logger
from .notifications import Notifier
from .storage import LocalStorage
from .wishlist import Wishlist

logger = get_logger(__name__)


class Storefront:
    """
    Root of the client state: owns the cart, the wishlist and the auth session.

    Build one per application session and hand it to whatever renders the
    store. The collections are hydrated here, before anything can mutate them.
    """

    def __init__(self, storage: LocalStorage, client: ApiClient, notifier: Notifier):
        self.storage = storage
        self.client = client
        self.notifier = notifier
        self.cart = Cart(storage)
        self.wishlist = Wishlist(storage, notifier)
        self.auth = AuthSession(client)
        logger.info(
            "Storefront ready: cart=%d items, wishlist=%d items, api=%s",
            self.cart.total_items, self.wishlist.total_items, client.base_url,
        )

    def close(self) -> None:
        self.client.close()


def build_storefront(
    db_path: Optional[str] = None,
    base_url: Optional[str] = None,
) -> Storefront:
    return Storefront(
        storage=LocalStorage(db_path),
        client=ApiClient(base_url),
        notifier=Notifier(),
    )
