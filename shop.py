import os

from storefront import build_storefront
from storefront.app import Storefront
from storefront.catalog import featured_products
from storefront.logger import get_logger

logger = get_logger(__name__)

MODE = os.getenv("MODE", "summary").lower()  # "summary" or "clear"


def log_summary(shop: Storefront) -> None:
    page = featured_products(shop.client)
    if page.is_using_sample_data:
        logger.warning(
            "Demo mode: backend not connected; %d sample products available.",
            len(page.products),
        )
    else:
        logger.info("Catalog online: %d featured products.", len(page.products))

    user = shop.auth.check_auth()
    logger.info("Signed in as: %s", user.email if user else "<guest>")

    logger.info(
        "Cart: %d items, total %s.", shop.cart.total_items, shop.cart.total_price
    )
    for entry in shop.cart:
        logger.info(
            "  %s (size %s) x%d = %s",
            entry.product.name, entry.size, entry.quantity, entry.subtotal,
        )

    logger.info("Wishlist: %d items.", shop.wishlist.total_items)
    for product in shop.wishlist:
        logger.info("  %s (%s)", product.name, product.price)


def clear_all(shop: Storefront) -> None:
    shop.cart.clear()
    shop.wishlist.clear()
    for notice in shop.notifier.drain():
        logger.info("%s: %s", notice.title, notice.description)


def run_once() -> int:
    shop = build_storefront()
    try:
        if MODE == "clear":
            clear_all(shop)
        elif MODE == "summary":
            log_summary(shop)
        else:
            logger.error("Unknown MODE '%s'; expected 'summary' or 'clear'.", MODE)
            return 1
    finally:
        shop.close()
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(run_once())
    except Exception as e:
        logger.exception("Fatal storefront error: %s", e)
        raise SystemExit(2)
