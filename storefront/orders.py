# storefront/orders.py
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .api_client import ApiClient, ApiResponse, AuthRequiredError, BackendUnavailableError
from .auth import AuthSession
from .cart import Cart
from .logger import get_logger
from .models import Order, ShippingAddress, page_number

logger = get_logger(__name__)

FREE_DELIVERY_THRESHOLD = Decimal("999")
DELIVERY_FEE = Decimal("99")


class OrderError(Exception):
    """An order call was rejected or the cart cannot be checked out."""


@dataclass
class OrderResult:
    payment_link: Optional[str] = None
    body: Optional[Dict[str, Any]] = None


def delivery_fee(total: Decimal) -> Decimal:
    return Decimal("0") if total > FREE_DELIVERY_THRESHOLD else DELIVERY_FEE


def final_total(cart: Cart) -> Decimal:
    total = cart.total_price
    return total + delivery_fee(total)


def build_order_payload(cart: Cart, address: ShippingAddress) -> Dict[str, Any]:
    return {
        "products": [
            {
                "productId": entry.product.id,
                "quantity": entry.quantity,
                "size": entry.size,
                "price": float(entry.product.unit_price),
            }
            for entry in cart
        ],
        "totalAmount": float(cart.total_price),
        "shippingAddress": address.to_dict(),
    }


def _check(response: ApiResponse, action: str) -> ApiResponse:
    if response.auth_required:
        raise AuthRequiredError(f"Login required to {action}.")
    if response.unavailable and response.fallback:
        raise BackendUnavailableError("Backend not available. Please try again later.")
    if not response.ok:
        raise OrderError(f"Failed to {action}: {response.status} {response.status_text}")
    return response


def _json_or_none(response: ApiResponse) -> Optional[Any]:
    try:
        return response.json()
    except ValueError:
        logger.warning("Order response body is not JSON.")
        return None


def _decode_orders(raw: List[Any]) -> List[Order]:
    orders: List[Order] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        try:
            orders.append(Order.from_dict(item))
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning("Skipping undecodable order %s: %s", item.get("_id"), e)
    return orders


def place_order(
    client: ApiClient,
    cart: Cart,
    address: ShippingAddress,
    auth: Optional[AuthSession] = None,
) -> OrderResult:
    """
    Submit the cart as an order. The cart is cleared only once the
    backend has accepted the order.
    """
    if not len(cart):
        raise OrderError("Your cart is empty.")
    if auth is not None and not auth.is_authenticated:
        raise AuthRequiredError("You need to be logged in to place an order.")

    payload = build_order_payload(cart, address)
    response = client.post("/consumer/placeorder", payload)
    if auth is not None:
        auth.handle(response)
    _check(response, "place order")

    body = _json_or_none(response)
    result = OrderResult(body=body if isinstance(body, dict) else None)
    if result.body:
        result.payment_link = result.body.get("payment_link")

    cart.clear()
    logger.info(
        "Order placed: %d items, total %s.",
        sum(line["quantity"] for line in payload["products"]),
        payload["totalAmount"],
    )
    return result


def get_orders(client: ApiClient) -> List[Order]:
    response = client.get("/consumer/getallorders")
    if not response.ok:
        logger.info("Order history unavailable (%d).", response.status)
        return []
    data = _json_or_none(response)
    if isinstance(data, dict):
        data = data.get("orders") or []
    if not isinstance(data, list):
        return []
    return _decode_orders(data)


def update_order(client: ApiClient, order_id: str, street: str, phone: str) -> Any:
    response = client.put(
        f"/consumer/updateorder/{order_id}",
        {"shippingAddress": {"street": street, "phone": phone}},
    )
    _check(response, "update order")
    logger.info("Order %s updated.", order_id)
    return _json_or_none(response)


def cancel_order(client: ApiClient, order_id: str) -> Any:
    # Endpoint name is the backend's spelling.
    response = client.delete(f"/consumer/cancleorder/{order_id}")
    _check(response, "cancel order")
    logger.info("Order %s cancelled.", order_id)
    return _json_or_none(response)


@dataclass
class OrderDetailsPage:
    orders: List[Order]
    total_pages: int = 1
    current_page: int = 1
    total_orders: int = 0


def order_details(
    client: ApiClient,
    page: int = 1,
    limit: int = 10,
    search: Optional[str] = None,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
) -> OrderDetailsPage:
    """Filtered order history; dates are yyyy-mm-dd strings."""
    filters: Dict[str, Any] = {"page": page, "limit": limit}
    if search:
        filters["search"] = search
    if date_from:
        filters["dateFrom"] = date_from
    if date_to:
        filters["dateTo"] = date_to

    response = client.post("/getordersdetails", filters)
    empty = OrderDetailsPage(orders=[])
    if not response.ok:
        return empty

    data = _json_or_none(response)
    meta: Dict[str, Any] = {}
    if isinstance(data, dict):
        meta = data
        data = data.get("orders") or []
    if not isinstance(data, list):
        return empty

    return OrderDetailsPage(
        orders=_decode_orders(data),
        total_pages=page_number(meta.get("totalPages"), 1),
        current_page=page_number(meta.get("currentPage"), 1),
        total_orders=page_number(meta.get("totalOrders"), 0),
    )
