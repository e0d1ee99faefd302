import logging
from decimal import Decimal

import pytest

from storefront.api_client import AuthRequiredError, BackendUnavailableError
from storefront.auth import AuthSession
from storefront.cart import Cart
from storefront.models import ShippingAddress, User
from storefront.orders import (
    OrderError,
    build_order_payload,
    cancel_order,
    delivery_fee,
    final_total,
    get_orders,
    order_details,
    place_order,
    update_order,
)

from helpers import fake_client, make_product, make_response

ADDRESS = ShippingAddress(
    street="12 MG Road", city="Pune", state="MH", pincode="411001", phone="9999999999"
)


@pytest.fixture
def cart(storage):
    cart = Cart(storage)
    cart.add(make_product("a", price="100"), "M", 2)
    cart.add(make_product("b", price="250.50"), "L", 1)
    return cart


def _logged_in(client):
    auth = AuthSession(client)
    auth.user = User(id="u1", name="Asha", email="asha@example.com")
    return auth


def test_payload(cart):
    payload = build_order_payload(cart, ADDRESS)

    assert payload["products"] == [
        {"productId": "a", "quantity": 2, "size": "M", "price": 100.0},
        {"productId": "b", "quantity": 1, "size": "L", "price": 250.5},
    ]
    assert payload["totalAmount"] == 450.5
    assert payload["shippingAddress"]["pincode"] == "411001"


def test_delivery_fee():
    assert delivery_fee(Decimal("999")) == Decimal("99")
    assert delivery_fee(Decimal("999.01")) == Decimal("0")


def test_final_total(cart):
    assert final_total(cart) == Decimal("549.50")


def test_place_order_clears_cart_and_returns_payment_link(cart):
    client, session = fake_client(make_response(200, {"payment_link": "https://pay.test/x"}))

    result = place_order(client, cart, ADDRESS, auth=_logged_in(client))

    assert result.payment_link == "https://pay.test/x"
    assert len(cart) == 0
    assert session.calls[0]["url"].endswith("/consumer/placeorder")


def test_place_order_failure_keeps_cart(cart):
    client, _ = fake_client(make_response(500, {"error": "boom"}))

    with pytest.raises(OrderError):
        place_order(client, cart, ADDRESS, auth=_logged_in(client))

    assert cart.total_items == 3


def test_place_order_offline_keeps_cart(cart, offline_client):
    with pytest.raises(BackendUnavailableError):
        place_order(offline_client, cart, ADDRESS)

    assert cart.total_items == 3


def test_place_order_requires_login(cart):
    client, session = fake_client(make_response(200))

    with pytest.raises(AuthRequiredError):
        place_order(client, cart, ADDRESS, auth=AuthSession(client))

    assert session.calls == []


def test_place_order_session_expired(cart):
    client, _ = fake_client(make_response(401, {"message": "expired"}))
    auth = _logged_in(client)

    with pytest.raises(AuthRequiredError):
        place_order(client, cart, ADDRESS, auth=auth)

    assert not auth.is_authenticated
    assert len(cart) == 2


def test_place_order_empty_cart(storage):
    client, session = fake_client(make_response(200))

    with pytest.raises(OrderError, match="empty"):
        place_order(client, Cart(storage), ADDRESS)

    assert session.calls == []


def test_get_orders():
    body = {"orders": [{
        "_id": "o1",
        "userId": "u1",
        "products": [{"productId": "a", "quantity": 2, "size": "M", "price": 100}],
        "totalAmount": 200,
        "status": "shipped",
        "shippingAddress": {"street": "12 MG Road", "city": "Pune"},
        "createdAt": "2024-01-01T00:00:00Z",
    }]}
    client, _ = fake_client(make_response(200, body))

    orders = get_orders(client)

    assert len(orders) == 1
    assert orders[0].status == "shipped"
    assert orders[0].products[0].quantity == 2
    assert orders[0].shipping_address.city == "Pune"


def test_get_orders_tolerates_null_totals_and_skips_junk(caplog):
    body = {"orders": [
        {"_id": "o1", "totalAmount": None, "products": [{"productId": "a", "quantity": None, "price": None}]},
        {"_id": "o2", "totalAmount": "abc"},
        {"_id": "o3", "totalAmount": 5},
    ]}
    client, _ = fake_client(make_response(200, body))

    with caplog.at_level(logging.WARNING):
        orders = get_orders(client)

    assert [o.id for o in orders] == ["o1", "o3"]
    assert orders[0].total_amount == 0.0
    assert (orders[0].products[0].quantity, orders[0].products[0].price) == (0, 0.0)
    assert "Skipping undecodable order o2" in caplog.text


def test_get_orders_offline_is_empty(offline_client):
    assert get_orders(offline_client) == []


def test_update_and_cancel():
    client, session = fake_client(make_response(200, {"message": "ok"}))

    update_order(client, "o1", "1 New Street", "8888888888")
    cancel_order(client, "o1")

    update, cancel = session.calls
    assert update["method"] == "PUT"
    assert update["url"].endswith("/consumer/updateorder/o1")
    assert update["json"] == {"shippingAddress": {"street": "1 New Street", "phone": "8888888888"}}
    assert cancel["method"] == "DELETE"
    assert cancel["url"].endswith("/consumer/cancleorder/o1")


def test_cancel_rejected():
    client, _ = fake_client(make_response(404, {"message": "not found"}))

    with pytest.raises(OrderError):
        cancel_order(client, "missing")


def test_order_details_sends_filters():
    body = {"orders": [{"_id": "o1"}], "totalPages": 3, "currentPage": 2, "totalOrders": 21}
    client, session = fake_client(make_response(200, body))

    page = order_details(client, page=2, search="shirt", date_from="2024-01-01")

    assert session.calls[0]["json"] == {"page": 2, "limit": 10, "search": "shirt", "dateFrom": "2024-01-01"}
    assert [o.id for o in page.orders] == ["o1"]
    assert (page.total_pages, page.current_page, page.total_orders) == (3, 2, 21)


def test_order_details_with_junk_page_counters():
    body = {"orders": [{"_id": "o1"}], "totalPages": "abc", "currentPage": None, "totalOrders": [1]}
    client, _ = fake_client(make_response(200, body))

    page = order_details(client)

    assert [o.id for o in page.orders] == ["o1"]
    assert (page.total_pages, page.current_page, page.total_orders) == (1, 1, 0)


def test_order_details_offline(offline_client):
    page = order_details(offline_client)

    assert page.orders == []
    assert page.total_pages == 1
