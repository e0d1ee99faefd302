import json
from http import HTTPStatus
from http.client import HTTPMessage
from types import SimpleNamespace

import requests
from requests.adapters import BaseAdapter

from storefront.api_client import ApiClient
from storefront.models import Product


def make_product(product_id="p1", price="100", name=None, **extra):
    return Product(id=product_id, name=name or f"Product {product_id}", price=price, **extra)


def make_response(status=200, body=None, text=None):
    response = requests.Response()
    response.status_code = status
    response.reason = HTTPStatus(status).phrase
    if text is None:
        text = json.dumps(body if body is not None else {})
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


class FakeSession:
    """Stands in for requests.Session: records calls, replays canned responses."""

    def __init__(self, *responses, error=None):
        self.responses = list(responses)
        self.error = error
        self.calls = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]

    def close(self):
        self.closed = True


def fake_client(*responses, error=None):
    session = FakeSession(*responses, error=error)
    return ApiClient("http://shop.test/api", session=session), session


class RecordingAdapter(BaseAdapter):
    """
    Transport adapter for a real requests.Session: keeps every prepared
    request and answers with canned responses. A response may carry
    Set-Cookie values, which the session stores in its jar.
    """

    def __init__(self, *responses):
        super().__init__()
        self.responses = list(responses)
        self.sent = []

    def send(self, request, **kwargs):
        self.sent.append(request)
        status, body, cookies = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        response = make_response(status, body)
        response.request = request
        response.url = request.url
        headers = HTTPMessage()
        for cookie in cookies:
            headers["Set-Cookie"] = cookie
        response.raw = SimpleNamespace(_original_response=SimpleNamespace(msg=headers))
        return response

    def close(self):
        pass


def session_client(*responses):
    """ApiClient over a real requests.Session; responses are (status, body, set_cookies)."""
    adapter = RecordingAdapter(*responses)
    session = requests.Session()
    session.mount("http://shop.test", adapter)
    return ApiClient("http://shop.test/api", session=session), adapter
