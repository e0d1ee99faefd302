import socket

import pytest

from storefront.api_client import ApiClient
from storefront.notifications import Notifier
from storefront.storage import LocalStorage


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(str(tmp_path / "state.sqlite3"))


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def closed_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        port = s.getsockname()[1]
    return port


@pytest.fixture
def offline_client(closed_port):
    client = ApiClient(f"http://127.0.0.1:{closed_port}/api", timeout=5)
    yield client
    client.close()
