# storefront/api_client.py
import json
import os
from typing import Any, Callable, Dict, Optional

import requests

from .logger import get_logger

logger = get_logger(__name__)

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8080/api")
# Unset means no timeout; requests waits as long as the transport does.
_API_TIMEOUT_RAW = os.getenv("API_TIMEOUT", "").strip()
API_TIMEOUT: Optional[float] = float(_API_TIMEOUT_RAW) if _API_TIMEOUT_RAW else None

FALLBACK_BODY: Dict[str, Any] = {"error": "Backend not available", "fallback": True}


class ApiError(Exception):
    """Base error for conditions the calling layer derives from a response."""


class BackendUnavailableError(ApiError):
    """The backend could not be reached."""


class AuthRequiredError(ApiError):
    """The backend answered 401; the user has to log in again."""


class ApiResponse:
    """
    Uniform result of an API call, whatever happened on the wire.

    The body is read lazily: callers decide whether to call json() or text(),
    and json() raises ValueError when the body is not JSON.
    """

    def __init__(
        self,
        status: int,
        status_text: str,
        read_text: Callable[[], str],
        fallback: bool = False,
    ):
        self.status = status
        self.status_text = status_text
        self.fallback = fallback
        self._read_text = read_text

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def auth_required(self) -> bool:
        return self.status == 401

    @property
    def unavailable(self) -> bool:
        return self.status == 503

    def text(self) -> str:
        return self._read_text()

    def json(self) -> Any:
        return json.loads(self.text())

    @classmethod
    def from_requests(cls, response: requests.Response) -> "ApiResponse":
        return cls(
            status=response.status_code,
            status_text=response.reason or "",
            read_text=lambda: response.text,
        )

    @classmethod
    def service_unavailable(cls) -> "ApiResponse":
        body = json.dumps(FALLBACK_BODY)
        return cls(
            status=503,
            status_text="Service Unavailable",
            read_text=lambda: body,
            fallback=True,
        )

    def __repr__(self) -> str:
        return f"<ApiResponse {self.status} {self.status_text}>"


class ApiClient:
    """
    Single chokepoint for calls to the storefront API.

    One attempt per call, no retry. Transport failures come back as a 503
    ApiResponse with fallback=True instead of raising. Cookies set by the
    backend live in the session and go out with every later call.
    """

    def __init__(
        self,
        base_url: str | None = None,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = (base_url or API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else API_TIMEOUT
        self._session = session or requests.Session()

    def _build_url(self, endpoint: str) -> str:
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"
        return f"{self.base_url}{endpoint}"

    def request(
        self,
        endpoint: str,
        method: str = "GET",
        json: Any = None,
        data: Any = None,
        files: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> ApiResponse:
        url = self._build_url(endpoint)
        method = method.upper()

        request_headers: Dict[str, str] = {}
        # Multipart bodies need the boundary requests puts in Content-Type.
        if files is None:
            request_headers["Content-Type"] = "application/json"
        if headers:
            request_headers.update(headers)

        kwargs: Dict[str, Any] = {"headers": request_headers}
        if json is not None:
            kwargs["json"] = json
        if data is not None:
            kwargs["data"] = data
        if files is not None:
            kwargs["files"] = files
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        try:
            response = self._session.request(method=method, url=url, **kwargs)
        except requests.RequestException as exc:
            logger.warning("API request failed for %s %s: %s", method, url, exc)
            logger.info("Using fallback mode - backend not available")
            return ApiResponse.service_unavailable()

        result = ApiResponse.from_requests(response)
        if result.auth_required:
            logger.info("Authentication required for %s %s", method, url)
        else:
            logger.debug("%s %s -> %d", method, url, result.status)
        return result

    def get(self, endpoint: str) -> ApiResponse:
        return self.request(endpoint, method="GET")

    def post(self, endpoint: str, data: Any = None) -> ApiResponse:
        return self.request(endpoint, method="POST", json=data)

    def put(self, endpoint: str, data: Any = None) -> ApiResponse:
        return self.request(endpoint, method="PUT", json=data)

    def delete(self, endpoint: str) -> ApiResponse:
        return self.request(endpoint, method="DELETE")

    def post_form_data(
        self, endpoint: str, data: Any = None, files: Any = None
    ) -> ApiResponse:
        """
        Send fields and files as multipart/form-data.
        Plain fields go in as (None, value) parts so requests never falls
        back to a urlencoded body when there are no files.
        """
        parts = [(name, (None, str(value))) for name, value in (data or {}).items()]
        if isinstance(files, dict):
            parts.extend(files.items())
        elif files:
            parts.extend(files)
        return self.request(endpoint, method="POST", files=parts)

    def close(self) -> None:
        self._session.close()
