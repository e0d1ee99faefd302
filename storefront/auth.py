# storefront/auth.py
from typing import Optional

from .api_client import ApiClient, ApiResponse, BackendUnavailableError
from .logger import get_logger
from .models import User

logger = get_logger(__name__)


class LoginError(Exception):
    """The backend rejected the credentials."""


class RegistrationError(Exception):
    """The backend rejected the registration."""


def _error_message(response: ApiResponse, default: str) -> str:
    try:
        data = response.json()
    except ValueError:
        return default
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return default


class AuthSession:
    """
    Who is logged in, as far as the backend's session cookie says.

    Login state lives in the client's cookie jar; this object only mirrors
    the user record the backend hands back.
    """

    def __init__(self, client: ApiClient):
        self._client = client
        self.user: Optional[User] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def handle(self, response: ApiResponse) -> ApiResponse:
        """Drop the user when any response says the session is gone."""
        if response.auth_required and self.user is not None:
            logger.info("Session expired for %s; logging out locally.", self.user.email)
            self.user = None
        return response

    def check_auth(self) -> Optional[User]:
        response = self.handle(self._client.get("/getuserdata"))

        if not response.ok:
            logger.info("Skipping auth check - backend answered %d.", response.status)
            return self.user

        try:
            data = response.json()
            self.user = User.from_dict(data)
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning("Failed to parse auth response: %s", e)
        return self.user

    def login(self, email: str, password: str) -> Optional[User]:
        response = self._client.post("/login", {"email": email, "password": password})

        if response.unavailable:
            raise BackendUnavailableError("Backend not available. Please try again later.")

        if not response.ok:
            raise LoginError(_error_message(response, "Login failed"))

        logger.info("Logged in as %s", email)
        return self.check_auth()

    def logout(self) -> None:
        response = self._client.get("/auth/logout")
        if not response.ok:
            logger.warning("Logout call answered %d; clearing user anyway.", response.status)
        self.user = None

    def register(
        self,
        name: str,
        email: str,
        password: str,
        phone: Optional[str] = None,
        role: Optional[str] = None,
    ) -> None:
        payload = {"name": name, "email": email, "password": password}
        if phone:
            payload["phone"] = phone
        if role:
            payload["role"] = role

        response = self._client.post("/register", payload)

        if response.unavailable:
            raise BackendUnavailableError("Backend not available. Please try again later.")

        if not response.ok:
            raise RegistrationError(_error_message(response, "Registration failed"))

        logger.info("Registered %s", email)

    def oauth_url(self, provider: str) -> str:
        """Where to send the browser for a google|facebook sign-in."""
        return f"{self._client.base_url}/auth/{provider}"
