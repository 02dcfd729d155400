from .exceptions import AuthenticationError
from typing import Dict, Optional
from threading import Lock
import requests
import logging
import os

DEFAULT_BASE_URL = "https://api.sedotmp.com"
DEFAULT_AUTH_URL = "https://auth.sedotmp.com/oauth/token"
DEFAULT_API_VERSION = "v1"

log = logging.getLogger("sedotmp.auth")


class TokenManager:
    """
    Manages the OAuth2 client-credentials session for the SedoTMP API.

    Responsibilities:
    - Hold the credentials, API/auth URLs, API version and HTTP transport.
    - Perform the token exchange lazily, the first time a token is needed.
    - Cache the token for the lifetime of the instance. Expiry is not
      tracked: a cached token is never refreshed automatically.
    - Ensure thread-safe access to the token using a mutex.
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        auth_url: Optional[str] = None,
        api_version: Optional[str] = None,
        http_client: Optional[requests.Session] = None,
    ) -> None:
        """
        Initializes the TokenManager.

        Args:
            client_id (str, optional): OAuth client id. Falls back to the
                SEDOTMP_CLIENT_ID environment variable.
            client_secret (str, optional): OAuth client secret. Falls back to
                the SEDOTMP_CLIENT_SECRET environment variable.
            base_url (str, optional): API root. Falls back to SEDOTMP_BASE_URL,
                then "https://api.sedotmp.com".
            auth_url (str, optional): Token endpoint. Falls back to
                SEDOTMP_AUTH_URL, then "https://auth.sedotmp.com/oauth/token".
            api_version (str, optional): API version path segment. Falls back
                to SEDOTMP_API_VERSION, then "v1".
            http_client (requests.Session, optional): Transport used for every
                call. A new `requests.Session` is created when omitted.

        Raises:
            ValueError: If no client id or client secret can be resolved.
        """
        client_id = client_id or os.getenv("SEDOTMP_CLIENT_ID")
        client_secret = client_secret or os.getenv("SEDOTMP_CLIENT_SECRET")
        if not client_id:
            raise ValueError("Missing client_id (or SEDOTMP_CLIENT_ID)")
        if not client_secret:
            raise ValueError(
                "Missing client_secret (or SEDOTMP_CLIENT_SECRET)"
            )

        self.client_id = client_id
        self.client_secret = client_secret
        self.base_url = (
            base_url or os.getenv("SEDOTMP_BASE_URL", DEFAULT_BASE_URL)
        ).rstrip("/")
        self.auth_url = auth_url or os.getenv(
            "SEDOTMP_AUTH_URL", DEFAULT_AUTH_URL
        )
        self.api_version = api_version or os.getenv(
            "SEDOTMP_API_VERSION", DEFAULT_API_VERSION
        )
        self.http_client = http_client or requests.Session()

        self._access_token: Optional[str] = None

        # Guards the check-then-authenticate sequence in get_token() so that
        # concurrent callers trigger a single token exchange.
        self._lock = Lock()

    @property
    def access_token(self) -> Optional[str]:
        """The cached token, or None. Never triggers authentication."""
        return self._access_token

    def has_token(self) -> bool:
        return bool(self._access_token)

    def set_token(
        self,
        token: str
    ) -> "TokenManager":
        """
        Inject an access token, bypassing the OAuth exchange.

        Any previously cached token is overwritten.

        Returns:
            TokenManager: self, so calls can be chained.
        """
        self._access_token = token
        return self

    def clear_token(self) -> None:
        """Forget the cached token; the next get_token() authenticates."""
        self._access_token = None

    def authenticate(self) -> str:
        """
        Exchange the client credentials for a new access token.

        Posts a JSON client-credentials grant to the auth URL. The audience
        is the API base URL followed by a slash.

        Returns:
            str: The new access token, also cached on the instance.

        Raises:
            AuthenticationError: If the request cannot be sent, the server
            does not answer 200, or the body lacks an `access_token`.
        """
        payload = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "audience": f"{self.base_url}/",
            "grant_type": "client_credentials",
        }
        headers = {"Content-Type": "application/json"}

        log.info(f"Authenticating against {self.auth_url}")
        try:
            response = self.http_client.post(
                self.auth_url,
                json=payload,
                headers=headers
            )
        except requests.exceptions.RequestException as e:
            raise AuthenticationError(
                f"Failed to connect to SedoTMP auth server: {e}"
            ) from e

        if response.status_code != 200:
            log.error(
                f"Authentication failed with status {response.status_code}"
            )
            raise AuthenticationError(
                "Failed to authenticate with SedoTMP API "
                f"(status {response.status_code})"
            )

        try:
            token_data: Dict = response.json()
        except ValueError as e:
            raise AuthenticationError(
                "Authentication response is not valid JSON"
            ) from e

        token = (
            token_data.get("access_token")
            if isinstance(token_data, dict) else None
        )
        if not token or not isinstance(token, str):
            raise AuthenticationError("No access token in response")

        self._access_token = token
        return self._access_token

    def get_token(self) -> str:
        """
        Retrieve the access token, authenticating on first use.

        Only one thread performs the exchange when no token is cached;
        others wait for it and reuse the result.

        Returns:
            str: The cached or newly obtained access token.
        """
        # Fast path, no lock
        if self._access_token:
            return self._access_token

        with self._lock:
            # Re-check after acquiring the lock to avoid a duplicate exchange
            if self._access_token:
                return self._access_token

            return self.authenticate()
