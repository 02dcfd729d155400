from .endpoints import Content, Platform
from .auth import TokenManager
from typing import Optional
import requests


class SedoTmpClient:
    """
    Central entry point for the SedoTMP API modules.
    Aggregates the Content and Platform sub-clients around one TokenManager.
    """

    def __init__(
        self,
        *,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        api_version: Optional[str] = None,
        base_url: Optional[str] = None,
        auth_url: Optional[str] = None,
        http_client: Optional[requests.Session] = None,
        token_manager: Optional[TokenManager] = None,
    ):
        if token_manager is None:
            token_manager = TokenManager(
                client_id,
                client_secret,
                base_url=base_url,
                auth_url=auth_url,
                api_version=api_version,
                http_client=http_client,
            )
        self.token_manager = token_manager

        # Sub-clients share the same TokenManager instance
        self.content = Content(token_manager=token_manager)
        self.platform = Platform(token_manager=token_manager)

    def get_access_token(self) -> str:
        """Return the bearer token, authenticating on first use."""
        return self.token_manager.get_token()

    def set_access_token(self, token: str) -> "SedoTmpClient":
        self.token_manager.set_token(token)
        return self

    def has_access_token(self) -> bool:
        return self.token_manager.has_token()
