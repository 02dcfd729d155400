"""
Python client for the SedoTMP advertising-platform API.

```python
from sedotmp_client import SedoTmpClient

client = SedoTmpClient(client_id="...", client_secret="...")

categories = client.content.get_categories()
report = client.platform.get_campaign_report(
    dimensions=["DATE"],
    pagination={"offset": 0, "limit": 100},
)
```

The first API call performs the OAuth2 client-credentials exchange; the
token is then reused for the lifetime of the client.
"""

from .client import SedoTmpClient
from .auth import TokenManager
from .base_client import parse_response_body, build_query
from .exceptions import (
    SedoTmpError,
    AuthenticationError,
    ResponseFormatError,
    ApiCallError,
)

__all__ = [
    "SedoTmpClient",
    "TokenManager",
    "parse_response_body",
    "build_query",
    "SedoTmpError",
    "AuthenticationError",
    "ResponseFormatError",
    "ApiCallError",
]
