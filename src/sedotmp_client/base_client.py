from .exceptions import ApiCallError, ResponseFormatError
from typing import Any, Dict, List, Optional, Union
from urllib.parse import quote_plus
import requests
import logging
import json

Decoded = Union[Dict[str, Any], List[Any]]


def get_logger(name: str = "sedotmp") -> logging.Logger:
    """Return the package logger, attaching a console handler once."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


log = get_logger()


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


def _loads(raw: bytes) -> Any:
    # NaN and Infinity are not JSON
    return json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)


def parse_response_body(
    raw_body: Union[bytes, str],
    content_type: str
) -> Decoded:
    """
    Decode a response body into plain Python containers.

    Two wire formats are supported:

    - NDJSON, selected when `content_type` contains "ndjson". Each line is
      decoded independently and the objects/arrays are returned as a list,
      in input order. Blank lines, a lone "0" (chunked-transfer trailer)
      and lines that are not valid UTF-8 JSON containers are dropped.
    - Plain JSON otherwise. The whole body must be an object or an array.

    Parameters
    ----------
    raw_body : bytes or str
        Response payload.
    content_type : str
        Value of the Content-Type response header (may be empty).

    Returns
    -------
    dict or list
        Parsed body. NDJSON always yields a list, possibly empty.

    Raises
    ------
    ResponseFormatError
        If a plain JSON body is not a JSON object or array.
    """
    if isinstance(raw_body, str):
        raw_body = raw_body.encode("utf-8")

    if "ndjson" in (content_type or ""):
        records: List[Any] = []
        for line in raw_body.split(b"\n"):
            line = line.strip()
            if not line or line == b"0":
                continue
            try:
                value = _loads(line)
            except (UnicodeDecodeError, ValueError):
                log.debug(f"Skipping malformed NDJSON line: {line[:80]!r}")
                continue
            if isinstance(value, (dict, list)):
                records.append(value)
            else:
                log.debug(f"Skipping scalar NDJSON line: {line[:80]!r}")
        return records

    try:
        data = _loads(raw_body)
    except (UnicodeDecodeError, ValueError) as e:
        raise ResponseFormatError(
            "Invalid response format from API"
        ) from e

    if not isinstance(data, (dict, list)):
        raise ResponseFormatError("Invalid response format from API")

    return data


def _encode_filter(filter: Dict[str, Any]) -> str:
    """Compact JSON with escaped slashes, then URL-encoded."""
    encoded = json.dumps(filter, separators=(",", ":")).replace("/", "\\/")
    return quote_plus(encoded)


def _is_set(
    mapping: Dict[str, Any],
    *keys: str
) -> bool:
    return all(mapping.get(k) is not None for k in keys)


def build_query(
    *,
    dimensions: Optional[List[str]] = None,
    filter: Optional[Dict[str, Any]] = None,
    sort: Optional[str] = None,
    pagination: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Serialize report query parameters, preserving their order.

    Parameters
    ----------
    dimensions : list of str, optional
        Emitted as repeated `dimensions=` pairs.
    filter : dict, optional
        JSON-encoded, then URL-encoded into a single `filter=` pair.
    sort : str, optional
        Emitted as `sort=`.
    pagination : dict, optional
        Either `{"offset", "limit"}` or `{"page", "size"}`. Offset/limit
        wins when both shapes are present.

    Returns
    -------
    str
        Query string without the leading "?" (empty if nothing to send).
    """
    pairs: List[str] = []

    for dimension in dimensions or []:
        pairs.append(f"dimensions={quote_plus(str(dimension))}")

    if filter:
        pairs.append(f"filter={_encode_filter(filter)}")

    if sort is not None:
        pairs.append(f"sort={quote_plus(sort)}")

    if pagination is not None:
        if _is_set(pagination, "offset", "limit"):
            pairs.append(f"offset={pagination['offset']}")
            pairs.append(f"limit={pagination['limit']}")
        elif _is_set(pagination, "page", "size"):
            pairs.append(f"page={pagination['page']}")
            pairs.append(f"size={pagination['size']}")

    return "&".join(pairs)


def build_page_query(
    *,
    filter: Optional[Dict[str, Any]] = None,
    page: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Serialize the filter/page parameters accepted by template listings.

    Unlike `build_query`, each of `page`, `size` and `sort` is emitted
    on its own whenever present in `page`.
    """
    pairs: List[str] = []

    if filter:
        pairs.append(f"filter={_encode_filter(filter)}")

    if page is not None:
        if page.get("page") is not None:
            pairs.append(f"page={page['page']}")
        if page.get("size") is not None:
            pairs.append(f"size={page['size']}")
        if page.get("sort") is not None:
            pairs.append(f"sort={quote_plus(str(page['sort']))}")

    return "&".join(pairs)


class BaseAPIClient:
    """
    Base HTTP client for SedoTMP API endpoints.

    Builds resource URLs, attaches the bearer token obtained from the
    shared `TokenManager`, sends the request through its transport and
    decodes the response body. Intended for inheritance by the resource
    groups (`Content`, `Platform`), each of which sets `segment`.

    No retry and no re-authentication is attempted: a 401 on a resource
    call surfaces as `ApiCallError` like any other non-2xx status.
    """

    segment = ""

    def __init__(
        self,
        *,
        token_manager
    ) -> None:
        self.token_manager = token_manager

    def build_url(
        self,
        path: str,
        resource_id: Optional[str] = None,
        query: str = ""
    ) -> str:
        """Return base/segment/version/path[/id][?query]."""
        tm = self.token_manager
        url = f"{tm.base_url}/{self.segment}/{tm.api_version}/{path}"
        if resource_id is not None:
            quoted = requests.utils.quote(str(resource_id), safe="")
            url = f"{url}/{quoted}"
        if query:
            url = f"{url}?{query}"
        return url

    def make_request(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        body: Optional[Dict[str, Any]] = None,
        decode: bool = True
    ) -> Optional[Decoded]:
        """
        Execute an authenticated request and decode its body.

        Parameters
        ----------
        method : str
            HTTP verb ("GET", "POST", "PUT", "DELETE").
        url : str
            Full endpoint URL, query string included.
        operation : str
            Human-readable action used in error messages, e.g.
            "fetch categories from".
        body : dict, optional
            Request body, sent verbatim.
        decode : bool, default=True
            When False the body is ignored and None is returned.

        Returns
        -------
        dict, list or None
            Decoded response body.

        Raises
        ------
        AuthenticationError
            If the lazy token exchange fails.
        ApiCallError
            On connection errors or non-2xx responses.
        ResponseFormatError
            If a plain JSON body is not a container.
        """
        token = self.token_manager.get_token()
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

        log.info(f"{method} {url}")
        try:
            resp = self.token_manager.http_client.request(
                method,
                url,
                headers=headers,
                json=body
            )
            resp.raise_for_status()
        except requests.exceptions.RequestException as e:
            status = getattr(e.response, "status_code", None)
            log.error(f"Failed to {operation} SedoTMP API: {e}")
            raise ApiCallError(
                f"Failed to {operation} SedoTMP API: {e}",
                cause=e,
                status_code=status
            ) from e

        if not decode:
            return None

        return parse_response_body(
            resp.content,
            resp.headers.get("Content-Type", "")
        )
