"""HTTP paged repository for the ledger REST gateway.

This module implements the PagedRepository protocol on top of httpx. It only
translates QueryParams into query-string parameters, decodes the page body
and maps failures into the ledger-sdk error taxonomy. Turning raw JSON
objects into domain models is delegated to a caller-supplied mapper.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

import httpx

from ...config.settings import LedgerSettings, get_settings
from ...core.entities.page import Page
from ...core.exceptions import ConfigurationError, ServerError, TransportError
from ...core.value_objects.query_params import QueryParams

logger = logging.getLogger(__name__)


def _identity(body: Dict[str, Any]) -> Any:
    return body


class HttpPagedRepository:
    """PagedRepository backed by one search route of the REST gateway.

    Example:
        async with HttpPagedRepository("http://localhost:3000", "/blocks") as blocks:
            page = await blocks.search(QueryParams(page_size=20))
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        path: str = "/",
        mapper: Callable[[Dict[str, Any]], Any] = _identity,
        client: Optional[httpx.AsyncClient] = None,
        settings: Optional[LedgerSettings] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """Initialize the repository.

        Args:
            base_url: Gateway URL; falls back to ``settings.base_url``
            path: Search route, e.g. ``/blocks`` or ``/transactions/confirmed``
            mapper: Converts one JSON object of the page into an item
            client: Shared httpx client; created (and owned) when omitted
            settings: Settings used for defaults, ``get_settings()`` if omitted
            headers: Extra headers for requests made by an owned client
        """
        self._settings = settings or get_settings()
        resolved_url = base_url or self._settings.base_url
        if not resolved_url:
            raise ConfigurationError(
                "No base URL given and LEDGER_BASE_URL is not set",
                details={"path": path},
            )

        self._base_url = resolved_url.rstrip("/")
        self._path = "/" + path.lstrip("/")
        self._mapper = mapper

        self._owns_client = client is None
        if client is None:
            default_headers = {
                "User-Agent": self._settings.user_agent,
                "Accept": "application/json",
            }
            if headers:
                default_headers.update(headers)
            client = httpx.AsyncClient(
                headers=default_headers,
                timeout=self._settings.request_timeout,
            )
        self._client = client

    @property
    def url(self) -> str:
        return f"{self._base_url}{self._path}"

    async def __aenter__(self) -> "HttpPagedRepository":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this repository created it."""
        if self._owns_client:
            await self._client.aclose()

    async def search(self, params: QueryParams) -> Page[Any]:
        """Fetch one page from the search route.

        Raises:
            TransportError: Network failure or undecodable body
            ServerError: Non-success HTTP status
        """
        query = params.to_query_params()
        logger.debug("GET %s params=%s", self.url, query)

        try:
            response = await self._client.get(self.url, params=query)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning("Search %s failed with HTTP %d", self.url, status_code)
            raise ServerError(
                f"Ledger search {self._path} returned HTTP {status_code}",
                status_code=status_code,
                details={"url": self.url, "body": e.response.text[:200]},
            ) from e
        except httpx.RequestError as e:
            logger.warning("Search %s failed: %s", self.url, e)
            raise TransportError(
                f"Ledger search {self._path} failed: {e}",
                details={"url": self.url},
            ) from e

        return Page.of([self._mapper(entry) for entry in self._decode(response)])

    def _decode(self, response: httpx.Response) -> List[Dict[str, Any]]:
        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(
                f"Ledger search {self._path} returned a non-JSON body",
                details={"url": self.url},
            ) from e

        # Older gateways answer with a bare array, newer ones wrap it in "data".
        if isinstance(body, dict) and isinstance(body.get("data"), list):
            return body["data"]
        if isinstance(body, list):
            return body
        raise TransportError(
            f"Ledger search {self._path} returned an unexpected body",
            details={"url": self.url, "body_type": type(body).__name__},
        )
