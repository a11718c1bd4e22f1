"""Main record store client class.

RecordStoreClient provides namespaced access to the sample record store
through sub-client properties (``client.orders``, ``client.lines``).

Example:
    with RecordStoreClient(base_url="http://localhost:8000") as client:
        order = client.orders.create()
        client.orders.close(order.id)
"""

from typing import Any

from client._http import HTTPClient
from client._lines import LinesClient
from client._orders import OrdersClient


class RecordStoreClient:
    """Synchronous client for the record store REST API.

    Supports the context manager protocol for automatic resource cleanup.

    Attributes:
        base_url: The base URL of the record store.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        transport: Any = None,
    ) -> None:
        """Initialize the record store client.

        Args:
            base_url: The base URL of the record store (default: http://localhost:8000).
            timeout: Request timeout in seconds (default: 30.0).
            transport: Custom HTTP transport (e.g., a TestClient bridge for testing).
        """
        self._base_url = base_url
        self._timeout = timeout

        self._http = HTTPClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

        # Sub-clients are created lazily by their properties
        self._orders: OrdersClient | None = None
        self._lines: LinesClient | None = None

    @classmethod
    def from_settings(cls, settings: Any, transport: Any = None) -> "RecordStoreClient":
        """Build a client from RecordStoreSettings."""
        return cls(base_url=settings.base_url, timeout=settings.timeout, transport=transport)

    def __enter__(self) -> "RecordStoreClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def orders(self) -> OrdersClient:
        """Access order operations (create, close, cancel, lines, ...)."""
        if self._orders is None:
            self._orders = OrdersClient(self._http)
        return self._orders

    @property
    def lines(self) -> LinesClient:
        """Access order line operations (get, delete)."""
        if self._lines is None:
            self._lines = LinesClient(self._http)
        return self._lines

    def health(self) -> dict[str, Any]:
        """Check that the record store is up."""
        return self._http.get("/health")
