"""Base class for all sub-clients.

This module provides the base class that the order and line sub-clients
inherit from. It gives them access to the shared HTTP client.

This is an internal module and should not be imported directly by users.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from client._http import HTTPClient


class BaseClient:
    """Base class for synchronous sub-clients.

    Attributes:
        _http: The shared HTTP client for making requests.
    """

    def __init__(self, http_client: "HTTPClient") -> None:
        self._http = http_client

    def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make a GET request.

        Args:
            path: The URL path.
            params: Query parameters.

        Returns:
            The parsed JSON response.
        """
        return self._http.get(path, params=params)

    def _post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make a POST request.

        Args:
            path: The URL path.
            json: JSON body to send.
            params: Query parameters.

        Returns:
            The parsed JSON response.
        """
        return self._http.post(path, json=json, params=params)

    def _delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make a DELETE request.

        Args:
            path: The URL path.
            params: Query parameters.

        Returns:
            The parsed JSON response.
        """
        return self._http.delete(path, params=params)
