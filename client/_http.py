"""Internal HTTP layer shared by the record store sub-clients.

Every request goes through HTTPClient, which sends it once and turns
failures into the typed exceptions from client.exceptions. Nothing is
retried; scenarios that need to wait for the store use a delay step.

This is an internal module. Import from `client` instead.
"""

from typing import Any, Literal

import httpx

from client.exceptions import (
    APIError,
    ConflictError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)


# The store only exposes these verbs
HttpMethod = Literal["GET", "POST", "DELETE"]


def _parse_error_response(response: httpx.Response) -> tuple[str, str | None, dict | None]:
    """Pull a message, an error type and extra details out of an error body.

    The store answers with an ``{error, detail, type, ...}`` object, while
    FastAPI's own request validation answers with a list under ``detail``.
    Bodies that aren't JSON fall back to their text.

    Args:
        response: The failed HTTP response.

    Returns:
        A ``(message, error_type, details)`` tuple.
    """
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        return text or f"HTTP {response.status_code} error", None, None

    if not isinstance(body, dict):
        return str(body), None, None

    detail = body.get("detail")
    if isinstance(detail, list):
        fields = [
            f"{err.get('loc', ['unknown'])[-1]}: {err.get('msg', 'invalid')}"
            for err in detail
        ]
        return "; ".join(fields), "validation_error", {"errors": detail}
    if isinstance(detail, dict):
        return detail.get("message", str(detail)), detail.get("type"), detail

    message = detail if isinstance(detail, str) else body.get("message", body.get("error"))
    if message is None:
        return str(body), None, None
    return message, body.get("type"), body.get("details")


def _raise_for_status(response: httpx.Response) -> None:
    """Raise the client exception matching an error status code.

    Args:
        response: The HTTP response to check.

    Raises:
        ValidationError: On 422.
        NotFoundError: On 404, carrying the record type and id when known.
        ConflictError: On 409.
        ServerError: On any 5xx.
        APIError: On any other 4xx.
    """
    if response.is_success:
        return

    message, error_type, details = _parse_error_response(response)
    code = response.status_code
    try:
        body = response.json()
    except ValueError:
        body = response.text

    common = {"message": message, "details": details, "response_body": body}
    if code == 404:
        record_id = body.get("record_id") if isinstance(body, dict) else None
        raise NotFoundError(resource_type=error_type, resource_id=record_id, **common)
    if code == 409:
        raise ConflictError(**common)
    if code == 422:
        raise ValidationError(**common)
    if code >= 500:
        raise ServerError(status_code=code, **common)
    raise APIError(status_code=code, error_type=error_type, **common)


class HTTPClient:
    """Thin synchronous wrapper around httpx.Client for the record store.

    Attributes:
        base_url: Store URL without a trailing slash.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create the underlying httpx client.

        Args:
            base_url: Store URL; a trailing slash is dropped.
            timeout: Per-request timeout in seconds.
            transport: Optional transport, e.g. a bridge to an in-process app.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request and decode its JSON body.

        Query parameters whose value is None are left out of the URL.

        Args:
            method: GET, POST or DELETE.
            path: Path relative to base_url.
            params: Query parameters.
            json: Request body.

        Returns:
            The decoded body, or None when the response is empty.

        Raises:
            ConnectionError: If the store can't be reached.
            TimeoutError: If the store doesn't answer in time.
            APIError: If the store answers with an error status.
        """
        url = f"{self.base_url}{path}"
        if params:
            params = {key: value for key, value in params.items() if value is not None}

        try:
            response = self._client.request(method, path, params=params, json=json)
        except httpx.ConnectError as e:
            raise ConnectionError(f"Failed to connect to {url}", url=url, cause=e) from e
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Request to {url} timed out", timeout=self.timeout, url=url) from e

        _raise_for_status(response)
        return response.json() if response.content else None

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return self.request("POST", path, params=params, json=json)

    def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("DELETE", path, params=params)
