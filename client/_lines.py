"""Order line sub-client for the record store client.

This is an internal module. Import from `client` instead.
"""

import uuid

from client._base import BaseClient
from client.models import DeleteResponse, OrderLine


class LinesClient(BaseClient):
    """Synchronous client for line endpoints (/lines/*)."""

    _BASE_PATH = "/lines"

    def get(self, line_id: uuid.UUID) -> OrderLine:
        """Get a single order line.

        Raises:
            NotFoundError: If the line doesn't exist.
        """
        data = self._get(f"{self._BASE_PATH}/{line_id}")
        return OrderLine(**data)

    def delete(self, line_id: uuid.UUID) -> DeleteResponse:
        """Delete a single order line."""
        data = self._delete(f"{self._BASE_PATH}/{line_id}")
        return DeleteResponse(**data)
