"""Error kinds surfaced by the cache engine to its callers."""

from city_explorer_api.lib.providers.base import GatewayError


class NotFoundError(Exception):
    """Raised when a search query resolves to no location, or a location id is unknown."""


class StoreError(Exception):
    """Raised when a persistent store operation fails.

    Args:
        operation: Short name of the store operation that failed.
        message: Human-readable error description.
    """

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        self.message = message
        super().__init__(f"{operation}: {message}")


__all__ = ["GatewayError", "NotFoundError", "StoreError"]
