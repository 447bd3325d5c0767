"""
Exceptions raised by the shop data store.

Store operations raise these at the point of failure and let them
propagate; the API layer maps them onto HTTP status codes.
"""
from typing import Optional


class ShopDataError(Exception):
    """Base exception for all store errors"""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class StoreNotReadyError(ShopDataError):
    """Raised when an operation runs against a store with no loaded snapshot"""

    def __init__(self, operation: str, message: Optional[str] = None):
        details = {"operation": operation}
        msg = message or f"Shop data is not available ({operation})"
        super().__init__(msg, details)


class EntityNotFoundError(ShopDataError):
    """Raised when a category, product, customer or order id has no match"""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        details = {"entity": entity, "id": entity_id}
        super().__init__(f"{entity} with id {entity_id} not found", details)


class SnapshotLoadError(ShopDataError):
    """Raised by the loader when the snapshot file cannot be read or parsed"""

    def __init__(self, path: str, message: str):
        details = {"path": path}
        super().__init__(message, details)
