# trade_client/domain/models.py

"""
Domain Models - Types, Constants and Exceptions

Order payloads and query parameters are plain mappings on the wire,
so the domain only names them and the endpoints they travel to.
"""

from typing import Any, Mapping, Optional, Union

OrderPayload = Mapping[str, Any]
QueryParams = Mapping[str, Any]
OrderId = Union[int, str]
UserId = Union[int, float]


# ============================================================
# WIRE CONSTANTS
# ============================================================

USER_ID_KEY = "userId"
"""Key of the current user's id in the local key-value store and in order payloads"""

ORDERS_PATH = "/trade/orders"


def order_path(order_id: OrderId) -> str:
    """Path of a single order resource"""
    return f"{ORDERS_PATH}/{order_id}"


# ============================================================
# DOMAIN EXCEPTIONS
# ============================================================

class DomainException(Exception):
    """Base exception for domain layer"""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails"""
    pass


class RequestDispatchError(DomainException):
    """Raised when a request cannot be delivered or answered"""
    pass


class HttpStatusError(RequestDispatchError):
    """
    Raised when the server answers with an error status

    Keeps the status code and decoded body so callers can inspect
    the backend's message.
    """

    def __init__(self, status_code: int, message: str, payload: Optional[Any] = None):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.payload = payload


class StoreError(DomainException):
    """Raised when the local key-value store cannot be written"""
    pass
