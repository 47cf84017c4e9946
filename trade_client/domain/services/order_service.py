# trade_client/domain/services/order_service.py

"""
Order Service - Submits and lists trade orders

Adds the locally stored user id to outgoing orders when the caller
left it out, then hands every request to the request client untouched.
Failures from the request client reach the caller unchanged.
"""

import math
from typing import Any, Dict, Optional

from trade_client.domain.models import (
    ORDERS_PATH,
    USER_ID_KEY,
    OrderId,
    OrderPayload,
    QueryParams,
    UserId,
    ValidationError,
    order_path,
)
from trade_client.domain.ports.http import IRequestClient
from trade_client.domain.ports.storage import IKeyValueStore


_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}


def _parse_radix(text: str) -> int:
    base = _RADIX_PREFIXES[text[:2].lower()]
    digits = text[2:]
    if not digits.isalnum():
        return 0
    try:
        return int(digits, base)
    except ValueError:
        return 0


def parse_user_id(raw: Optional[str]) -> UserId:
    """
    Convert a stored user id to a number

    Never raises. Missing, blank or unparseable values become 0,
    which disables enrichment. Accepts ASCII decimal, exponent and
    unsigned 0x/0o/0b notation. Infinite values also become 0.

    Args:
        raw: Value read from the key-value store

    Returns:
        The numeric id, or 0

    Example:
        >>> parse_user_id("42")
        42
        >>> parse_user_id("0x2A")
        42
        >>> parse_user_id(None)
        0
    """
    if raw is None:
        return 0

    text = str(raw).strip()
    if not text or not text.isascii() or "_" in text:
        return 0

    if text[:2].lower() in _RADIX_PREFIXES:
        return _parse_radix(text)

    try:
        return int(text)
    except ValueError:
        pass

    try:
        value = float(text)
    except ValueError:
        return 0

    if math.isnan(value) or math.isinf(value):
        return 0
    if value.is_integer():
        return int(value)
    return value


def _is_missing(value: Any) -> bool:
    if isinstance(value, float) and math.isnan(value):
        return True
    return not value


def enrich_order_payload(payload: OrderPayload, user_id: UserId) -> Dict[str, Any]:
    """
    Build the body sent for a new order

    Returns a shallow copy of payload. The copy gets user_id when its own
    userId is missing (absent, None, 0, NaN, empty or False) and user_id
    is truthy; otherwise it matches payload.
    """
    body = dict(payload)
    if _is_missing(body.get(USER_ID_KEY)) and user_id:
        body[USER_ID_KEY] = user_id
    return body


class OrderService:
    """
    Order submission adapter

    Stateless: holds only its collaborators, so concurrent calls are
    independent of each other.
    """

    def __init__(self, request_client: IRequestClient, store: IKeyValueStore):
        """
        Initialize order service

        Args:
            request_client: Collaborator performing the HTTP calls
            store: Local key-value store holding the current user's id
        """
        self._request_client = request_client
        self._store = store

    def current_user_id(self) -> UserId:
        """Numeric id of the locally signed-in user, or 0"""
        return parse_user_id(self._store.get_item(USER_ID_KEY))

    def create_order(self, payload: OrderPayload) -> Any:
        """
        Submit a new order

        Args:
            payload: Order fields, e.g. {'itemId': 3, 'type': 'BUY',
                'price': 12.5, 'amount': 10}. Never modified.

        Returns:
            Whatever the request client returns for the POST
        """
        body = enrich_order_payload(payload, self.current_user_id())
        return self._request_client.post(ORDERS_PATH, body)

    def fetch_orders(self, params: Optional[QueryParams] = None) -> Any:
        """
        List orders

        Args:
            params: Query parameters, forwarded as-is (e.g. {'userId': 42})

        Returns:
            Whatever the request client returns for the GET
        """
        return self._request_client.get(ORDERS_PATH, params=params)

    def cancel_order(self, order_id: OrderId) -> Any:
        """
        Cancel an open order

        Args:
            order_id: Id of the order to cancel

        Returns:
            Whatever the request client returns for the DELETE

        Raises:
            ValidationError: If order_id is empty
        """
        if order_id is None or str(order_id).strip() == "":
            raise ValidationError("Order id cannot be empty")

        return self._request_client.delete(order_path(order_id))
