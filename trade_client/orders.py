# trade_client/orders.py
"""
Module-level order operations

Convenience functions bound to a default OrderService built from the
environment configuration on first use.
"""
import threading
from typing import Any, Optional

from trade_client.domain.models import OrderId, OrderPayload, QueryParams
from trade_client.domain.services.order_service import OrderService
from trade_client.infrastructure.config import get_config
from trade_client.infrastructure.container import create_order_service

_service: Optional[OrderService] = None
_lock = threading.Lock()


def get_order_service() -> OrderService:
    """Return the default service, creating it on first call"""
    global _service

    with _lock:
        if _service is None:
            _service = create_order_service(get_config())
        return _service


def set_order_service(service: Optional[OrderService]) -> None:
    """Replace the default service, e.g. with one wired to a custom client"""
    global _service

    with _lock:
        _service = service


def reset_order_service() -> None:
    """Drop the default service so the next call rebuilds it"""
    set_order_service(None)


def create_order(payload: OrderPayload) -> Any:
    """Submit a new order through the default service"""
    return get_order_service().create_order(payload)


def fetch_orders(params: Optional[QueryParams] = None) -> Any:
    """List orders through the default service"""
    return get_order_service().fetch_orders(params)


def cancel_order(order_id: OrderId) -> Any:
    """Cancel an order through the default service"""
    return get_order_service().cancel_order(order_id)
