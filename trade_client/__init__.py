# trade_client/__init__.py
"""
Trade Orders Client

Client-side access to the trade order endpoints of the game market API.
"""

from trade_client.domain.services.order_service import OrderService
from trade_client.infrastructure.logging_config import configure_logging
from trade_client.orders import (
    cancel_order,
    create_order,
    fetch_orders,
    get_order_service,
    reset_order_service,
    set_order_service,
)

__version__ = "1.0.0"

__all__ = [
    "OrderService",
    "cancel_order",
    "configure_logging",
    "create_order",
    "fetch_orders",
    "get_order_service",
    "reset_order_service",
    "set_order_service",
]
