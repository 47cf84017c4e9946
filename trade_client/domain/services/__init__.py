# trade_client/domain/services/__init__.py
"""Domain Services - use cases built on top of the ports"""

from trade_client.domain.services.order_service import (
    OrderService,
    enrich_order_payload,
    parse_user_id,
)

__all__ = ["OrderService", "enrich_order_payload", "parse_user_id"]
