# trade_client/infrastructure/container.py

"""
Dependency Injection Container

Simple factory functions for creating fully-wired services.
No magic, no framework - just explicit construction.
"""

from typing import Any, Dict, Optional
import logging

from trade_client.domain.models import DomainException
from trade_client.infrastructure.config import get_config

logger = logging.getLogger(__name__)


# ============================================================
# ADAPTER FACTORIES
# ============================================================

def create_request_client(config: Dict[str, Any]):
    """
    Factory for request client based on configuration

    Args:
        config: HTTP configuration dict with 'type' key

    Returns:
        Implementation of IRequestClient

    Raises:
        ValueError: If client type is unknown
    """
    client_type = config.get('type', 'fake')

    if client_type == 'fake':
        from trade_client.adapters.http.fake import FakeRequestClient
        return FakeRequestClient(responses=config.get('responses'))

    elif client_type == 'requests':
        from trade_client.adapters.http.requests_client import RequestsClient

        base_url = config.get('base_url')
        if not base_url:
            raise ValueError("Trade API base URL is required")

        return RequestsClient(
            base_url=base_url,
            timeout=config.get('timeout', 10.0),
            headers=config.get('headers'),
        )

    else:
        raise ValueError(f"Unknown request client type: {client_type}")


def create_key_value_store(config: Dict[str, Any]):
    """
    Factory for local key-value store based on configuration

    Args:
        config: Store configuration dict with 'type' key

    Returns:
        Implementation of IKeyValueStore

    Raises:
        ValueError: If store type is unknown
    """
    store_type = config.get('type', 'memory')

    if store_type == 'memory':
        from trade_client.adapters.storage.memory import InMemoryKeyValueStore
        return InMemoryKeyValueStore(initial=config.get('initial'))

    elif store_type == 'file':
        from trade_client.adapters.storage.file_store import JsonFileKeyValueStore

        path = config.get('path')
        if not path:
            raise ValueError("File store config requires 'path' key")

        return JsonFileKeyValueStore(path)

    else:
        raise ValueError(f"Unknown key-value store type: {store_type}")


# ============================================================
# SERVICE FACTORIES
# ============================================================

def create_order_service(config: Optional[Dict] = None):
    """
    Create fully-wired OrderService with all dependencies

    This is the main entry point for creating order services.

    Args:
        config: Optional configuration dict. If None, uses environment config.

    Returns:
        OrderService instance with all dependencies injected

    Example:
        >>> service = create_order_service()
        >>> service.create_order({'itemId': 3, 'type': 'BUY', 'price': 12.5, 'amount': 1})
    """
    config = config or get_config()

    try:
        validate_config(config)

        request_client = create_request_client(config['http'])
        store = create_key_value_store(config['store'])

        from trade_client.domain.services.order_service import OrderService
        service = OrderService(request_client=request_client, store=store)

        logger.info(
            f"Created OrderService with "
            f"http={config['http']['type']}, "
            f"store={config['store']['type']}"
        )

        return service

    except Exception as e:
        logger.error(f"Failed to create order service: {e}")
        raise DomainException(f"Service initialization failed: {e}") from e


# ============================================================
# VALIDATION
# ============================================================

def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate configuration structure

    Args:
        config: Configuration dictionary to validate

    Returns:
        True if valid

    Raises:
        ValueError: If configuration is invalid
    """
    required_keys = ['http', 'store']

    for key in required_keys:
        if key not in config:
            raise ValueError(f"Missing required config key: {key}")

    if 'type' not in config['http']:
        raise ValueError("HTTP config missing 'type' key")

    if 'type' not in config['store']:
        raise ValueError("Store config missing 'type' key")

    if config['http']['type'] == 'requests':
        if not config['http'].get('base_url'):
            raise ValueError("Requests client config requires 'base_url' key")

    if config['store']['type'] == 'file':
        if 'path' not in config['store']:
            raise ValueError("File store config requires 'path' key")

    return True


# ============================================================
# HELPER FUNCTIONS
# ============================================================

def get_service_info(config: Optional[Dict] = None) -> Dict[str, Any]:
    """
    Get information about configured services

    Args:
        config: Optional config dict, uses environment config if None

    Returns:
        Dict with service configuration info
    """
    config = config or get_config()

    return {
        'environment': config.get('environment', 'unknown'),
        'http': {
            'type': config['http'].get('type'),
            'base_url': config['http'].get('base_url', 'N/A'),
            'timeout': config['http'].get('timeout', 'N/A'),
        },
        'store': {
            'type': config['store'].get('type'),
            'path': config['store'].get('path', 'N/A'),
        },
    }
