# trade_client/domain/ports/__init__.py
"""
Ports - Interface Definitions (Dependency Inversion)

Ports define contracts between domain and infrastructure layers.
Domain depends on these interfaces, adapters implement them.

This enables:
- Domain testability (use fake implementations)
- Flexibility (swap transports and stores without changing domain)
- Clear boundaries (explicit dependencies)
"""

from trade_client.domain.ports.http import IRequestClient
from trade_client.domain.ports.storage import IKeyValueStore

__all__ = ["IRequestClient", "IKeyValueStore"]
