# trade_client/domain/__init__.py
"""
Domain Layer - Pure Python Business Logic

This package contains the order submission logic of the trade client.
It has ZERO dependencies on HTTP libraries, files, or environment.

Key principles:
- Pure Python (no third-party imports)
- Fully unit testable without infrastructure
- Collaborators are injected through ports
"""

__version__ = "1.0.0"
