# trade_client/adapters/storage/__init__.py
"""Key-value store adapters"""
