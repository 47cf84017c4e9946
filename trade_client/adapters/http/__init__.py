# trade_client/adapters/http/__init__.py
"""Request-dispatch adapters"""
