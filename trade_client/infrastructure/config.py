# trade_client/infrastructure/config.py

"""
Configuration Management

Environment-specific configurations for different deployment contexts.
Values can be overridden through environment variables or a .env.local
file in the working directory.
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

load_dotenv(Path.cwd() / ".env.local")

DEFAULT_BASE_URL = "http://localhost:8080/api"
DEFAULT_STORE_PATH = "~/.trade_client/storage.json"


def get_environment() -> str:
    """
    Get current environment from environment variable

    Returns:
        Environment name: 'test', 'development', 'staging', or 'production'
    """
    return os.getenv("ENVIRONMENT", "development")


def _auth_headers() -> Dict[str, str]:
    token = os.getenv("TRADE_API_TOKEN")
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}


def _http_config(default_base_url: str = DEFAULT_BASE_URL) -> Dict[str, Any]:
    return {
        "type": "requests",
        "base_url": os.getenv("TRADE_API_BASE_URL", default_base_url),
        "timeout": float(os.getenv("TRADE_API_TIMEOUT", "10")),
        "headers": _auth_headers(),
    }


def get_config() -> Dict[str, Any]:
    """
    Get configuration for current environment

    Built on each call so environment variable changes are honoured.

    Returns:
        Configuration dictionary for active environment
    """
    env = get_environment()

    builders = {
        "test": build_test_config,
        "development": build_development_config,
        "staging": build_staging_config,
        "production": build_production_config,
    }

    config = builders.get(env, build_development_config)()
    config["environment"] = env

    return config


# ============================================================
# TEST CONFIGURATION
# ============================================================

def build_test_config() -> Dict[str, Any]:
    return {
        "http": {"type": "fake"},
        "store": {"type": "memory"},
        "logging": {"level": "DEBUG"},
    }


# ============================================================
# DEVELOPMENT CONFIGURATION
# ============================================================

def build_development_config() -> Dict[str, Any]:
    return {
        "http": _http_config(),
        "store": {
            "type": "file",
            "path": os.getenv("TRADE_STORE_PATH", DEFAULT_STORE_PATH),
        },
        "logging": {"level": os.getenv("TRADE_LOG_LEVEL", "DEBUG")},
    }


# ============================================================
# STAGING CONFIGURATION
# ============================================================

def build_staging_config() -> Dict[str, Any]:
    return {
        "http": _http_config(),
        "store": {
            "type": "file",
            "path": os.getenv("TRADE_STORE_PATH", DEFAULT_STORE_PATH),
        },
        "logging": {"level": os.getenv("TRADE_LOG_LEVEL", "INFO")},
    }


# ============================================================
# PRODUCTION CONFIGURATION
# ============================================================

def build_production_config() -> Dict[str, Any]:
    return {
        "http": _http_config(),
        "store": {
            "type": "file",
            "path": os.getenv("TRADE_STORE_PATH", DEFAULT_STORE_PATH),
        },
        "logging": {"level": os.getenv("TRADE_LOG_LEVEL", "WARNING")},
    }


# ============================================================
# CONFIGURATION HELPERS
# ============================================================


def get_http_config() -> Dict[str, Any]:
    """Get request client configuration for current environment"""
    return get_config()["http"]


def get_store_config() -> Dict[str, Any]:
    """Get key-value store configuration for current environment"""
    return get_config()["store"]


def is_production() -> bool:
    """Check if running in production environment"""
    return get_environment() == "production"


def is_test() -> bool:
    """Check if running in test environment"""
    return get_environment() == "test"


def is_development() -> bool:
    """Check if running in development environment"""
    return get_environment() == "development"


def is_staging() -> bool:
    """Check if running in staging environment"""
    return get_environment() == "staging"
