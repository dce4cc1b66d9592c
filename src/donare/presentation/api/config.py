"""API configuration adapter.

Bridges the centralized donare_config settings with the API layer.
"""

from donare_config.settings import Settings, get_settings


def get_api_settings() -> Settings:
    """Get settings from centralized configuration.

    Kept as its own dependency so tests can override it.
    """
    return get_settings()
