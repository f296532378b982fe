"""
Configuration Module

Application configuration loaded from environment variables.

Usage:
======
    from kennel.config.settings import settings

    db_url = settings.DATABASE_URL
    port = settings.server_port
"""

from kennel.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
