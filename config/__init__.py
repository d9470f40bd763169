"""
Config Package - Environment-driven settings for the key/value service
"""

from .settings import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
