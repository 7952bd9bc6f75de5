"""Core: config, location context, and application bootstrap.

Single place for settings and request-scoped context.
"""

from storeadmin.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
