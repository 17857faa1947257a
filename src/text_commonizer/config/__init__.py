"""Configuration management for text_commonizer.

Usage:
    >>> from text_commonizer.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.recursion_limit)
"""

from text_commonizer.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
