"""Configuration package for malay-dictionary.

Re-exports the settings symbols so that callers can write::

    from malay_dictionary.config import get_settings
"""

from __future__ import annotations

from malay_dictionary.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
