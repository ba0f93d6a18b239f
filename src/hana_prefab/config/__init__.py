"""Configuration module using Pydantic Settings.

Usage:
    from hana_prefab.config import PrefabSettings

    settings = PrefabSettings(log_failures=False)
"""

from hana_prefab.config.settings import PrefabSettings, get_settings

__all__ = [
    "PrefabSettings",
    "get_settings",
]
