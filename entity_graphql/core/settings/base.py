"""
Internal utility functions for settings loading.
"""

from typing import Any

from django.conf import settings as django_settings

from ...defaults import LIBRARY_DEFAULTS

SETTINGS_NAME = "ENTITY_GRAPHQL"


def _merge_settings_dicts(*dicts: dict[str, Any]) -> dict[str, Any]:
    """Merge multiple settings dictionaries with later ones taking precedence."""
    result = {}
    for d in dicts:
        if d: result.update(d)
    return result


def _get_global_settings() -> dict[str, Any]:
    """Get the ENTITY_GRAPHQL dictionary from Django settings."""
    configured = getattr(django_settings, SETTINGS_NAME, None) or {}
    if not isinstance(configured, dict): return {}
    return configured


def _get_section(section: str) -> dict[str, Any]:
    """Merge library defaults and project settings for one section."""
    defaults = LIBRARY_DEFAULTS.get(section, {})
    configured = _get_global_settings().get(section, {})
    return _merge_settings_dicts(defaults, configured)


def get_setting(name: str) -> Any:
    """Top-level ENTITY_GRAPHQL value, falling back to the library default."""
    configured = _get_global_settings()
    if name in configured: return configured[name]
    return LIBRARY_DEFAULTS.get(name)
