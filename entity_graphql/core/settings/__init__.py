"""
Settings package for entity schema generation.
"""

from .base import SETTINGS_NAME, get_setting
from .schema_settings import SchemaSettings
from .type_settings import TypeGeneratorSettings

__all__ = [
    "SETTINGS_NAME",
    "SchemaSettings",
    "TypeGeneratorSettings",
    "get_setting",
]
