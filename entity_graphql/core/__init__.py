"""
Core configuration for entity schema generation.
"""

from .meta import EntityMeta, get_entity_meta
from .settings import SchemaSettings, TypeGeneratorSettings

__all__ = [
    "EntityMeta",
    "get_entity_meta",
    "SchemaSettings",
    "TypeGeneratorSettings",
]
