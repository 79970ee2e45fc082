"""
entity-graphql: GraphQL schemas generated from Django model entities.
"""

__version__ = "0.1.0"

from .entities import Entity, EntityRegistry, Resolvers
from .exceptions import (
    DuplicateEntityError,
    ImproperlyConfiguredEntities,
    NotRelationshipFieldError,
    NotScalarFieldError,
    SchemaGenerationError,
    UnknownFieldTypeError,
    UnsupportedFieldTypeError,
)
from .filters import FilterKind

__all__ = [
    "Entity",
    "EntityRegistry",
    "Resolvers",
    "FilterKind",
    "SchemaGenerationError",
    "NotScalarFieldError",
    "NotRelationshipFieldError",
    "UnsupportedFieldTypeError",
    "UnknownFieldTypeError",
    "DuplicateEntityError",
    "ImproperlyConfiguredEntities",
]
