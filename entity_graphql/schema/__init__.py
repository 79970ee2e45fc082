"""
Schema assembly for entity GraphQL schemas.
"""

from .builder import SchemaBuilder, build_schema
from .loader import get_schema, load_entities, load_resolvers, reset_schema

__all__ = [
    "SchemaBuilder",
    "build_schema",
    "get_schema",
    "load_entities",
    "load_resolvers",
    "reset_schema",
]
