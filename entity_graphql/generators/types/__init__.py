"""
Type Generation System Package.

This package provides the TypeGenerator class, which converts the scalar
fields of entity models into GraphQL object types.
"""

from .constants import FIELD_TYPE_MAP
from .generator import FieldDefinition, TypeGenerator, field_definition, object_type

__all__ = [
    "FIELD_TYPE_MAP",
    "FieldDefinition",
    "TypeGenerator",
    "field_definition",
    "object_type",
]
