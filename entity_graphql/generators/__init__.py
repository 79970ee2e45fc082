"""
Schema generators: object types from scalar fields, relationship fields.
"""

from .relationships import attach_fields, relationship_field, relationship_fields
from .types import FieldDefinition, TypeGenerator, field_definition, object_type

__all__ = [
    "FieldDefinition",
    "TypeGenerator",
    "attach_fields",
    "field_definition",
    "object_type",
    "relationship_field",
    "relationship_fields",
]
