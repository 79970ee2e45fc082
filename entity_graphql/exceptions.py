"""
Custom exceptions for entity schema generation.

This module defines specific exception types for the field classifiers and
the schema builder. Classification signals (NotScalarFieldError and
NotRelationshipFieldError) are caught by the generators to skip a field;
everything else is raised to the caller.
"""

from typing import Optional


class SchemaGenerationError(Exception):
    """Base exception for schema generation errors."""

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        field_name: Optional[str] = None,
    ):
        self.model_name = model_name
        self.field_name = field_name
        super().__init__(message)


class NotScalarFieldError(SchemaGenerationError):
    """Raised when a field is a relation and has no scalar GraphQL type."""

    pass


class NotRelationshipFieldError(SchemaGenerationError):
    """Raised when a field cannot be wired as a relationship."""

    pass


class UnsupportedFieldTypeError(SchemaGenerationError):
    """Raised when a model field has no known GraphQL scalar mapping."""

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        field_name: Optional[str] = None,
        internal_type: Optional[str] = None,
    ):
        self.internal_type = internal_type
        super().__init__(message, model_name, field_name)


class UnknownFieldTypeError(SchemaGenerationError):
    """Raised when a relationship points at an entity that is not registered."""

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        field_name: Optional[str] = None,
        entity_name: Optional[str] = None,
    ):
        self.entity_name = entity_name
        super().__init__(message, model_name, field_name)


class DuplicateEntityError(SchemaGenerationError):
    """Raised when two entities share the same name."""

    pass


class ImproperlyConfiguredEntities(SchemaGenerationError):
    """Raised when the ENTITY_GRAPHQL setting cannot be loaded."""

    pass
