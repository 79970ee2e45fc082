"""
GraphQL Meta Tags

Models describe per-field GraphQL tags on an inner ``GraphQLMeta`` (or
``GraphqlMeta``) class:

    class Book(models.Model):
        title = models.CharField(max_length=200)
        isbn = models.CharField(max_length=13)

        class GraphQLMeta:
            filterable = ["title"]
            names = {"title": "headline", "isbn": "-"}

``filterable`` lists the fields exposed as list filters. It may also be a
mapping of field name to a boolean or a boolean string ("true", "1", "f"...).
``names`` overrides the exposed name of a field; ``"-"`` hides it.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from django.db import models

logger = logging.getLogger(__name__)

META_CLASS_NAMES = ("GraphQLMeta", "GraphqlMeta")
HIDDEN_NAME = "-"

_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}


def parse_bool(value: Any) -> bool:
    """Parse a tag value; unparseable strings are false."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value in _TRUE_VALUES:
            return True
        if value not in _FALSE_VALUES:
            logger.debug("Ignoring invalid boolean tag value %r", value)
        return False
    return bool(value)


def parse_name(value: Any) -> str:
    """Return the name part of a name tag (``"headline,omitempty"`` -> ``headline``)."""
    if value is None:
        return ""
    return str(value).split(",", 1)[0].strip()


class EntityMeta:
    """Parsed GraphQL tags of a model."""

    def __init__(self, model: type[models.Model]):
        self.model = model
        meta_class = None
        for attr in META_CLASS_NAMES:
            meta_class = getattr(model, attr, None)
            if meta_class is not None:
                break

        self.filterable = self._load_filterable(getattr(meta_class, "filterable", None))
        self.names = self._load_names(getattr(meta_class, "names", None))

    def _load_filterable(self, raw: Any) -> set[str]:
        if not raw:
            return set()
        if isinstance(raw, str):
            return {raw}
        if isinstance(raw, Mapping):
            return {name for name, value in raw.items() if parse_bool(value)}
        return {str(name) for name in raw}

    def _load_names(self, raw: Any) -> dict[str, str]:
        if not raw:
            return {}
        return {str(field_name): parse_name(value) for field_name, value in raw.items()}

    def is_filterable(self, field_name: str) -> bool:
        return field_name in self.filterable

    def is_hidden(self, field_name: str) -> bool:
        return self.names.get(field_name) == HIDDEN_NAME

    def exposed_name(self, field_name: str) -> str:
        """Lower-cased GraphQL name of a model field."""
        name = self.names.get(field_name) or field_name
        return name.lower()


def get_entity_meta(model: type[models.Model]) -> EntityMeta:
    """
    Get or create the parsed GraphQL tags for a model.

    Args:
        model: The Django model class

    Returns:
        EntityMeta instance for the model
    """
    cached = model.__dict__.get("_entity_graphql_meta")
    if cached is None:
        cached = EntityMeta(model)
        model._entity_graphql_meta = cached
    return cached
