"""
Schema configured through the ENTITY_GRAPHQL Django setting.
"""

import inspect
import logging
import threading
from typing import Any, Optional

import graphene
from django.utils.module_loading import import_string

from ..core.settings import get_setting
from ..entities import Resolvers
from ..exceptions import ImproperlyConfiguredEntities
from .builder import SchemaBuilder

logger = logging.getLogger(__name__)

_schema: Optional[graphene.Schema] = None
_schema_lock = threading.Lock()


def _load(name: str) -> Any:
    value = get_setting(name)
    if value is None:
        raise ImproperlyConfiguredEntities(
            f"ENTITY_GRAPHQL['{name}'] is not configured"
        )
    if isinstance(value, str):
        try:
            value = import_string(value)
        except ImportError as exc:
            raise ImproperlyConfiguredEntities(
                f"Could not import ENTITY_GRAPHQL['{name}'] = {value!r}: {exc}"
            ) from exc
    return value


def load_entities():
    """Entities named by ENTITY_GRAPHQL['entities'] (registry, iterable or callable)."""
    entities = _load("entities")
    if callable(entities) and not inspect.isclass(entities):
        entities = entities()
    return entities


def load_resolvers() -> Resolvers:
    """Resolvers named by ENTITY_GRAPHQL['resolvers'] (instance, class or factory)."""
    resolvers = _load("resolvers")
    if isinstance(resolvers, Resolvers):
        return resolvers
    if callable(resolvers):
        resolvers = resolvers()
    if not isinstance(resolvers, Resolvers):
        raise ImproperlyConfiguredEntities(
            "ENTITY_GRAPHQL['resolvers'] must provide an entity_graphql.Resolvers"
        )
    return resolvers


def get_schema() -> graphene.Schema:
    """Build the configured schema once and return it."""
    global _schema
    with _schema_lock:
        if _schema is None:
            builder = SchemaBuilder(load_entities(), load_resolvers())
            _schema = builder.build()
            logger.info("Loaded entity schema from settings")
        return _schema


def reset_schema() -> None:
    global _schema
    with _schema_lock:
        _schema = None
