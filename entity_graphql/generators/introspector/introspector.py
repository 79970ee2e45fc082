"""
ModelIntrospector implementation.
"""

import threading
import weakref
from typing import Optional

from django.db import models
from django.utils.functional import cached_property

from .types import RELATION_LIST, RELATION_SINGLE, FieldInfo

REVERSE_ACCESSOR_SUFFIX = "_set"


class ModelIntrospector:
    """
    Analyzes Django models to extract field metadata for schema generation.
    """

    def __init__(self, model: type[models.Model]):
        self.model = model
        self._meta = getattr(model, "_meta", None)

    _cache: "weakref.WeakKeyDictionary[type[models.Model], ModelIntrospector]" = (
        weakref.WeakKeyDictionary()
    )
    _cache_lock = threading.Lock()

    @classmethod
    def for_model(cls, model: type[models.Model]) -> "ModelIntrospector":
        with cls._cache_lock:
            cached = cls._cache.get(model)
            if cached is None:
                cached = cls(model)
                cls._cache[model] = cached
            return cached

    @classmethod
    def clear_cache(cls) -> None:
        with cls._cache_lock:
            cls._cache.clear()

    @cached_property
    def fields(self) -> list[FieldInfo]:
        """Forward fields in declaration order."""
        if not self._meta: return []
        return [
            self._forward_info(field)
            for field in self._meta.get_fields()
            if not _is_reverse(field) and not _is_parent_link(field)
        ]

    @cached_property
    def reverse_relations(self) -> list[FieldInfo]:
        """Reverse relations pointing at this model."""
        if not self._meta: return []
        return [
            self._reverse_info(rel)
            for rel in self._meta.get_fields()
            if _is_reverse(rel) and not getattr(rel, "parent_link", False)
        ]

    def get_fields(self, include_reverse: bool = False) -> list[FieldInfo]:
        if include_reverse:
            return self.fields + self.reverse_relations
        return list(self.fields)

    def _forward_info(self, field) -> FieldInfo:
        relation = None
        if field.is_relation:
            if field.many_to_many:
                relation = RELATION_LIST
            elif field.many_to_one or field.one_to_one:
                relation = RELATION_SINGLE
        return FieldInfo(
            name=field.name,
            field=field,
            internal_type=_internal_type(field),
            relation=relation,
            related_model=field.related_model if field.is_relation else None,
        )

    def _reverse_info(self, rel) -> FieldInfo:
        name = rel.get_accessor_name()
        if not getattr(rel, "related_name", None) and name.endswith(REVERSE_ACCESSOR_SUFFIX):
            name = name[: -len(REVERSE_ACCESSOR_SUFFIX)]
        relation = RELATION_SINGLE if rel.one_to_one else RELATION_LIST
        return FieldInfo(
            name=name,
            field=rel,
            internal_type=None,
            relation=relation,
            is_reverse=True,
            related_model=rel.related_model,
        )


def _is_reverse(field) -> bool:
    return field.auto_created and not field.concrete


def _is_parent_link(field) -> bool:
    # multi-table inheritance pointer (``<parent>_ptr``)
    remote_field = getattr(field, "remote_field", None)
    return bool(getattr(remote_field, "parent_link", False))


def _internal_type(field) -> Optional[str]:
    getter = getattr(field, "get_internal_type", None)
    if getter is None: return None
    return getter()
