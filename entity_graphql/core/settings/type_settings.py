"""
TypeGeneratorSettings implementation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from django.utils.module_loading import import_string

from .base import _get_section


@dataclass
class TypeGeneratorSettings:
    """Settings for controlling GraphQL type generation."""
    exclude_fields: Dict[str, List[str]] = field(default_factory=dict)
    custom_field_mappings: Dict[Any, Any] = field(default_factory=dict)
    include_reverse_relations: bool = False
    skip_unsupported_fields: bool = False

    def __post_init__(self):
        self.custom_field_mappings = _normalize_mappings(self.custom_field_mappings)

    @classmethod
    def from_settings(cls) -> "TypeGeneratorSettings":
        merged = _get_section("type_generation_settings")
        valid_fields = set(cls.__dataclass_fields__.keys())
        return cls(**{k: v for k, v in merged.items() if k in valid_fields})

    def get_excluded_fields(self, model_name: str) -> set[str]:
        return set(self.exclude_fields.get(model_name, []))


def _normalize_mappings(mappings: Dict[Any, Any]) -> Dict[str, Any]:
    """Key custom mappings by field class name and import dotted scalar paths."""
    normalized = {}
    for django_field, graphql_type in (mappings or {}).items():
        key = django_field if isinstance(django_field, str) else django_field.__name__
        if isinstance(graphql_type, str):
            graphql_type = import_string(graphql_type)
        normalized[key] = graphql_type
    return normalized
