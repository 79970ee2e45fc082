"""
SchemaSettings implementation.
"""

from dataclasses import dataclass

from .base import _get_section


@dataclass
class SchemaSettings:
    """Settings for assembling the root query and the graphene schema."""
    query_name: str = "Query"
    auto_camelcase: bool = False

    @classmethod
    def from_settings(cls) -> "SchemaSettings":
        merged = _get_section("schema_settings")
        valid_fields = set(cls.__dataclass_fields__.keys())
        return cls(**{k: v for k, v in merged.items() if k in valid_fields})
