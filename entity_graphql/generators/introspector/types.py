"""
Data structures for introspection results.
"""

from dataclasses import dataclass
from typing import Any, Optional

RELATION_SINGLE = "single"
RELATION_LIST = "list"


@dataclass
class FieldInfo:
    """Stores metadata about a model field or reverse relation."""
    name: str
    field: Any
    internal_type: Optional[str]
    relation: Optional[str] = None
    is_reverse: bool = False
    related_model: Any = None

    @property
    def is_relation(self) -> bool:
        return self.relation is not None

    @property
    def is_list(self) -> bool:
        return self.relation == RELATION_LIST
