"""
Model Introspection System Package.
"""

from .introspector import ModelIntrospector
from .types import RELATION_LIST, RELATION_SINGLE, FieldInfo

__all__ = [
    "ModelIntrospector",
    "FieldInfo",
    "RELATION_LIST",
    "RELATION_SINGLE",
]
