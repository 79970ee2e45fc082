"""
Filter kinds extracted from filterable entity fields.
"""

from enum import IntEnum
from typing import Optional

import graphene


class FilterKind(IntEnum):
    """Kind of filter a scalar field supports."""

    NONE = 0
    STRING = 1
    BOOL = 2
    INT = 3
    FLOAT = 4
    DATE = 5


FILTER_ARGUMENT_TYPES = {
    FilterKind.STRING: graphene.String,
    FilterKind.BOOL: graphene.Boolean,
    FilterKind.INT: graphene.Int,
    FilterKind.FLOAT: graphene.Float,
    FilterKind.DATE: graphene.DateTime,
}


def filter_argument(kind: FilterKind, name: Optional[str] = None) -> graphene.Argument:
    """Return the query argument used to filter on a field of ``kind``."""
    try:
        scalar = FILTER_ARGUMENT_TYPES[FilterKind(kind)]
    except (KeyError, ValueError):
        raise ValueError(f"Filter kind {kind!r} has no argument type") from None
    return graphene.Argument(scalar, name=name)


def filter_arguments(filters: dict[str, FilterKind]) -> dict[str, graphene.Argument]:
    """Build query arguments for every entry of a filter map."""
    return {
        name: filter_argument(kind, name=name)
        for name, kind in filters.items()
        if kind != FilterKind.NONE
    }
