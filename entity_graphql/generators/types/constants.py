"""
Constants and mappings for type generation.
"""

import graphene

from ...filters import FilterKind

# Django internal field type -> (GraphQL scalar, filter kind when filterable)
FIELD_TYPE_MAP = {
    "CharField": (graphene.String, FilterKind.STRING),
    "TextField": (graphene.String, FilterKind.STRING),
    "SlugField": (graphene.String, FilterKind.STRING),
    "EmailField": (graphene.String, FilterKind.STRING),
    "URLField": (graphene.String, FilterKind.STRING),
    "UUIDField": (graphene.String, FilterKind.STRING),
    "GenericIPAddressField": (graphene.String, FilterKind.STRING),
    "IPAddressField": (graphene.String, FilterKind.STRING),
    "FilePathField": (graphene.String, FilterKind.STRING),
    "BooleanField": (graphene.Boolean, FilterKind.BOOL),
    "NullBooleanField": (graphene.Boolean, FilterKind.BOOL),
    "AutoField": (graphene.ID, FilterKind.INT),
    "BigAutoField": (graphene.ID, FilterKind.INT),
    "SmallAutoField": (graphene.ID, FilterKind.INT),
    "IntegerField": (graphene.Int, FilterKind.INT),
    "BigIntegerField": (graphene.Int, FilterKind.INT),
    "SmallIntegerField": (graphene.Int, FilterKind.INT),
    "PositiveIntegerField": (graphene.Int, FilterKind.INT),
    "PositiveBigIntegerField": (graphene.Int, FilterKind.INT),
    "PositiveSmallIntegerField": (graphene.Int, FilterKind.INT),
    "FloatField": (graphene.Float, FilterKind.FLOAT),
    "DecimalField": (graphene.Float, FilterKind.FLOAT),
    "DateTimeField": (graphene.DateTime, FilterKind.DATE),
    "DateField": (graphene.Date, FilterKind.DATE),
    "TimeField": (graphene.Time, FilterKind.DATE),
}
