"""
TypeGenerator implementation.

Converts the scalar fields of an entity's model into a graphene ObjectType
and collects the filter kinds of its filterable fields.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

import graphene

from ...core.meta import EntityMeta, get_entity_meta
from ...core.settings import TypeGeneratorSettings
from ...entities import Entity
from ...exceptions import (
    NotScalarFieldError,
    SchemaGenerationError,
    UnsupportedFieldTypeError,
)
from ...filters import FilterKind
from ..introspector import FieldInfo, ModelIntrospector
from .constants import FIELD_TYPE_MAP

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")


@dataclass
class FieldDefinition:
    """Scalar GraphQL field built from a model field."""
    name: str
    field: Optional[graphene.Field] = None
    filter: FilterKind = FilterKind.NONE


class TypeGenerator:
    """
    Generates GraphQL object types from entity models.
    """

    def __init__(self, settings: Optional[TypeGeneratorSettings] = None):
        self.settings = settings or TypeGeneratorSettings.from_settings()

    def _lookup_scalar(self, info: FieldInfo):
        custom = self.settings.custom_field_mappings
        for key in (type(info.field).__name__, info.internal_type):
            if key in custom:
                return custom[key], FilterKind.NONE
        return FIELD_TYPE_MAP.get(info.internal_type)

    def field_definition(
        self, info: FieldInfo, meta: EntityMeta, model_name: str
    ) -> FieldDefinition:
        """
        Build the scalar field definition of a model field.

        Raises:
            NotScalarFieldError: the field is a relation
            UnsupportedFieldTypeError: the field type has no scalar mapping
            SchemaGenerationError: the exposed name is not a valid GraphQL name
        """
        if info.is_relation or getattr(info.field, "is_relation", False):
            raise NotScalarFieldError(
                f"{model_name}.{info.name} is not a scalar field",
                model_name=model_name,
                field_name=info.name,
            )

        mapping = self._lookup_scalar(info)
        if mapping is None:
            raise UnsupportedFieldTypeError(
                f"{model_name}.{info.name} has unsupported type {info.internal_type}",
                model_name=model_name,
                field_name=info.name,
                internal_type=info.internal_type,
            )
        scalar, kind = mapping

        name = meta.exposed_name(info.name)
        if not NAME_PATTERN.match(name):
            raise SchemaGenerationError(
                f"{model_name}.{info.name} is exposed under invalid name '{name}'",
                model_name=model_name,
                field_name=info.name,
            )
        help_text = str(getattr(info.field, "help_text", "") or "")
        definition = FieldDefinition(name=name)
        if meta.is_filterable(info.name):
            definition.filter = kind
        definition.field = graphene.Field(
            scalar,
            name=name,
            source=info.name,
            description=help_text or None,
        )
        return definition

    def object_type(
        self, entity: Entity
    ) -> tuple[type[graphene.ObjectType], dict[str, FilterKind]]:
        """
        Create the ObjectType of an entity along with its filter map.

        Relation fields are left out; they are attached in a second pass once
        every entity has an object type.
        """
        model = entity.instance()
        model_name = model.__name__
        meta = get_entity_meta(model)
        excluded = self.settings.get_excluded_fields(model_name)

        # keyed by model field name; the GraphQL name is set on each field
        fields: dict[str, graphene.Field] = {}
        exposed: dict[str, str] = {}
        filters: dict[str, FilterKind] = {}

        for info in ModelIntrospector.for_model(model).get_fields():
            if info.name in excluded or meta.is_hidden(info.name):
                logger.debug("Skipping hidden field %s.%s", model_name, info.name)
                continue
            try:
                definition = self.field_definition(info, meta, model_name)
            except NotScalarFieldError:
                continue
            except UnsupportedFieldTypeError:
                if not self.settings.skip_unsupported_fields:
                    raise
                logger.warning(
                    "Skipping %s.%s: no GraphQL type for %s",
                    model_name,
                    info.name,
                    info.internal_type,
                )
                continue

            if not definition.name or definition.field is None:
                continue
            if definition.name in exposed:
                logger.warning(
                    "Field name '%s' is exposed twice on %s; keeping %s",
                    definition.name,
                    model_name,
                    info.name,
                )
                del fields[exposed[definition.name]]
                filters.pop(definition.name, None)
            exposed[definition.name] = info.name
            fields[info.name] = definition.field
            if definition.filter != FilterKind.NONE:
                filters[definition.name] = definition.filter

        meta_class = type(
            "Meta",
            (),
            {"name": model_name.lower(), "description": entity.description or None},
        )
        object_type = type(
            f"{model_name}Type",
            (graphene.ObjectType,),
            {"Meta": meta_class, **fields},
        )
        logger.debug(
            "Generated object type %s with %d fields", model_name.lower(), len(fields)
        )
        return object_type, filters


def field_definition(
    info: FieldInfo,
    meta: EntityMeta,
    model_name: str,
    settings: Optional[TypeGeneratorSettings] = None,
) -> FieldDefinition:
    return TypeGenerator(settings).field_definition(info, meta, model_name)


def object_type(
    entity: Entity, settings: Optional[TypeGeneratorSettings] = None
) -> tuple[type[graphene.ObjectType], dict[str, FilterKind]]:
    """Create the ObjectType and filter map of ``entity``."""
    return TypeGenerator(settings).object_type(entity)
