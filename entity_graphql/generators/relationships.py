"""
Relationship field generation.

Second pass of schema generation: once every entity has an object type,
relation fields (foreign keys, one-to-one and many-to-many fields, and
optionally reverse relations) are turned into fields pointing at those
object types, with the application's resolvers attached.
"""

import logging
from typing import Mapping, Optional

import graphene

from ..core.meta import get_entity_meta
from ..core.settings import TypeGeneratorSettings
from ..entities import Entity, Resolvers
from ..exceptions import NotRelationshipFieldError, UnknownFieldTypeError
from .introspector import FieldInfo, ModelIntrospector
from .naming import singularize

logger = logging.getLogger(__name__)

SINGLE_DESCRIPTION = "Get a single {type_name} ({description}) by id or slug"
LIST_DESCRIPTION = "Get a list of {type_name} ({description}) according to filters"


def relationship_field(
    entities: Mapping[str, Entity],
    objects: Mapping[str, type[graphene.ObjectType]],
    info: FieldInfo,
    resolvers: Resolvers,
    model_name: str = "",
) -> graphene.Field:
    """
    Build the relationship field for a relation of a model.

    The related entity is looked up by the lower-cased field name; list
    relations use the singular of that name (``tags`` -> ``tag``).

    Raises:
        NotRelationshipFieldError: the field is not a relation
        UnknownFieldTypeError: the related entity or its object type is missing
    """
    if not info.is_relation or info.related_model is None:
        raise NotRelationshipFieldError(
            f"{model_name}.{info.name} is not a relationship field",
            model_name=model_name,
            field_name=info.name,
        )

    name = info.name.lower()
    if info.is_list:
        name = singularize(name)

    entity = entities.get(name)
    object_type = objects.get(name)
    if entity is None or object_type is None:
        raise UnknownFieldTypeError(
            f"{model_name}.{info.name} refers to unknown entity '{name}'",
            model_name=model_name,
            field_name=info.name,
            entity_name=name,
        )

    type_name = object_type._meta.name
    if info.is_list:
        field_type = graphene.List(object_type)
        description = LIST_DESCRIPTION.format(
            type_name=type_name, description=entity.description
        )
        resolver = resolvers.listing(entity)
    else:
        field_type = object_type
        description = SINGLE_DESCRIPTION.format(
            type_name=type_name, description=entity.description
        )
        resolver = resolvers.single(entity)

    return graphene.Field(
        field_type,
        name=name,
        description=description,
        resolver=resolver,
    )


def relationship_fields(
    entities: Mapping[str, Entity],
    objects: Mapping[str, type[graphene.ObjectType]],
    entity: Entity,
    resolvers: Resolvers,
    settings: Optional[TypeGeneratorSettings] = None,
) -> dict[str, graphene.Field]:
    """Collect the relationship fields of ``entity`` keyed by field name."""
    settings = settings or TypeGeneratorSettings.from_settings()
    model = entity.instance()
    model_name = model.__name__
    excluded = settings.get_excluded_fields(model_name)
    meta = get_entity_meta(model)
    introspector = ModelIntrospector.for_model(model)

    fields: dict[str, graphene.Field] = {}
    for info in introspector.get_fields(include_reverse=settings.include_reverse_relations):
        if info.name in excluded or meta.is_hidden(info.name):
            continue
        try:
            field = relationship_field(entities, objects, info, resolvers, model_name)
        except NotRelationshipFieldError:
            continue
        fields[field.name] = field
    return fields


def attach_fields(
    object_type: type[graphene.ObjectType], fields: Mapping[str, graphene.Field]
) -> None:
    """Add fields to an object type created by the first pass."""
    type_fields = object_type._meta.fields
    for name, field in fields.items():
        graphql_name = field.name or name
        # scalar fields are keyed by model field name, compare GraphQL names
        replaced = [
            key
            for key, existing in type_fields.items()
            if (getattr(existing, "name", None) or key) == graphql_name
        ]
        for key in replaced:
            logger.warning(
                "Relationship '%s' replaces an existing field of %s",
                graphql_name,
                object_type._meta.name,
            )
            del type_fields[key]
        type_fields[name] = field
    logger.debug(
        "Attached %d relationship fields to %s", len(fields), object_type._meta.name
    )
