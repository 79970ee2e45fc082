"""
Schema builder for entity GraphQL schemas.

Runs the two generation passes over a set of entities and assembles the
root query:

1. an object type (and filter map) per entity,
2. relationship fields attached to those object types,
3. a ``Query`` with a single-object field and a list field per entity.
"""

import logging
import threading
from typing import Iterable, Mapping, Optional, Union

import graphene
from django.db import models

from ..core.settings import SchemaSettings, TypeGeneratorSettings
from ..entities import Entity, EntityRegistry, Resolvers
from ..exceptions import DuplicateEntityError, SchemaGenerationError
from ..filters import FilterKind, filter_arguments
from ..generators import TypeGenerator, attach_fields, relationship_fields
from ..generators.naming import pluralize
from ..generators.relationships import LIST_DESCRIPTION, SINGLE_DESCRIPTION

logger = logging.getLogger(__name__)

EntitiesArg = Union[
    EntityRegistry,
    Mapping[str, Entity],
    Iterable[Union[Entity, type[models.Model]]],
]


def _as_entity_map(entities: EntitiesArg) -> dict[str, Entity]:
    if isinstance(entities, EntityRegistry):
        return entities.as_dict()
    if isinstance(entities, Mapping):
        return {name.lower(): entity for name, entity in entities.items()}
    return EntityRegistry(entities).as_dict()


class SchemaBuilder:
    """
    Builds a graphene schema from entities and the application's resolvers.

    Args:
        entities: Registry, mapping of name to Entity, or iterable of
                  entities/models
        resolvers: Resolver factory used for relationship and root fields
        settings: Type generation settings (defaults to ENTITY_GRAPHQL)
        schema_settings: Root query settings (defaults to ENTITY_GRAPHQL)
    """

    def __init__(
        self,
        entities: EntitiesArg,
        resolvers: Resolvers,
        settings: Optional[TypeGeneratorSettings] = None,
        schema_settings: Optional[SchemaSettings] = None,
    ):
        self.entities = _as_entity_map(entities)
        self.resolvers = resolvers
        self.settings = settings or TypeGeneratorSettings.from_settings()
        self.schema_settings = schema_settings or SchemaSettings.from_settings()
        self.type_generator = TypeGenerator(self.settings)

        self.objects: dict[str, type[graphene.ObjectType]] = {}
        self.filters: dict[str, dict[str, FilterKind]] = {}
        self._schema: Optional[graphene.Schema] = None
        self._lock = threading.RLock()

    def build(self) -> graphene.Schema:
        """Generate the schema, reusing the previous result if any."""
        with self._lock:
            if self._schema is None:
                self._schema = self._build()
            return self._schema

    def reset(self) -> None:
        with self._lock:
            self._schema = None
            self.objects = {}
            self.filters = {}

    def _build(self) -> graphene.Schema:
        if not self.entities:
            raise SchemaGenerationError("Cannot build a schema without entities")

        objects: dict[str, type[graphene.ObjectType]] = {}
        filters: dict[str, dict[str, FilterKind]] = {}
        for name, entity in self.entities.items():
            objects[name], filters[name] = self.type_generator.object_type(entity)

        for name, entity in self.entities.items():
            fields = relationship_fields(
                self.entities, objects, entity, self.resolvers, self.settings
            )
            attach_fields(objects[name], fields)

        self.objects = objects
        self.filters = filters

        query = self._build_query()
        schema = graphene.Schema(
            query=query, auto_camelcase=self.schema_settings.auto_camelcase
        )
        logger.info("Built entity schema with %d entities", len(self.entities))
        return schema

    def _build_query(self) -> type[graphene.ObjectType]:
        # attribute keys are positional; GraphQL names are set on each field
        fields: dict[str, graphene.Field] = {}
        root_names: set[str] = set()
        for index, (name, entity) in enumerate(self.entities.items()):
            object_type = self.objects[name]
            type_name = object_type._meta.name
            list_name = self.list_field_name(name)
            for field_name in (name, list_name):
                if field_name in root_names:
                    raise DuplicateEntityError(
                        f"Root field '{field_name}' of entity '{name}' clashes with another entity",
                        model_name=entity.model.__name__,
                    )
                root_names.add(field_name)

            fields[f"single_{index}"] = graphene.Field(
                object_type,
                name=name,
                args={
                    "id": graphene.Argument(graphene.ID, name="id"),
                    "slug": graphene.Argument(graphene.String, name="slug"),
                },
                description=SINGLE_DESCRIPTION.format(
                    type_name=type_name, description=entity.description
                ),
                resolver=self.resolvers.single(entity),
            )

            fields[f"listing_{index}"] = graphene.Field(
                graphene.List(object_type),
                name=list_name,
                args=filter_arguments(self.filters[name]),
                description=LIST_DESCRIPTION.format(
                    type_name=type_name, description=entity.description
                ),
                resolver=self.resolvers.listing(entity),
            )

        query_name = self.schema_settings.query_name
        meta_class = type("Meta", (), {"name": query_name})
        return type(query_name, (graphene.ObjectType,), {"Meta": meta_class, **fields})

    @staticmethod
    def list_field_name(name: str) -> str:
        plural = pluralize(name)
        if plural == name:
            return f"{name}_list"
        return plural


def build_schema(
    entities: EntitiesArg,
    resolvers: Resolvers,
    settings: Optional[TypeGeneratorSettings] = None,
    schema_settings: Optional[SchemaSettings] = None,
) -> graphene.Schema:
    """Shortcut for ``SchemaBuilder(...).build()``."""
    return SchemaBuilder(entities, resolvers, settings, schema_settings).build()
