"""
Entity definitions and resolver factories.

An entity pairs a Django model with the description exposed in the generated
GraphQL schema. Resolvers are supplied by the application: the schema
generator only wires them to fields.
"""

import logging
from collections import OrderedDict
from typing import Any, Callable, Iterable, Iterator, Optional, Union

from django.db import models

from .exceptions import DuplicateEntityError

logger = logging.getLogger(__name__)

Resolver = Callable[..., Any]


class Entity:
    """
    A Django model exposed as a GraphQL object type.

    Args:
        model: The Django model class to reflect over
        description: Text used for the object type and relationship fields
        name: Entity key, defaults to the lower-cased model class name
    """

    def __init__(
        self,
        model: type[models.Model],
        description: Optional[str] = None,
        name: Optional[str] = None,
    ):
        self.model = model
        self.description = description or ""
        self.name = (name or model.__name__).lower()

    def instance(self) -> type[models.Model]:
        return self.model

    def __repr__(self) -> str:
        return f"<Entity {self.name}: {self.model.__name__}>"


class Resolvers:
    """
    Factory of resolver functions for entities.

    Applications subclass this and return graphene resolvers with the
    ``resolver(root, info, **kwargs)`` signature.
    """

    def single(self, entity: Entity) -> Resolver:
        """Return a resolver fetching one object of ``entity``."""
        raise NotImplementedError

    def listing(self, entity: Entity) -> Resolver:
        """Return a resolver fetching a list of ``entity`` objects."""
        raise NotImplementedError


class EntityRegistry:
    """Ordered collection of entities keyed by name."""

    def __init__(self, entities: Optional[Iterable[Union[Entity, type[models.Model]]]] = None):
        self._entities: "OrderedDict[str, Entity]" = OrderedDict()
        for entity in entities or ():
            self.register(entity)

    def register(
        self,
        model_or_entity: Union[Entity, type[models.Model]],
        description: Optional[str] = None,
    ) -> Entity:
        if isinstance(model_or_entity, Entity):
            entity = model_or_entity
            if description is not None:
                # registered copy carries the new description
                entity = Entity(entity.model, description=description, name=entity.name)
        else:
            entity = Entity(model_or_entity, description=description)

        if entity.name in self._entities:
            raise DuplicateEntityError(
                f"Entity '{entity.name}' is already registered",
                model_name=entity.model.__name__,
            )
        self._entities[entity.name] = entity
        logger.debug("Registered entity %s", entity.name)
        return entity

    def get(self, name: str) -> Optional[Entity]:
        return self._entities.get(name)

    def as_dict(self) -> dict[str, Entity]:
        return dict(self._entities)

    def __contains__(self, name: object) -> bool:
        return name in self._entities

    def __getitem__(self, name: str) -> Entity:
        return self._entities[name]

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities.values())

    def __len__(self) -> int:
        return len(self._entities)
