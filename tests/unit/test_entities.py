"""
Unit tests for entities, the entity registry and the resolver base class.
"""

import pytest

from entity_graphql import DuplicateEntityError, Entity, EntityRegistry, Resolvers
from tests.models import Author, Book

pytestmark = pytest.mark.unit


class TestEntity:
    def test_defaults(self):
        entity = Entity(Book)
        assert entity.name == "book"
        assert entity.description == ""
        assert entity.instance() is Book

    def test_explicit_name_is_lower_cased(self):
        entity = Entity(Book, description="Books", name="Novel")
        assert entity.name == "novel"
        assert entity.description == "Books"


class TestEntityRegistry:
    def test_register_models_and_entities(self):
        registry = EntityRegistry()
        author = registry.register(Author, description="Writers")
        book = registry.register(Entity(Book))

        assert list(registry) == [author, book]
        assert "author" in registry
        assert registry["book"] is book
        assert registry.get("tag") is None
        assert len(registry) == 2
        assert registry.as_dict() == {"author": author, "book": book}

    def test_description_applies_to_registered_entity(self):
        registry = EntityRegistry()
        entity = Entity(Book, name="novel")

        registered = registry.register(entity, description="Published books")

        assert registered.description == "Published books"
        assert registered.name == "novel"
        assert registry["novel"] is registered
        assert entity.description == ""

    def test_entity_description_kept_without_override(self):
        registry = EntityRegistry()
        entity = Entity(Book, "Published books")

        assert registry.register(entity) is entity
        assert entity.description == "Published books"

    def test_duplicate_names_are_rejected(self):
        registry = EntityRegistry([Book])
        with pytest.raises(DuplicateEntityError) as exc_info:
            registry.register(Entity(Author, name="book"))
        assert exc_info.value.model_name == "Author"


class TestResolvers:
    def test_base_class_must_be_overridden(self):
        resolvers = Resolvers()
        entity = Entity(Book)
        with pytest.raises(NotImplementedError):
            resolvers.single(entity)
        with pytest.raises(NotImplementedError):
            resolvers.listing(entity)
