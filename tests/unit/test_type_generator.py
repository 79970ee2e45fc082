"""
Unit tests for scalar field extraction and object type generation.
"""

import graphene
import pytest

from entity_graphql import (
    Entity,
    FilterKind,
    NotScalarFieldError,
    SchemaGenerationError,
    UnsupportedFieldTypeError,
)
from entity_graphql.core.meta import get_entity_meta
from entity_graphql.core.settings import TypeGeneratorSettings
from entity_graphql.generators.introspector import ModelIntrospector
from entity_graphql.generators.types import TypeGenerator, field_definition, object_type
from tests.models import Attachment, Author, Book, Notice, Review, Shelf, Tag

pytestmark = pytest.mark.unit

JSON_SETTINGS = TypeGeneratorSettings(custom_field_mappings={"JSONField": graphene.JSONString})


def _info(model, name):
    for info in ModelIntrospector.for_model(model).fields:
        if info.name == name:
            return info
    raise LookupError(name)


def _definition(model, name, settings=JSON_SETTINGS):
    return field_definition(
        _info(model, name), get_entity_meta(model), model.__name__, settings
    )


class TestFieldDefinition:
    @pytest.mark.parametrize(
        "model,field_name,scalar,kind",
        [
            (Book, "title", graphene.String, FilterKind.STRING),
            (Author, "active", graphene.Boolean, FilterKind.BOOL),
            (Book, "pages", graphene.Int, FilterKind.INT),
            (Book, "rating", graphene.Float, FilterKind.FLOAT),
            (Tag, "label", graphene.String, FilterKind.STRING),
        ],
    )
    def test_filterable_scalars(self, model, field_name, scalar, kind):
        definition = _definition(model, field_name)

        assert definition.field.type is scalar
        assert definition.filter == kind

    @pytest.mark.parametrize(
        "model,field_name,scalar",
        [
            (Book, "id", graphene.ID),
            (Book, "isbn", graphene.String),
            (Book, "price", graphene.Float),
            (Book, "published_at", graphene.DateTime),
            (Author, "born", graphene.Date),
            (Author, "email", graphene.String),
        ],
    )
    def test_non_filterable_scalars(self, model, field_name, scalar):
        definition = _definition(model, field_name)

        assert definition.field.type is scalar
        assert definition.filter == FilterKind.NONE

    def test_renamed_field_reads_model_attribute(self):
        definition = _definition(Book, "title")

        assert definition.name == "headline"
        assert definition.field.name == "headline"
        assert definition.field.description == "Title of the book"

    def test_options_only_name_keeps_field_name(self):
        definition = _definition(Notice, "title")

        assert definition.name == "title"
        assert definition.field.name == "title"

    @pytest.mark.parametrize("field_name", ["author", "tags"])
    def test_relations_are_not_scalars(self, field_name):
        with pytest.raises(NotScalarFieldError) as exc_info:
            _definition(Book, field_name)
        assert exc_info.value.field_name == field_name

    def test_unsupported_type(self):
        with pytest.raises(UnsupportedFieldTypeError) as exc_info:
            _definition(Attachment, "payload")

        error = exc_info.value
        assert error.model_name == "Attachment"
        assert error.internal_type == "BinaryField"

    def test_custom_mapping_by_field_class(self):
        from django.db import models

        settings = TypeGeneratorSettings(custom_field_mappings={models.BinaryField: graphene.Base64})
        definition = _definition(Attachment, "payload", settings)

        assert definition.field.type is graphene.Base64
        assert definition.filter == FilterKind.NONE

    def test_invalid_exposed_name(self):
        with pytest.raises(SchemaGenerationError) as exc_info:
            _definition(Shelf, "code")
        assert "shelf-code" in str(exc_info.value)


class TestObjectType:
    def test_book_object_type(self):
        book_type, filters = object_type(Entity(Book, "Published books"), JSON_SETTINGS)

        assert issubclass(book_type, graphene.ObjectType)
        assert book_type._meta.name == "book"
        assert book_type._meta.description == "Published books"
        assert [field.name for field in book_type._meta.fields.values()] == [
            "id",
            "headline",
            "isbn",
            "pages",
            "price",
            "rating",
            "published_at",
            "metadata",
        ]
        assert filters == {
            "headline": FilterKind.STRING,
            "pages": FilterKind.INT,
            "rating": FilterKind.FLOAT,
        }

    def test_filters_only_hold_filterable_fields(self):
        _, filters = object_type(Entity(Author), JSON_SETTINGS)
        assert filters == {"name": FilterKind.STRING, "active": FilterKind.BOOL}

    def test_model_without_filters(self):
        review_type, filters = object_type(Entity(Review), JSON_SETTINGS)

        assert list(review_type._meta.fields) == ["id", "score"]
        assert filters == {}

    def test_unsupported_field_propagates(self):
        with pytest.raises(UnsupportedFieldTypeError):
            object_type(Entity(Book), TypeGeneratorSettings())

    def test_unsupported_field_can_be_skipped(self, caplog):
        settings = TypeGeneratorSettings(skip_unsupported_fields=True)

        attachment_type, _ = object_type(Entity(Attachment), settings)

        assert list(attachment_type._meta.fields) == ["id", "name"]
        assert "payload" in caplog.text

    def test_excluded_fields(self):
        settings = TypeGeneratorSettings(
            exclude_fields={"Author": ["email", "born"]},
        )
        author_type, _ = TypeGenerator(settings).object_type(Entity(Author))

        assert list(author_type._meta.fields) == ["id", "name", "active"]

    def test_keyword_exposed_name(self):
        notice_type, _ = object_type(Entity(Notice), TypeGeneratorSettings())

        assert notice_type._meta.fields["body"].name == "from"
        assert [field.name for field in notice_type._meta.fields.values()] == [
            "id",
            "from",
            "title",
        ]

    def test_keyword_exposed_name_in_schema(self):
        notice_type, _ = object_type(Entity(Notice), TypeGeneratorSettings())
        query = type(
            "Query",
            (graphene.ObjectType,),
            {"notice": graphene.Field(notice_type, name="notice")},
        )

        result = graphene.Schema(query=query, auto_camelcase=False).execute(
            "{ notice { from title } }",
            root_value={"notice": Notice(body="Closed on Monday", title="Hours")},
        )

        assert result.errors is None
        assert result.data == {"notice": {"from": "Closed on Monday", "title": "Hours"}}
