"""
GraphQL view serving the entity schema configured in settings.
"""

import logging

from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt
from graphene_django.views import GraphQLView

from .schema import get_schema

logger = logging.getLogger(__name__)


@method_decorator(csrf_exempt, name="dispatch")
class EntityGraphQLView(GraphQLView):
    """
    GraphQLView bound to the ENTITY_GRAPHQL schema.

    The schema is built on first use so that URL configuration can be imported
    before the application's models are ready.
    """

    def __init__(self, **kwargs):
        schema = kwargs.pop("schema", None) or get_schema()
        super().__init__(schema=schema, **kwargs)
