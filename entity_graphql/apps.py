"""
Django app configuration for entity GraphQL schema generation.
"""

import logging

from django.apps import AppConfig as BaseAppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for entity_graphql."""

    name = "entity_graphql"
    verbose_name = "Entity GraphQL"
    label = "entity_graphql"

    def ready(self):
        """Validate the ENTITY_GRAPHQL setting once Django has loaded."""
        configured = getattr(settings, "ENTITY_GRAPHQL", None)
        if configured is None:
            logger.debug("ENTITY_GRAPHQL is not set; schema must be built explicitly")
            return
        if not isinstance(configured, dict):
            logger.warning(
                "ENTITY_GRAPHQL should be a dict, got %s", type(configured).__name__
            )
            return
        for key in ("entities", "resolvers"):
            if not configured.get(key):
                logger.warning("ENTITY_GRAPHQL['%s'] is not configured", key)
