"""
Dump the entity schema configured in ENTITY_GRAPHQL.
"""

import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from graphql import GraphQLError, print_schema, print_type

from entity_graphql.exceptions import SchemaGenerationError
from entity_graphql.schema import get_schema


class Command(BaseCommand):
    help = "Print the entity GraphQL schema as SDL, or as an introspection result with --json."

    def add_arguments(self, parser):
        parser.add_argument(
            "entities",
            nargs="*",
            help="Only print the object types of these entities (SDL only).",
        )
        parser.add_argument("--out", dest="output_file", help="Write to this file instead of stdout.")
        parser.add_argument("--json", action="store_true", help="Dump the introspection result.")
        parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2).")

    def handle(self, *args, **options):
        try:
            schema = get_schema()
        except SchemaGenerationError as exc:
            raise CommandError(f"Could not build the entity schema: {exc}") from exc

        if options["json"]:
            if options["entities"]:
                raise CommandError("Entity names cannot be combined with --json")
            output = self.render_introspection(schema, options["indent"])
        else:
            output = self.render_sdl(schema, options["entities"])

        if options["output_file"]:
            path = Path(options["output_file"])
            path.write_text(output, encoding="utf-8")
            self.stdout.write(self.style.SUCCESS(f"Entity schema written to {path}"))
        else:
            self.stdout.write(output)

    def render_introspection(self, schema, indent):
        try:
            data = schema.introspect()
        except GraphQLError as exc:
            raise CommandError(f"Introspection failed: {exc}") from exc
        return json.dumps(data, indent=indent)

    def render_sdl(self, schema, entities):
        graphql_schema = schema.graphql_schema
        if not entities:
            return print_schema(graphql_schema)

        blocks = []
        for name in entities:
            graphql_type = graphql_schema.get_type(name.lower())
            if graphql_type is None:
                raise CommandError(f"Unknown entity '{name}'")
            blocks.append(print_type(graphql_type))
        return "\n\n".join(blocks)
