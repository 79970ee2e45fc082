"""
Library defaults for the ENTITY_GRAPHQL setting.
"""

LIBRARY_DEFAULTS = {
    "entities": None,
    "resolvers": None,
    "type_generation_settings": {
        "exclude_fields": {},
        "custom_field_mappings": {},
        "include_reverse_relations": False,
        "skip_unsupported_fields": False,
    },
    "schema_settings": {
        "query_name": "Query",
        "auto_camelcase": False,
    },
}
