"""
Singular and plural forms of entity and field names.
"""

import inflect

_engine = inflect.engine()


def singularize(word: str) -> str:
    """Singular form of ``word``; words that are already singular are kept."""
    singular = _engine.singular_noun(word)
    return singular or word


def pluralize(word: str) -> str:
    return _engine.plural(word)
