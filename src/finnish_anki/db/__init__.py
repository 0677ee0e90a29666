"""Database modules for the Finnish inflection database."""

from finnish_anki.db.connection import DEFAULT_DB_PATH, get_connection, get_engine
from finnish_anki.db.lookup import get_lemma, random_lemma, row_to_entry
from finnish_anki.db.schema import (
    init_db,
    lemmas,
    metadata,
    noun_forms,
    verb_forms,
)

__all__ = [
    "DEFAULT_DB_PATH",
    "get_connection",
    "get_engine",
    "get_lemma",
    "init_db",
    "lemmas",
    "metadata",
    "noun_forms",
    "random_lemma",
    "row_to_entry",
    "verb_forms",
]
