"""Data importers for the Finnish inflection database."""

from finnish_anki.importers.lexicon_csv import import_lexicon
from finnish_anki.importers.paradigms import generate_noun_forms, generate_verb_forms
from finnish_anki.importers.seed import import_seed

__all__ = [
    "generate_noun_forms",
    "generate_verb_forms",
    "import_lexicon",
    "import_seed",
]
