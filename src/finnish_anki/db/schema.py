"""Database schema definition using SQLAlchemy Core."""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.engine import Engine

metadata = MetaData()

# Master lemma table: one row per dictionary form
lemmas = Table(
    "lemmas",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("written", Text, nullable=False),  # canonical form (e.g., "puhua", "käsi")
    Column("normalized", Text, nullable=False),  # lookup key from normalize()
    Column("pos", String(20), nullable=False),  # 'verb' or 'noun'
    # Inflection class: VerbType for verbs, DeclensionType for nouns ('I'..'VI')
    Column("word_class", String(5), nullable=False),
    Column("stem", Text),  # stem extracted from the canonical form (e.g., "puhu", "käde")
    Column("translation", Text),  # English gloss
    Column("frequency", Integer),  # frequency rank, 1 = most frequent
    Column("cefr_level", String(2)),  # 'A1'..'C2'
    Column("examples", JSON(none_as_null=True)),  # NULL, or JSON array of example sentences
    UniqueConstraint("normalized", "pos", name="uq_lemmas_normalized_pos"),
)

# Verb conjugations, one row per paradigm position
#
# position is the index into conjugate_all(): 0-5 for minä..he, or 0-4 for the
# imperatives (sinä, te, me, hän, he). person/number are stored alongside so
# queries don't need to know the imperative ordering.
verb_forms = Table(
    "verb_forms",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("lemma_id", Integer, ForeignKey("lemmas.id", ondelete="CASCADE"), nullable=False),
    Column("written", Text, nullable=False),  # e.g., "puhun", "en puhu", "olemme puhuneet"
    Column("tense", Text, nullable=False),  # Tense value, e.g. 'present', 'negative_perfect'
    Column("position", Integer, nullable=False),
    Column("person", Integer, nullable=False),  # 1, 2, 3
    Column("number", Text, nullable=False),  # singular, plural
    Column("is_negative", Boolean, default=False),
    UniqueConstraint("lemma_id", "tense", "position", name="uq_verb_forms_slot"),
)

# Noun case forms, one row per case (accusative included as a genitive alias)
noun_forms = Table(
    "noun_forms",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("lemma_id", Integer, ForeignKey("lemmas.id", ondelete="CASCADE"), nullable=False),
    Column("written", Text, nullable=False),  # e.g., "talossa"
    Column("noun_case", Text, nullable=False),  # NounCase value
    # Citation form marker - True for the nominative
    Column("is_citation_form", Boolean, default=False),
    UniqueConstraint("lemma_id", "noun_case", name="uq_noun_forms_case"),
)

# Indexes (defined separately for clarity)
Index("idx_lemmas_pos_class", lemmas.c.pos, lemmas.c.word_class)
Index("idx_lemmas_frequency", lemmas.c.frequency)
Index("idx_verb_forms_lemma", verb_forms.c.lemma_id)
Index("idx_verb_forms_tense", verb_forms.c.tense)
Index("idx_verb_forms_written", verb_forms.c.written)
Index("idx_noun_forms_lemma", noun_forms.c.lemma_id)
Index("idx_noun_forms_written", noun_forms.c.written)


def init_db(engine: Engine) -> None:
    """Initialize the database schema.

    Creates all tables and indexes if they don't exist.
    Safe to call multiple times (uses checkfirst=True by default).
    """
    metadata.create_all(engine)
