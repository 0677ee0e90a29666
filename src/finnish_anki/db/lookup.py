"""Lemma lookups shared by the CLI, quiz and verification."""

import random

from sqlalchemy import Connection, Row, select

from finnish_anki.db.schema import lemmas
from finnish_anki.enums import POS, CEFRLevel, DeclensionType, VerbType
from finnish_anki.lexicon import LexiconEntry
from finnish_anki.normalize import normalize


def get_lemma(conn: Connection, written: str, pos: POS | str | None = None) -> Row | None:
    """Find a lemma by its dictionary form (case-insensitive).

    Returns the first match by frequency rank, or None if not found.
    """
    query = select(lemmas).where(lemmas.c.normalized == normalize(written))
    if pos is not None:
        query = query.where(lemmas.c.pos == str(pos))
    return conn.execute(query.order_by(lemmas.c.frequency, lemmas.c.id)).first()


def random_lemma(conn: Connection, pos: POS | str, rng: random.Random) -> Row | None:
    """Pick a lemma of the given part of speech using the supplied RNG.

    Candidates are ordered by id so the same seed picks the same lemma.
    """
    rows = conn.execute(
        select(lemmas).where(lemmas.c.pos == str(pos)).order_by(lemmas.c.id)
    ).fetchall()
    if not rows:
        return None
    return rng.choice(rows)


def row_to_entry(row: Row) -> LexiconEntry | None:
    """Convert a lemmas row into a LexiconEntry, or None if its class tag is invalid."""
    pos = POS(row.pos)
    word_class: VerbType | DeclensionType | None
    if pos == POS.VERB:
        word_class = VerbType.parse(row.word_class)
    else:
        word_class = DeclensionType.parse(row.word_class)
    if word_class is None:
        return None

    level = CEFRLevel(row.cefr_level) if row.cefr_level in CEFRLevel.__members__ else CEFRLevel.A1
    return LexiconEntry(
        written=row.written,
        pos=pos,
        word_class=word_class,
        translation=row.translation or "",
        frequency=row.frequency or 0,
        cefr_level=level,
    )
