"""Materialize full paradigms into the form tables.

Every verb gets all ten tense categories and every noun all ten cases,
generated with the conjugation and declension engines. Both generators
clear the existing rows first so they can be re-run after the lexicon grows.

This is deterministic rule application, not lookup: the stored forms are
exactly what conjugate_all() and decline() return for the lemma's class.
"""

import logging
from collections.abc import Callable

from sqlalchemy import Connection, Table, func, select

from finnish_anki.conjugation import conjugate_all, paradigm_slots
from finnish_anki.db.schema import lemmas, noun_forms, verb_forms
from finnish_anki.declension import decline
from finnish_anki.enums import POS, DeclensionType, NounCase, Tense, VerbType

logger = logging.getLogger(__name__)


def _clear(conn: Connection, table: Table) -> int:
    """Delete all rows of a form table, returning how many there were."""
    existing = conn.execute(select(func.count()).select_from(table)).scalar() or 0
    if existing:
        conn.execute(table.delete())
    return existing


def generate_verb_forms(
    conn: Connection,
    *,
    progress_callback: Callable[[int, int], None] | None = None,
) -> dict[str, int]:
    """Generate all conjugated forms for every verb lemma.

    Args:
        conn: Database connection
        progress_callback: Optional callback for progress updates (current, total)

    Returns:
        Dict with stats:
        - cleared: Number of previously stored forms removed
        - lemmas: Number of verbs conjugated
        - forms: Number of forms inserted
        - invalid_class: Number of verbs skipped for an unknown type tag
    """
    stats = {"cleared": _clear(conn, verb_forms), "lemmas": 0, "forms": 0, "invalid_class": 0}

    verbs = conn.execute(
        select(lemmas.c.id, lemmas.c.written, lemmas.c.word_class).where(
            lemmas.c.pos == POS.VERB.value
        )
    ).fetchall()
    total = len(verbs)

    for idx, row in enumerate(verbs):
        if progress_callback and idx % 500 == 0:
            progress_callback(idx, total)

        verb_type = VerbType.parse(row.word_class)
        if verb_type is None:
            logger.warning("Verb '%s' has unknown type %r", row.written, row.word_class)
            stats["invalid_class"] += 1
            continue

        insert_batch: list[dict[str, str | int | bool]] = []
        for tense in Tense:
            forms = conjugate_all(row.written, verb_type, tense)
            for position, (written, (person, number)) in enumerate(
                zip(forms, paradigm_slots(tense), strict=True)
            ):
                insert_batch.append(
                    {
                        "lemma_id": row.id,
                        "written": written,
                        "tense": tense.value,
                        "position": position,
                        "person": person,
                        "number": number,
                        "is_negative": tense.is_negative,
                    }
                )

        conn.execute(verb_forms.insert(), insert_batch)
        stats["lemmas"] += 1
        stats["forms"] += len(insert_batch)

    if progress_callback:
        progress_callback(total, total)

    return stats


def generate_noun_forms(
    conn: Connection,
    *,
    progress_callback: Callable[[int, int], None] | None = None,
) -> dict[str, int]:
    """Generate all case forms for every noun lemma.

    The accusative is stored too (same text as the genitive) so each noun has
    one row per NounCase.

    Returns:
        Dict with stats: cleared, lemmas, forms, invalid_class
    """
    stats = {"cleared": _clear(conn, noun_forms), "lemmas": 0, "forms": 0, "invalid_class": 0}

    nouns = conn.execute(
        select(lemmas.c.id, lemmas.c.written, lemmas.c.word_class).where(
            lemmas.c.pos == POS.NOUN.value
        )
    ).fetchall()
    total = len(nouns)

    for idx, row in enumerate(nouns):
        if progress_callback and idx % 500 == 0:
            progress_callback(idx, total)

        declension_type = DeclensionType.parse(row.word_class)
        if declension_type is None:
            logger.warning("Noun '%s' has unknown type %r", row.written, row.word_class)
            stats["invalid_class"] += 1
            continue

        insert_batch = [
            {
                "lemma_id": row.id,
                "written": decline(row.written, declension_type, case),
                "noun_case": case.value,
                "is_citation_form": case == NounCase.NOMINATIVE,
            }
            for case in NounCase
        ]
        conn.execute(noun_forms.insert(), insert_batch)
        stats["lemmas"] += 1
        stats["forms"] += len(insert_batch)

    if progress_callback:
        progress_callback(total, total)

    return stats
