"""Import the built-in starter lexicon."""

import logging
from collections.abc import Callable, Iterable

from sqlalchemy import Connection, select

from finnish_anki.db.schema import lemmas
from finnish_anki.enums import POS
from finnish_anki.lexicon import SEED_NOUNS, SEED_VERBS, LexiconEntry
from finnish_anki.normalize import normalize
from finnish_anki.stems import stem

logger = logging.getLogger(__name__)


def _existing_keys(conn: Connection) -> set[tuple[str, str]]:
    """Return (normalized, pos) for every lemma already in the database."""
    result = conn.execute(select(lemmas.c.normalized, lemmas.c.pos))
    return {(row.normalized, row.pos) for row in result}


def entry_to_row(entry: LexiconEntry) -> dict[str, str | int | None]:
    """Build a lemmas insert row, computing the stem with the stem extractor."""
    return {
        "written": entry.written,
        "normalized": normalize(entry.written),
        "pos": entry.pos.value,
        "word_class": entry.word_class.value,
        "stem": stem(entry.written, entry.word_class),
        "translation": entry.translation,
        "frequency": entry.frequency,
        "cefr_level": entry.cefr_level.value,
    }


def insert_entries(
    conn: Connection,
    entries: Iterable[LexiconEntry],
    *,
    progress_callback: Callable[[int, int], None] | None = None,
) -> dict[str, int]:
    """Insert lexicon entries, skipping lemmas that already exist.

    A lemma is identified by its normalized form and part of speech, so
    re-running an import is a no-op.

    Returns:
        Statistics dict with "lemmas" (inserted) and "skipped" (already present)
    """
    stats = {"lemmas": 0, "skipped": 0}
    entries = list(entries)
    total = len(entries)
    seen = _existing_keys(conn)
    insert_batch: list[dict[str, str | int | None]] = []

    for idx, entry in enumerate(entries, 1):
        if progress_callback and idx % 1000 == 0:
            progress_callback(idx, total)

        key = (normalize(entry.written), entry.pos.value)
        if key in seen:
            logger.debug("Lemma '%s' (%s) already present", entry.written, entry.pos)
            stats["skipped"] += 1
            continue

        seen.add(key)
        insert_batch.append(entry_to_row(entry))
        stats["lemmas"] += 1

    if insert_batch:
        conn.execute(lemmas.insert(), insert_batch)

    if progress_callback:
        progress_callback(total, total)

    return stats


def import_seed(
    conn: Connection,
    *,
    pos_filter: POS | str | None = None,
    progress_callback: Callable[[int, int], None] | None = None,
) -> dict[str, int]:
    """Seed the database with the starter verbs and nouns.

    Args:
        conn: SQLAlchemy connection
        pos_filter: Only seed this part of speech (default: both)
        progress_callback: Optional callback for progress reporting (current, total)

    Returns:
        Statistics dict with counts
    """
    entries = [*SEED_VERBS, *SEED_NOUNS]
    if pos_filter is not None:
        entries = [e for e in entries if e.pos == pos_filter]
    return insert_entries(conn, entries, progress_callback=progress_callback)
