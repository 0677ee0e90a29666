"""Import verbs and nouns from a lexicon CSV file.

Expected header (extra columns are ignored):

    written,pos,class,translation,frequency,cefr_level

``class`` accepts roman ("IV") or numeric ("4") type tags. ``frequency`` and
``cefr_level`` are optional. Rows with an unknown part of speech or class tag
are counted as invalid and skipped.
"""

import csv
import logging
from collections.abc import Callable
from pathlib import Path

from sqlalchemy import Connection

from finnish_anki.enums import POS, CEFRLevel, DeclensionType, VerbType
from finnish_anki.importers.seed import insert_entries
from finnish_anki.lexicon import LexiconEntry

logger = logging.getLogger(__name__)

# Rank given to rows without a usable frequency column
UNRANKED_FREQUENCY = 999_999


def _parse_row(row: dict[str, str]) -> LexiconEntry | None:
    """Parse one CSV row, returning None if it can't be used."""
    written = (row.get("written") or "").strip()
    if not written:
        return None

    try:
        pos = POS((row.get("pos") or "").strip().lower())
    except ValueError:
        return None

    class_tag = row.get("class") or ""
    word_class: VerbType | DeclensionType | None
    if pos == POS.VERB:
        word_class = VerbType.parse(class_tag)
    else:
        word_class = DeclensionType.parse(class_tag)
    if word_class is None:
        return None

    try:
        frequency = int(row.get("frequency") or UNRANKED_FREQUENCY)
    except ValueError:
        frequency = UNRANKED_FREQUENCY

    level_tag = (row.get("cefr_level") or "").strip().upper()
    cefr_level = CEFRLevel(level_tag) if level_tag in CEFRLevel.__members__ else CEFRLevel.A1

    return LexiconEntry(
        written=written,
        pos=pos,
        word_class=word_class,
        translation=(row.get("translation") or "").strip(),
        frequency=frequency,
        cefr_level=cefr_level,
    )


def parse_lexicon_csv(csv_path: Path) -> tuple[list[LexiconEntry], int]:
    """Parse a lexicon CSV.

    Returns:
        (valid entries, number of invalid rows)
    """
    entries: list[LexiconEntry] = []
    invalid = 0

    with csv_path.open(encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for line_number, row in enumerate(reader, 2):
            entry = _parse_row(row)
            if entry is None:
                logger.warning("Skipping invalid lexicon row %d: %r", line_number, row)
                invalid += 1
                continue
            entries.append(entry)

    return entries, invalid


def import_lexicon(
    conn: Connection,
    csv_path: Path,
    *,
    pos_filter: POS | str | None = None,
    progress_callback: Callable[[int, int], None] | None = None,
) -> dict[str, int]:
    """Import lemmas from a lexicon CSV into the database.

    Args:
        conn: SQLAlchemy connection
        csv_path: Path to the lexicon CSV
        pos_filter: Only import this part of speech (default: both)
        progress_callback: Optional callback for progress reporting (current, total)

    Returns:
        Statistics dict with "lemmas", "skipped" (already present),
        "invalid" (unparseable rows) and "filtered" (other part of speech)
    """
    entries, invalid = parse_lexicon_csv(csv_path)

    filtered = 0
    if pos_filter is not None:
        kept = [e for e in entries if e.pos == pos_filter]
        filtered = len(entries) - len(kept)
        entries = kept

    stats = insert_entries(conn, entries, progress_callback=progress_callback)
    stats["invalid"] = invalid
    stats["filtered"] = filtered
    return stats
