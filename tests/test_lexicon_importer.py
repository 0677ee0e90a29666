"""Tests for the lexicon CSV importer."""

import tempfile
from pathlib import Path

from sqlalchemy import select

from finnish_anki.db import get_connection, get_engine, init_db, lemmas
from finnish_anki.enums import POS, CEFRLevel, DeclensionType, VerbType
from finnish_anki.importers import import_lexicon
from finnish_anki.importers.lexicon_csv import UNRANKED_FREQUENCY, parse_lexicon_csv

HEADER = "written,pos,class,translation,frequency,cefr_level"


def _create_test_csv(lines: list[str]) -> Path:
    """Create a temporary lexicon CSV file with test rows."""
    with tempfile.NamedTemporaryFile(
        mode="w", suffix=".csv", delete=False, encoding="utf-8"
    ) as f:
        f.write(HEADER + "\n")
        for line in lines:
            f.write(line + "\n")
        return Path(f.name)


def _create_db() -> Path:
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as db_file:
        db_path = Path(db_file.name)
    init_db(get_engine(db_path))
    return db_path


class TestParseLexiconCsv:
    """Tests for parse_lexicon_csv()."""

    def test_parses_valid_rows(self) -> None:
        csv_path = _create_test_csv(
            [
                "kirjoittaa,verb,I,to write,40,A2",
                "ikkuna,noun,1,window,,",
                "Hevonen,Noun,iv,horse,300,B1",
            ]
        )
        try:
            entries, invalid = parse_lexicon_csv(csv_path)
        finally:
            csv_path.unlink()

        assert invalid == 0
        assert len(entries) == 3

        verb, window, horse = entries
        assert verb.pos == POS.VERB
        assert verb.word_class == VerbType.I
        assert verb.frequency == 40
        assert verb.cefr_level == CEFRLevel.A2

        assert window.word_class == DeclensionType.I
        assert window.frequency == UNRANKED_FREQUENCY
        assert window.cefr_level == CEFRLevel.A1

        assert horse.pos == POS.NOUN
        assert horse.word_class == DeclensionType.IV

    def test_counts_invalid_rows(self) -> None:
        csv_path = _create_test_csv(
            [
                "hyvä,adjective,I,good,1,A1",  # unsupported POS
                "talo,noun,VII,house,1,A1",  # unknown class
                ",noun,I,missing word,1,A1",
                "auto,noun,I,car,lots,A1",  # bad frequency is tolerated
            ]
        )
        try:
            entries, invalid = parse_lexicon_csv(csv_path)
        finally:
            csv_path.unlink()

        assert invalid == 3
        assert [e.written for e in entries] == ["auto"]
        assert entries[0].frequency == UNRANKED_FREQUENCY


class TestImportLexicon:
    """Tests for import_lexicon()."""

    def test_imports_rows(self) -> None:
        db_path = _create_db()
        csv_path = _create_test_csv(
            [
                "kirjoittaa,verb,I,to write,40,A2",
                "ikkuna,noun,I,window,120,A1",
                "talo,noun,XX,house,1,A1",
            ]
        )
        try:
            with get_connection(db_path) as conn:
                stats = import_lexicon(conn, csv_path)

                assert stats == {"lemmas": 2, "skipped": 0, "invalid": 1, "filtered": 0}
                row = conn.execute(
                    select(lemmas).where(lemmas.c.written == "kirjoittaa")
                ).fetchone()
                assert row is not None
                assert row.stem == "kirjoitta"
                assert row.translation == "to write"
        finally:
            csv_path.unlink()
            db_path.unlink()

    def test_duplicates_skipped(self) -> None:
        db_path = _create_db()
        csv_path = _create_test_csv(
            [
                "ikkuna,noun,I,window,120,A1",
                "IKKUNA,noun,I,window,121,A1",
            ]
        )
        try:
            with get_connection(db_path) as conn:
                first = import_lexicon(conn, csv_path)
                second = import_lexicon(conn, csv_path)

            assert first["lemmas"] == 1
            assert first["skipped"] == 1
            assert second["lemmas"] == 0
            assert second["skipped"] == 2
        finally:
            csv_path.unlink()
            db_path.unlink()

    def test_pos_filter(self) -> None:
        db_path = _create_db()
        csv_path = _create_test_csv(
            [
                "kirjoittaa,verb,I,to write,40,A2",
                "ikkuna,noun,I,window,120,A1",
            ]
        )
        try:
            with get_connection(db_path) as conn:
                stats = import_lexicon(conn, csv_path, pos_filter=POS.NOUN)
                written = [row.written for row in conn.execute(select(lemmas.c.written))]

            assert stats["lemmas"] == 1
            assert stats["filtered"] == 1
            assert written == ["ikkuna"]
        finally:
            csv_path.unlink()
            db_path.unlink()

    def test_handles_empty_csv(self) -> None:
        db_path = _create_db()
        csv_path = _create_test_csv([])
        try:
            with get_connection(db_path) as conn:
                stats = import_lexicon(conn, csv_path)
            assert stats == {"lemmas": 0, "skipped": 0, "invalid": 0, "filtered": 0}
        finally:
            csv_path.unlink()
            db_path.unlink()
