"""Tests for paradigm generation into the form tables."""

import tempfile
from pathlib import Path

import pytest
from sqlalchemy import Connection, func, select

from finnish_anki.db import get_connection, get_engine, init_db, lemmas, noun_forms, verb_forms
from finnish_anki.enums import NounCase, Tense
from finnish_anki.importers import generate_noun_forms, generate_verb_forms, import_seed
from finnish_anki.lexicon import SEED_NOUNS, SEED_VERBS

# 8 six-form tenses plus the two five-form imperatives
FORMS_PER_VERB = 8 * 6 + 2 * 5


@pytest.fixture
def seeded_db():
    """Create a temporary database with the starter lexicon."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    try:
        init_db(get_engine(db_path))
        with get_connection(db_path) as conn:
            import_seed(conn)
        yield db_path
    finally:
        db_path.unlink(missing_ok=True)


def _verb_form(conn: Connection, infinitive: str, tense: Tense, position: int) -> str | None:
    return conn.execute(
        select(verb_forms.c.written)
        .join(lemmas, verb_forms.c.lemma_id == lemmas.c.id)
        .where(
            lemmas.c.written == infinitive,
            verb_forms.c.tense == tense.value,
            verb_forms.c.position == position,
        )
    ).scalar()


def _noun_form(conn: Connection, nominative: str, case: NounCase) -> str | None:
    return conn.execute(
        select(noun_forms.c.written)
        .join(lemmas, noun_forms.c.lemma_id == lemmas.c.id)
        .where(lemmas.c.written == nominative, noun_forms.c.noun_case == case.value)
    ).scalar()


class TestGenerateVerbForms:
    """Tests for generate_verb_forms()."""

    def test_generates_every_tense(self, seeded_db: Path) -> None:
        with get_connection(seeded_db) as conn:
            stats = generate_verb_forms(conn)

            assert stats["lemmas"] == len(SEED_VERBS)
            assert stats["forms"] == len(SEED_VERBS) * FORMS_PER_VERB
            assert stats["cleared"] == 0
            assert stats["invalid_class"] == 0

            assert _verb_form(conn, "puhua", Tense.PRESENT, 0) == "puhun"
            assert _verb_form(conn, "puhua", Tense.PRESENT, 5) == "puhuvat"
            assert _verb_form(conn, "tulla", Tense.NEGATIVE_PRESENT, 5) == "eivät tule"
            assert _verb_form(conn, "puhua", Tense.IMPERATIVE, 1) == "puhukaa!"

    def test_person_labels(self, seeded_db: Path) -> None:
        with get_connection(seeded_db) as conn:
            generate_verb_forms(conn)

            row = conn.execute(
                select(verb_forms)
                .join(lemmas, verb_forms.c.lemma_id == lemmas.c.id)
                .where(
                    lemmas.c.written == "puhua",
                    verb_forms.c.tense == Tense.NEGATIVE_IMPERATIVE.value,
                    verb_forms.c.position == 0,
                )
            ).fetchone()
            assert row is not None
            assert row.written == "älä puhu"
            assert row.person == 2
            assert row.number == "singular"
            assert row.is_negative

    def test_rerun_replaces_forms(self, seeded_db: Path) -> None:
        with get_connection(seeded_db) as conn:
            first = generate_verb_forms(conn)
            second = generate_verb_forms(conn)

            assert second["cleared"] == first["forms"]
            total = conn.execute(select(func.count()).select_from(verb_forms)).scalar()
            assert total == first["forms"]

    def test_skips_unknown_class(self, seeded_db: Path) -> None:
        with get_connection(seeded_db) as conn:
            conn.execute(
                lemmas.update().where(lemmas.c.written == "puhua").values(word_class="VIII")
            )
            stats = generate_verb_forms(conn)

            assert stats["invalid_class"] == 1
            assert stats["lemmas"] == len(SEED_VERBS) - 1
            assert _verb_form(conn, "puhua", Tense.PRESENT, 0) is None


class TestGenerateNounForms:
    """Tests for generate_noun_forms()."""

    def test_generates_every_case(self, seeded_db: Path) -> None:
        with get_connection(seeded_db) as conn:
            stats = generate_noun_forms(conn)

            assert stats["lemmas"] == len(SEED_NOUNS)
            assert stats["forms"] == len(SEED_NOUNS) * len(NounCase)

            assert _noun_form(conn, "talo", NounCase.GENITIVE) == "talon"
            assert _noun_form(conn, "talo", NounCase.ACCUSATIVE) == "talon"
            assert _noun_form(conn, "käsi", NounCase.ILLATIVE) == "käteen"
            assert _noun_form(conn, "nainen", NounCase.PARTITIVE) == "naista"

    def test_citation_form_flag(self, seeded_db: Path) -> None:
        with get_connection(seeded_db) as conn:
            generate_noun_forms(conn)

            flagged = conn.execute(
                select(noun_forms.c.noun_case).where(noun_forms.c.is_citation_form)
            ).fetchall()
            assert {row.noun_case for row in flagged} == {"nominative"}
            assert len(flagged) == len(SEED_NOUNS)

    def test_progress_callback(self, seeded_db: Path) -> None:
        calls: list[tuple[int, int]] = []
        with get_connection(seeded_db) as conn:
            generate_noun_forms(
                conn, progress_callback=lambda cur, total: calls.append((cur, total))
            )

        assert calls[0] == (0, len(SEED_NOUNS))
        assert calls[-1] == (len(SEED_NOUNS), len(SEED_NOUNS))
