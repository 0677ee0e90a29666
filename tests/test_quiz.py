"""Tests for multiple-choice question generation."""

import random

from finnish_anki.conjugation import conjugate_all
from finnish_anki.declension import decline
from finnish_anki.enums import DeclensionType, Tense, VerbType
from finnish_anki.lexicon import SEED_NOUNS, SEED_VERBS, LexiconEntry
from finnish_anki.quiz import (
    OPTION_COUNT,
    QUIZ_CASES,
    Question,
    check_answer,
    make_conjugation_question,
    make_declension_question,
    make_vocabulary_question,
)


def _entry(written: str, entries: tuple[LexiconEntry, ...]) -> LexiconEntry:
    return next(e for e in entries if e.written == written)


class TestConjugationQuestion:
    """Tests for make_conjugation_question()."""

    def test_correct_option_is_present_form(self) -> None:
        entry = _entry("puhua", SEED_VERBS)
        question = make_conjugation_question(entry, random.Random(1))

        assert question.word == "puhua"
        assert question.answer in conjugate_all("puhua", VerbType.I, Tense.PRESENT)
        assert "puhua" in question.prompt
        assert "present tense" in question.prompt

    def test_four_distinct_options(self) -> None:
        for entry in SEED_VERBS:
            question = make_conjugation_question(entry, random.Random(7))
            assert len(question.options) == OPTION_COUNT
            assert len(set(question.options)) == OPTION_COUNT

    def test_same_seed_same_question(self) -> None:
        entry = _entry("tulla", SEED_VERBS)
        first = make_conjugation_question(entry, random.Random(42))
        second = make_conjugation_question(entry, random.Random(42))
        assert first == second


class TestDeclensionQuestion:
    """Tests for make_declension_question()."""

    def test_correct_option_is_quizzed_case(self) -> None:
        entry = _entry("talo", SEED_NOUNS)
        question = make_declension_question(entry, random.Random(3))

        expected = {decline("talo", DeclensionType.I, case) for case in QUIZ_CASES}
        assert question.answer in expected
        assert any(str(case) in question.prompt for case in QUIZ_CASES)

    def test_options_distinct(self) -> None:
        for entry in SEED_NOUNS:
            question = make_declension_question(entry, random.Random(5))
            assert len(question.options) == OPTION_COUNT
            assert len(set(question.options)) == OPTION_COUNT

    def test_distractors_follow_harmony(self) -> None:
        entry = _entry("päivä", SEED_NOUNS)
        question = make_declension_question(entry, random.Random(0))
        assert not any(option.endswith("ssa") for option in question.options)


class TestVocabularyQuestion:
    def test_translation_with_distractors(self) -> None:
        entry = _entry("talo", SEED_NOUNS)
        pool = list(SEED_VERBS + SEED_NOUNS)
        question = make_vocabulary_question(entry, pool, random.Random(0))

        assert question.answer == "house"
        assert len(question.options) == OPTION_COUNT
        assert len(set(question.options)) == OPTION_COUNT

    def test_small_pool(self) -> None:
        entry = _entry("talo", SEED_NOUNS)
        question = make_vocabulary_question(entry, [entry], random.Random(0))
        assert question.options == ("house",)
        assert question.correct_index == 0


class TestCheckAnswer:
    """Tests for check_answer()."""

    def _question(self) -> Question:
        return Question(
            prompt="Imperative of puhua for te:",
            options=("puhu!", "puhukaa!", "puhukoon!"),
            correct_index=1,
            word="puhua",
        )

    def test_by_index(self) -> None:
        question = self._question()
        assert check_answer(question, 1)
        assert not check_answer(question, 0)

    def test_by_text(self) -> None:
        question = self._question()
        assert check_answer(question, "Puhukaa")
        assert not check_answer(question, "puhu")
