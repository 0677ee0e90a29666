"""Multiple-choice practice questions built from the inflection engine.

Each question has one correct option and up to three distractors. Conjugation
and declension distractors attach plausible but wrong endings to the word's
stem, so they look like real Finnish forms. All randomness comes from the
``random.Random`` passed in; the same seed gives the same question.
"""

import random
from collections.abc import Sequence
from dataclasses import dataclass

from finnish_anki.conjugation import PERSONS, conjugate_all
from finnish_anki.declension import decline
from finnish_anki.enums import DeclensionType, NounCase, Tense, VerbType
from finnish_anki.harmony import harmony_vowel
from finnish_anki.lexicon import LexiconEntry
from finnish_anki.normalize import answers_match
from finnish_anki.stems import stem

OPTION_COUNT = 4

# Present tense personal endings, reused as distractors
WRONG_VERB_ENDINGS = ("n", "t", "vat", "mme", "tte", "")

# Local and grammatical case endings used as distractors ("a" harmonizes)
WRONG_NOUN_ENDINGS = ("ssa", "sta", "an", "lla", "lta", "lle", "n", "a")

QUIZ_CASES = (
    NounCase.GENITIVE,
    NounCase.PARTITIVE,
    NounCase.INESSIVE,
    NounCase.ELATIVE,
    NounCase.ILLATIVE,
)


@dataclass(frozen=True)
class Question:
    """A multiple-choice question; ``options[correct_index]`` is the answer."""

    prompt: str
    options: tuple[str, ...]
    correct_index: int
    word: str

    @property
    def answer(self) -> str:
        return self.options[self.correct_index]


def _build(
    prompt: str, correct: str, candidates: Sequence[str], word: str, rng: random.Random
) -> Question:
    """Fill up to OPTION_COUNT distinct options, shuffle, and locate the answer."""
    options = [correct]
    for candidate in candidates:
        if len(options) >= OPTION_COUNT:
            break
        if candidate and candidate not in options:
            options.append(candidate)

    rng.shuffle(options)
    return Question(
        prompt=prompt,
        options=tuple(options),
        correct_index=options.index(correct),
        word=word,
    )


def make_conjugation_question(entry: LexiconEntry, rng: random.Random) -> Question:
    """Ask for the present tense form of a verb for a random person."""
    verb_type = VerbType(entry.word_class)
    person_index = rng.randrange(len(PERSONS))
    correct = conjugate_all(entry.written, verb_type, Tense.PRESENT)[person_index]

    verb_stem = stem(entry.written, verb_type)
    a = harmony_vowel(entry.written)
    candidates = [verb_stem + ending.replace("a", a) for ending in WRONG_VERB_ENDINGS]

    prompt = (
        f'Conjugate "{entry.written}" ({entry.translation}) '
        f'for "{PERSONS[person_index]}" in present tense:'
    )
    return _build(prompt, correct, candidates, entry.written, rng)


def make_declension_question(entry: LexiconEntry, rng: random.Random) -> Question:
    """Ask for a noun in a random case among the commonly drilled ones."""
    declension_type = DeclensionType(entry.word_class)
    case = rng.choice(QUIZ_CASES)
    correct = decline(entry.written, declension_type, case)

    noun_stem = stem(entry.written, declension_type)
    a = harmony_vowel(entry.written)
    candidates = [noun_stem + ending.replace("a", a) for ending in WRONG_NOUN_ENDINGS]

    prompt = f'Put "{entry.written}" ({entry.translation}) in the {case} case:'
    return _build(prompt, correct, candidates, entry.written, rng)


def make_vocabulary_question(
    entry: LexiconEntry, pool: Sequence[LexiconEntry], rng: random.Random
) -> Question:
    """Ask for the English translation of a word, with distractors from ``pool``."""
    others = [e.translation for e in pool if e.written != entry.written]
    rng.shuffle(others)
    prompt = f'What is the English translation of "{entry.written}"?'
    return _build(prompt, entry.translation, others, entry.written, rng)


def check_answer(question: Question, answer: str | int) -> bool:
    """Check a typed answer, or an option index, against the question."""
    if isinstance(answer, int):
        return answer == question.correct_index
    return answers_match(answer, question.answer)
