"""Finnish verb conjugation.

Builds the person forms of a verb from its infinitive and verb type (I-VI)
for ten tense/mood/polarity categories:

- present, imperfect, conditional: stem + marker + personal ending
- perfect: inflected "olla" + past active participle
- imperative: five forms (sinä, te, me, hän, he) from a command stem
- negatives: inflected negation verb + an uninflected connegative form

Every call is a pure function of its arguments. Unrecognized tenses fall back
to the present tense and out-of-range person lookups return the infinitive;
nothing here raises.

Example:
    >>> conjugate_all("puhua", VerbType.I, Tense.PRESENT)
    ['puhun', 'puhut', 'puhuu', 'puhumme', 'puhutte', 'puhuvat']
    >>> conjugate("tulla", VerbType.III, Tense.NEGATIVE_PRESENT, 3, plural=True)
    'eivät tule'
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from finnish_anki.enums import Tense, VerbType
from finnish_anki.gradation import gradate
from finnish_anki.harmony import (
    harmony_close_vowel,
    harmony_rounded_vowel,
    harmony_vowel,
    is_vowel,
)
from finnish_anki.stems import verb_stem

logger = logging.getLogger(__name__)

# Personal pronouns in paradigm order
PERSONS = ("minä", "sinä", "hän", "me", "te", "he")
IMPERATIVE_PERSONS = ("sinä", "te", "me", "hän", "he")

# (person, number) for each paradigm position
PERSON_SLOTS: tuple[tuple[int, str], ...] = (
    (1, "singular"),
    (2, "singular"),
    (3, "singular"),
    (1, "plural"),
    (2, "plural"),
    (3, "plural"),
)
IMPERATIVE_SLOTS: tuple[tuple[int, str], ...] = (
    (2, "singular"),
    (2, "plural"),
    (1, "plural"),
    (3, "singular"),
    (3, "plural"),
)

# Present tense of "olla" (perfect auxiliary), in person order
PERFECT_AUXILIARY = ("olen", "olet", "on", "olemme", "olette", "ovat")
# Connegative of "olla" used in the negative perfect
PERFECT_CONNEGATIVE = "ole"

# Negation verb, in person order and in imperative order
NEGATION_VERB = ("en", "et", "ei", "emme", "ette", "eivät")
NEGATIVE_IMPERATIVE_VERB = ("älä", "älkää", "älkäämme", "älköön", "älkööt")


@dataclass(frozen=True)
class _Verb:
    """Per-call view of a verb: stem and harmony resolved once."""

    infinitive: str
    verb_type: VerbType
    stem: str
    a: str  # a/ä
    o: str  # o/ö
    u: str  # u/y


def _prepare(infinitive: str, verb_type: VerbType) -> _Verb:
    return _Verb(
        infinitive=infinitive,
        verb_type=verb_type,
        stem=verb_stem(infinitive, verb_type),
        a=harmony_vowel(infinitive),
        o=harmony_rounded_vowel(infinitive),
        u=harmony_close_vowel(infinitive),
    )


def _lengthen(stem: str) -> str:
    """Double the final letter (puhu -> puhuu) unless it is already long."""
    if len(stem) >= 2 and stem[-1] == stem[-2] and is_vowel(stem[-1]):
        return stem
    return stem + stem[-1:]


def _attach_i(stem: str, marker: str) -> str:
    """Attach an i-initial marker, absorbing a stem-final i or e (voi + isi -> voisi)."""
    if stem[-1:] in ("i", "e"):
        return stem[:-1] + marker
    return stem + marker


def _inflect(
    stem: str, third_singular: str, verb: _Verb, third_stem: str | None = None
) -> list[str]:
    """Attach the personal endings shared by present, imperfect and conditional."""
    if third_stem is None:
        third_stem = stem
    return [
        stem + "n",  # minä
        stem + "t",  # sinä
        third_singular,  # hän
        stem + "mme",  # me
        stem + "tte",  # te
        third_stem + "v" + verb.a + "t",  # he
    ]


# =============================================================================
# Class-specific stems
# =============================================================================


def _present_stems(verb: _Verb) -> tuple[str, str]:
    """Return (1st/2nd person stem, 3rd person stem) for the present tense.

    Type I alternates weak grade (minä puhun, nukun) with strong grade in the
    3rd person (hän nukkuu). Types IV-VI insert a class-specific increment:
    a doubled harmony vowel, -tse- or -ne- (haluaan, tarvitsen, vanhenen).
    """
    stem = verb.stem
    if verb.verb_type == VerbType.I:
        return gradate(stem, to_weak=True), stem
    if verb.verb_type == VerbType.III:
        return stem + "e", stem + "e"
    if verb.verb_type == VerbType.IV:
        doubled = stem + verb.a + verb.a
        return doubled, doubled
    if verb.verb_type == VerbType.V:
        return stem + "tse", stem + "tse"
    if verb.verb_type == VerbType.VI:
        return stem + "ne", stem + "ne"
    return stem, stem


def _connegative(verb: _Verb) -> str:
    """Present connegative: the sinä stem without its ending (en puhu, et tule)."""
    return _present_stems(verb)[0]


def _past_stem(verb: _Verb) -> str:
    """Simple past stem: the stem plus the class's past marker."""
    stem = verb.stem
    if verb.verb_type == VerbType.I:
        return _attach_i(gradate(stem, to_weak=True), "i")
    if verb.verb_type == VerbType.IV:
        return stem + "si"
    if verb.verb_type == VerbType.V:
        return stem + "tsi"
    if verb.verb_type == VerbType.VI:
        return stem + "ni"
    return _attach_i(stem, "i")


def _conditional_stem(verb: _Verb) -> str:
    stem = verb.stem
    if verb.verb_type == VerbType.IV:
        return stem + verb.a + "isi"
    if verb.verb_type == VerbType.V:
        return stem + "tsisi"
    if verb.verb_type == VerbType.VI:
        return stem + "nisi"
    return _attach_i(stem, "isi")


def _command_stem(verb: _Verb) -> str:
    """Stem for the -kaa/-koon imperatives (puhu-kaa, tul-kaa, halut-kaa)."""
    if verb.verb_type in (VerbType.IV, VerbType.V, VerbType.VI):
        return verb.stem + "t"
    return verb.stem


def _participle(verb: _Verb, plural: bool) -> str:
    """Past active participle (puhunut/puhuneet, tullut/tulleet, halunnut)."""
    stem = verb.stem
    if verb.verb_type == VerbType.III:
        # Final consonant doubles: tul-l-ut, men-n-yt, nous-s-ut
        doubled = stem + stem[-1:]
        return doubled + ("eet" if plural else verb.u + "t")
    if verb.verb_type in (VerbType.IV, VerbType.V, VerbType.VI):
        stem += "n"
    return stem + ("neet" if plural else "n" + verb.u + "t")


# =============================================================================
# Tense builders
# =============================================================================


def _present(verb: _Verb) -> list[str]:
    weak, strong = _present_stems(verb)
    if verb.verb_type == VerbType.II:
        # Stem already ends in a long vowel or diphthong: hän syö
        third_singular = strong
    else:
        third_singular = _lengthen(strong)
    return _inflect(weak, third_singular, verb, third_stem=strong)


def _imperfect(verb: _Verb) -> list[str]:
    past = _past_stem(verb)
    return _inflect(past, past, verb)


def _perfect(verb: _Verb) -> list[str]:
    return [
        f"{auxiliary} {_participle(verb, plural=index >= 3)}"
        for index, auxiliary in enumerate(PERFECT_AUXILIARY)
    ]


def _imperative(verb: _Verb) -> list[str]:
    command = _command_stem(verb)
    a, o = verb.a, verb.o
    return [
        _connegative(verb) + "!",  # sinä
        command + "k" + a + a + "!",  # te
        command + "k" + a + a + "mme!",  # me
        command + "k" + o + o + "n!",  # hän
        command + "k" + o + o + "t!",  # he
    ]


def _conditional(verb: _Verb) -> list[str]:
    conditional = _conditional_stem(verb)
    return _inflect(conditional, conditional, verb)


def _negative_present(verb: _Verb) -> list[str]:
    connegative = _connegative(verb)
    return [f"{negation} {connegative}" for negation in NEGATION_VERB]


def _negative_imperfect(verb: _Verb) -> list[str]:
    return [
        f"{negation} {_participle(verb, plural=index >= 3)}"
        for index, negation in enumerate(NEGATION_VERB)
    ]


def _negative_perfect(verb: _Verb) -> list[str]:
    return [
        f"{negation} {PERFECT_CONNEGATIVE} {_participle(verb, plural=index >= 3)}"
        for index, negation in enumerate(NEGATION_VERB)
    ]


def _negative_imperative(verb: _Verb) -> list[str]:
    command_connegative = _command_stem(verb) + "k" + verb.o
    connegatives = [_connegative(verb)] + [command_connegative] * 4
    return [
        f"{negation} {connegative}"
        for negation, connegative in zip(NEGATIVE_IMPERATIVE_VERB, connegatives, strict=True)
    ]


def _negative_conditional(verb: _Verb) -> list[str]:
    conditional = _conditional_stem(verb)
    return [f"{negation} {conditional}" for negation in NEGATION_VERB]


_TENSE_BUILDERS: dict[Tense, Callable[[_Verb], list[str]]] = {
    Tense.PRESENT: _present,
    Tense.IMPERFECT: _imperfect,
    Tense.PERFECT: _perfect,
    Tense.IMPERATIVE: _imperative,
    Tense.CONDITIONAL: _conditional,
    Tense.NEGATIVE_PRESENT: _negative_present,
    Tense.NEGATIVE_IMPERFECT: _negative_imperfect,
    Tense.NEGATIVE_PERFECT: _negative_perfect,
    Tense.NEGATIVE_IMPERATIVE: _negative_imperative,
    Tense.NEGATIVE_CONDITIONAL: _negative_conditional,
}


# =============================================================================
# Public API
# =============================================================================


def conjugate_all(infinitive: str, verb_type: VerbType, tense: Tense) -> list[str]:
    """Return every person form of a verb in one tense.

    Args:
        infinitive: Dictionary form (e.g., "puhua")
        verb_type: Conjugation type I-VI
        tense: Tense/mood/polarity category. Unrecognized values are
            conjugated in the present tense.

    Returns:
        Six forms in the order minä, sinä, hän, me, te, he; or, for the
        imperative and negative imperative, five forms in the order
        sinä, te, me, hän, he.
    """
    builder = _TENSE_BUILDERS.get(tense)
    if builder is None:
        logger.debug("Unrecognized tense %r for '%s', using present", tense, infinitive)
        builder = _present
    return builder(_prepare(infinitive, verb_type))


def conjugate(
    infinitive: str,
    verb_type: VerbType,
    tense: Tense,
    person: int,
    plural: bool = False,
) -> str:
    """Return a single person form of a verb.

    The form is looked up at position ``(person - 1) + (3 if plural else 0)``
    of :func:`conjugate_all`. Positions outside the paradigm (only possible
    for the five-form imperatives, or an invalid person) yield the
    infinitive unchanged.
    """
    forms = conjugate_all(infinitive, verb_type, tense)
    index = (person - 1) + (3 if plural else 0)
    if 0 <= index < len(forms):
        return forms[index]
    return infinitive


def past_participle(infinitive: str, verb_type: VerbType, plural: bool = False) -> str:
    """Return the past active participle (puhunut, or puhuneet if plural)."""
    return _participle(_prepare(infinitive, verb_type), plural)


def paradigm_slots(tense: Tense) -> tuple[tuple[int, str], ...]:
    """Return the (person, number) label of each position in a tense's paradigm."""
    if tense in (Tense.IMPERATIVE, Tense.NEGATIVE_IMPERATIVE):
        return IMPERATIVE_SLOTS
    return PERSON_SLOTS
