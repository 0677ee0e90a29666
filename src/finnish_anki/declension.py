"""Finnish noun declension.

Builds case forms of a noun from its nominative and declension type (I-VI).
Case endings attach either to the nominative itself (partitive and illative
of unmutated words) or to the class stem from :mod:`finnish_anki.stems`
(nais-, käde-). Consonant gradation applies only in the type II genitive
(katu -> kadun).

Harmonizing endings use the harmony vowel of the nominative, resolved once per
call.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from finnish_anki.enums import DECLENSION_TABLE_CASES, DeclensionType, NounCase
from finnish_anki.gradation import gradate
from finnish_anki.harmony import harmony_vowel, is_vowel
from finnish_anki.stems import noun_stem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Noun:
    """Per-call view of a noun: stem and harmony resolved once."""

    nominative: str
    declension_type: DeclensionType
    stem: str
    a: str  # a/ä

    @property
    def mutated(self) -> bool:
        return self.stem != self.nominative


def _prepare(nominative: str, declension_type: DeclensionType) -> _Noun:
    return _Noun(
        nominative=nominative,
        declension_type=declension_type,
        stem=noun_stem(nominative, declension_type),
        a=harmony_vowel(nominative),
    )


# =============================================================================
# Case builders
# =============================================================================


def _genitive(noun: _Noun) -> str:
    """Genitive: talo-n, kadu-n, nais-en, käde-n."""
    if noun.declension_type == DeclensionType.II:
        return gradate(noun.stem, to_weak=True) + "n"
    if noun.declension_type == DeclensionType.IV:
        return noun.stem + "en"
    return noun.stem + "n"


def _partitive(noun: _Noun) -> str:
    """Partitive: talo-a, maa-a, nais-ta, kät-tä, sydän-tä."""
    nominative = noun.nominative

    if noun.declension_type == DeclensionType.V and noun.mutated:
        base = nominative[:-2]
        if is_vowel(base[-1:]):
            # käsi -> kät-tä: the stem consonant geminates before the ending
            return base + "tt" + noun.a
        # No room for gemination after a consonant: lehti -> lehte-ä
        return base + "te" + noun.a
    if noun.mutated:
        return noun.stem + "t" + noun.a
    if is_vowel(nominative[-1:]):
        return nominative + noun.a
    return nominative + "t" + noun.a


def _illative(noun: _Noun) -> str:
    """Illative: talo-on, katu-un, nais-een, käte-en, yö-hän."""
    nominative = noun.nominative
    declension_type = noun.declension_type

    if declension_type in (DeclensionType.I, DeclensionType.II):
        if is_vowel(nominative[-1:]):
            return nominative + nominative[-1] + "n"
        return nominative + ("iin" if declension_type == DeclensionType.I else "un")

    if declension_type == DeclensionType.III:
        return nominative + "een"
    if declension_type == DeclensionType.IV:
        return noun.stem + "een"
    if declension_type == DeclensionType.V:
        if noun.mutated:
            # Strong grade of the -de stem: käde -> käte
            return nominative[:-2] + "te" + "en"
        return noun.stem + "en"
    return noun.stem + "h" + noun.a + "n"


def _local_case(ending: str) -> Callable[[_Noun], str]:
    """Build a case that attaches a harmonizing two-consonant ending (ss/st/ll/lt)."""

    def build(noun: _Noun) -> str:
        return noun.stem + ending + noun.a

    return build


def _allative(noun: _Noun) -> str:
    return noun.stem + "lle"


_CASE_BUILDERS: dict[NounCase, Callable[[_Noun], str]] = {
    NounCase.GENITIVE: _genitive,
    NounCase.ACCUSATIVE: _genitive,
    NounCase.PARTITIVE: _partitive,
    NounCase.INESSIVE: _local_case("ss"),
    NounCase.ELATIVE: _local_case("st"),
    NounCase.ILLATIVE: _illative,
    NounCase.ADESSIVE: _local_case("ll"),
    NounCase.ABLATIVE: _local_case("lt"),
    NounCase.ALLATIVE: _allative,
}


# =============================================================================
# Public API
# =============================================================================


def decline(nominative: str, declension_type: DeclensionType, case: NounCase) -> str:
    """Return a noun in the requested case.

    Args:
        nominative: Dictionary form (e.g., "talo")
        declension_type: Declension type I-VI
        case: Grammatical case. The nominative, and any unrecognized case,
            returns the input unchanged.

    Examples:
        >>> decline("talo", DeclensionType.I, NounCase.INESSIVE)
        'talossa'
        >>> decline("käsi", DeclensionType.V, NounCase.ILLATIVE)
        'käteen'
    """
    if case == NounCase.NOMINATIVE:
        return nominative

    builder = _CASE_BUILDERS.get(case)
    if builder is None:
        logger.debug("Unrecognized case %r for '%s', returning nominative", case, nominative)
        return nominative
    return builder(_prepare(nominative, declension_type))


def decline_all(nominative: str, declension_type: DeclensionType) -> dict[str, str]:
    """Return the full declension table of a noun.

    Keys are case names in the order nominative, genitive, partitive,
    inessive, elative, illative, adessive, ablative, allative. The
    accusative is left out since it repeats the genitive.
    """
    return {
        case.value: decline(nominative, declension_type, case) for case in DECLENSION_TABLE_CASES
    }
