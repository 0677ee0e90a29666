"""Enumeration types for Finnish linguistic data.

These StrEnum classes provide type safety while keeping plain string storage
in SQLite. Since StrEnum values serialize as strings, the database stores the
enum value directly (e.g. verb type "IV", tense "negative_present").
"""

from enum import StrEnum

_ROMAN_NUMERALS = ("I", "II", "III", "IV", "V", "VI")


def _parse_class_tag(value: str | int) -> str | None:
    """Map a roman ("IV") or numeric ("4", 4) class tag to its roman form."""
    text = str(value).strip().upper()
    if text in _ROMAN_NUMERALS:
        return text
    if text.isdigit() and 1 <= int(text) <= len(_ROMAN_NUMERALS):
        return _ROMAN_NUMERALS[int(text) - 1]
    return None


class POS(StrEnum):
    """Part of speech classification for lemmas."""

    VERB = "verb"
    NOUN = "noun"

    @property
    def plural(self) -> str:
        """Return the plural form for display (e.g., 'verbs')."""
        return {
            POS.VERB: "verbs",
            POS.NOUN: "nouns",
        }[self]


class VerbType(StrEnum):
    """Finnish verb conjugation types.

    - I: -a/-ä verbs (puhua, nukkua)
    - II: -da/-dä verbs (syödä, juoda)
    - III: -la/-lä, -na/-nä, -ra/-rä, -sta/-stä verbs (tulla, mennä, nousta)
    - IV: -ata/-ätä, -ota/-ötä, -uta/-ytä verbs (haluta, tavata)
    - V: -ita/-itä verbs (tarvita, valita)
    - VI: -eta/-etä verbs (vanheta, kylmetä)
    """

    I = "I"  # noqa: E741
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"
    VI = "VI"

    @classmethod
    def parse(cls, value: str | int) -> "VerbType | None":
        """Parse a roman or numeric type tag, returning None if unrecognized."""
        tag = _parse_class_tag(value)
        return cls(tag) if tag else None


class DeclensionType(StrEnum):
    """Finnish noun declension patterns.

    - I: vowel stems (talo, auto)
    - II: stems with consonant gradation (katu, lintu)
    - III: consonant-final and cluster stems (sydän)
    - IV: -nen words (nainen, suomalainen)
    - V: -si/-ti words (käsi, vesi, lehti)
    - VI: special monosyllables and others (mies, yö)
    """

    I = "I"  # noqa: E741
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"
    VI = "VI"

    @classmethod
    def parse(cls, value: str | int) -> "DeclensionType | None":
        """Parse a roman or numeric type tag, returning None if unrecognized."""
        tag = _parse_class_tag(value)
        return cls(tag) if tag else None


class Tense(StrEnum):
    """Verb tense/mood/polarity categories."""

    PRESENT = "present"
    IMPERFECT = "imperfect"
    PERFECT = "perfect"
    IMPERATIVE = "imperative"
    CONDITIONAL = "conditional"
    NEGATIVE_PRESENT = "negative_present"
    NEGATIVE_IMPERFECT = "negative_imperfect"
    NEGATIVE_PERFECT = "negative_perfect"
    NEGATIVE_IMPERATIVE = "negative_imperative"
    NEGATIVE_CONDITIONAL = "negative_conditional"

    @property
    def label(self) -> str:
        """Return the display name (e.g., 'negative present')."""
        return self.value.replace("_", " ")

    @property
    def is_negative(self) -> bool:
        return self.value.startswith("negative_")

    @property
    def is_imperative(self) -> bool:
        """True for the imperative and negative imperative (5 forms, no 1sg)."""
        return self in (Tense.IMPERATIVE, Tense.NEGATIVE_IMPERATIVE)


class NounCase(StrEnum):
    """Finnish grammatical cases.

    Accusative is an alias of the genitive for the nouns covered here.
    """

    NOMINATIVE = "nominative"  # perusmuoto - talo
    GENITIVE = "genitive"  # omanto - talon
    PARTITIVE = "partitive"  # osanto - taloa
    ACCUSATIVE = "accusative"  # kohdanto - talon
    INESSIVE = "inessive"  # sisäolento - talossa (in)
    ELATIVE = "elative"  # sisäeronto - talosta (from inside)
    ILLATIVE = "illative"  # sisätulento - taloon (into)
    ADESSIVE = "adessive"  # ulko-olento - talolla (at/on)
    ABLATIVE = "ablative"  # ulkoeronto - talolta (from)
    ALLATIVE = "allative"  # ulkotulento - talolle (to)


# Case order for full declension tables (accusative omitted as a genitive alias)
DECLENSION_TABLE_CASES: tuple[NounCase, ...] = (
    NounCase.NOMINATIVE,
    NounCase.GENITIVE,
    NounCase.PARTITIVE,
    NounCase.INESSIVE,
    NounCase.ELATIVE,
    NounCase.ILLATIVE,
    NounCase.ADESSIVE,
    NounCase.ABLATIVE,
    NounCase.ALLATIVE,
)


class CEFRLevel(StrEnum):
    """Common European Framework of Reference level for a lemma."""

    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"
