"""Starter lexicon of Finnish verbs and nouns.

The seed covers every conjugation and declension type with common words so a
fresh database can be inflected, quizzed and verified without any download.
Larger word lists are loaded with the CSV importer.
"""

from dataclasses import dataclass

from finnish_anki.enums import POS, CEFRLevel, DeclensionType, VerbType


@dataclass(frozen=True)
class LexiconEntry:
    """A dictionary form with its inflection class and gloss."""

    written: str
    pos: POS
    word_class: VerbType | DeclensionType
    translation: str
    frequency: int  # rank, 1 = most frequent
    cefr_level: CEFRLevel = CEFRLevel.A1


def _verb(
    written: str, verb_type: VerbType, translation: str, frequency: int, level: CEFRLevel
) -> LexiconEntry:
    return LexiconEntry(written, POS.VERB, verb_type, translation, frequency, level)


def _noun(
    written: str,
    declension_type: DeclensionType,
    translation: str,
    frequency: int,
    level: CEFRLevel,
) -> LexiconEntry:
    return LexiconEntry(written, POS.NOUN, declension_type, translation, frequency, level)


SEED_VERBS: tuple[LexiconEntry, ...] = (
    _verb("sanoa", VerbType.I, "to say", 3, CEFRLevel.A1),
    _verb("puhua", VerbType.I, "to speak", 32, CEFRLevel.A1),
    _verb("nukkua", VerbType.I, "to sleep", 100, CEFRLevel.A2),
    _verb("katsoa", VerbType.I, "to watch/look", 102, CEFRLevel.A2),
    _verb("lukea", VerbType.I, "to read", 104, CEFRLevel.A2),
    _verb("ostaa", VerbType.I, "to buy", 106, CEFRLevel.A2),
    _verb("syödä", VerbType.II, "to eat", 98, CEFRLevel.A1),
    _verb("juoda", VerbType.II, "to drink", 99, CEFRLevel.A1),
    _verb("voida", VerbType.II, "to be able/can", 10, CEFRLevel.A1),
    _verb("tulla", VerbType.III, "to come", 5, CEFRLevel.A1),
    _verb("mennä", VerbType.III, "to go", 4, CEFRLevel.A1),
    _verb("opiskella", VerbType.III, "to study", 31, CEFRLevel.A2),
    _verb("nousta", VerbType.III, "to rise/get up", 120, CEFRLevel.A2),
    _verb("haluta", VerbType.IV, "to want", 11, CEFRLevel.A1),
    _verb("tavata", VerbType.IV, "to meet", 12, CEFRLevel.A2),
    _verb("tarvita", VerbType.V, "to need", 13, CEFRLevel.A2),
    _verb("valita", VerbType.V, "to choose", 130, CEFRLevel.B1),
    _verb("vanheta", VerbType.VI, "to age", 14, CEFRLevel.B1),
    _verb("kylmetä", VerbType.VI, "to get cold", 140, CEFRLevel.B1),
)

SEED_NOUNS: tuple[LexiconEntry, ...] = (
    _noun("talo", DeclensionType.I, "house", 1, CEFRLevel.A1),
    _noun("auto", DeclensionType.I, "car", 3, CEFRLevel.A1),
    _noun("koulu", DeclensionType.I, "school", 19, CEFRLevel.A1),
    _noun("kirja", DeclensionType.I, "book", 12, CEFRLevel.A1),
    _noun("päivä", DeclensionType.I, "day", 16, CEFRLevel.A1),
    _noun("maa", DeclensionType.I, "country/land", 20, CEFRLevel.A1),
    _noun("katu", DeclensionType.II, "street", 2, CEFRLevel.A1),
    _noun("lintu", DeclensionType.II, "bird", 5, CEFRLevel.A1),
    _noun("sydän", DeclensionType.III, "heart", 7, CEFRLevel.A2),
    _noun("nainen", DeclensionType.IV, "woman", 8, CEFRLevel.A1),
    _noun("suomalainen", DeclensionType.IV, "Finn", 21, CEFRLevel.A2),
    _noun("käsi", DeclensionType.V, "hand", 6, CEFRLevel.A1),
    _noun("vesi", DeclensionType.V, "water", 11, CEFRLevel.A1),
    _noun("lehti", DeclensionType.V, "leaf/newspaper", 22, CEFRLevel.A2),
    _noun("mies", DeclensionType.VI, "man", 9, CEFRLevel.A1),
    _noun("yö", DeclensionType.VI, "night", 15, CEFRLevel.A1),
    _noun("työ", DeclensionType.VI, "work", 18, CEFRLevel.A2),
)
