"""Rule-based Finnish verb conjugation and noun declension."""

from finnish_anki.conjugation import conjugate, conjugate_all
from finnish_anki.declension import decline, decline_all
from finnish_anki.gradation import gradate
from finnish_anki.harmony import harmony_vowel
from finnish_anki.stems import stem

__all__ = [
    "conjugate",
    "conjugate_all",
    "decline",
    "decline_all",
    "gradate",
    "harmony_vowel",
    "stem",
]
