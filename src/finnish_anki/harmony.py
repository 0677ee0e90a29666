"""Finnish vowel harmony.

Most Finnish suffixes exist in a back-vowel and a front-vowel variant
(talo-ssa vs. metsä-ssä). The variant is chosen by scanning the whole word:
any back vowel (a, o, u) selects the back variant. Words whose only vowels
are the neutral i and e take the front variant (tie -> tietä), so a word
without back vowels never fails to resolve.

All functions here are total: any string, including the empty string,
yields a vowel.
"""

from typing import Literal

BACK_VOWELS = frozenset("aou")
FRONT_VOWELS = frozenset("äöy")
NEUTRAL_VOWELS = frozenset("ie")
VOWELS = BACK_VOWELS | FRONT_VOWELS | NEUTRAL_VOWELS


def is_vowel(char: str) -> bool:
    """Return True if the character is a Finnish vowel (case-insensitive)."""
    return char.lower() in VOWELS


def has_back_vowel(word: str) -> bool:
    """Return True if any letter of the word is a back vowel."""
    return any(char.lower() in BACK_VOWELS for char in word)


def harmony_vowel(word: str) -> Literal["a", "ä"]:
    """Pick the harmonizing open vowel for suffixes attached to ``word``.

    Examples:
        >>> harmony_vowel("talo")
        'a'
        >>> harmony_vowel("pöytä")
        'ä'
        >>> harmony_vowel("tie")
        'ä'
    """
    return "a" if has_back_vowel(word) else "ä"


def harmony_rounded_vowel(word: str) -> Literal["o", "ö"]:
    """Rounded variant for endings such as -koon/-köön."""
    return "o" if has_back_vowel(word) else "ö"


def harmony_close_vowel(word: str) -> Literal["u", "y"]:
    """Close rounded variant for endings such as -nut/-nyt."""
    return "u" if has_back_vowel(word) else "y"
