"""Finnish consonant gradation.

Stops k, p and t alternate between a strong and a weak grade at the last
syllable boundary of a stem:

- geminates shorten: kk -> k, pp -> p, tt -> t (nukku -> nuku)
- a single stop between vowels weakens: k -> (nothing), p -> v, t -> d
  (luke -> lue, tapa -> tava, katu -> kadu)

The rule is applied by scanning the stem from its second-to-last letter
backward and mutating only the first qualifying site. At each position a
geminate is checked before a single stop. Clusters such as nt or lk are left
alone, so lintu keeps its strong grade.
"""

from finnish_anki.harmony import is_vowel

GRADATING_CONSONANTS = frozenset("kpt")

# Weak grade of a single intervocalic stop; k has no weak counterpart
WEAK_SINGLE_GRADE = {"k": "", "p": "v", "t": "d"}


def gradate(stem: str, to_weak: bool = True) -> str:
    """Apply consonant gradation to a stem.

    Args:
        stem: Stem in the strong grade (e.g., "nukku", "katu")
        to_weak: Convert to the weak grade. The strong direction returns the
            stem unchanged, since canonical forms are already strong.

    Returns:
        The stem with at most one alternation applied. Stems with no
        qualifying site (or shorter than two letters) come back unchanged.

    Examples:
        >>> gradate("nukku")
        'nuku'
        >>> gradate("katu")
        'kadu'
        >>> gradate("puhu")
        'puhu'
    """
    if not to_weak or len(stem) < 2:
        return stem

    for i in range(len(stem) - 2, -1, -1):
        char = stem[i]
        if char.lower() not in GRADATING_CONSONANTS:
            continue

        # Geminate: drop one of the pair
        if i > 0 and stem[i - 1] == char:
            return stem[:i] + stem[i + 1 :]

        # Single stop between vowels
        if i > 0 and is_vowel(stem[i - 1]) and is_vowel(stem[i + 1]):
            return stem[:i] + WEAK_SINGLE_GRADE[char.lower()] + stem[i + 1 :]

    return stem
