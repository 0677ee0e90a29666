"""Stem extraction from Finnish dictionary forms.

Each verb and noun class removes a fixed-length ending from the canonical
form. Two noun classes replace the ending instead of just removing it:

- IV (-nen): nainen -> nais
- V (-si/-ti): käsi -> käde, lehti -> lehde

Forms too short for the class's ending are returned unmodified.
"""

from finnish_anki.enums import DeclensionType, VerbType

# Number of letters removed from the infinitive (puhu-a, syö-dä, tul-la, ...)
VERB_SUFFIX_LENGTHS: dict[VerbType, int] = {
    VerbType.I: 1,
    VerbType.II: 2,
    VerbType.III: 2,
    VerbType.IV: 2,
    VerbType.V: 2,
    VerbType.VI: 2,
}

# Noun classes with a stem-changing ending: (accepted endings, replacement)
NOUN_SUFFIX_REPLACEMENTS: dict[DeclensionType, tuple[tuple[str, ...], str]] = {
    DeclensionType.IV: (("nen",), "s"),
    DeclensionType.V: (("si", "ti"), "de"),
}


def verb_stem(infinitive: str, verb_type: VerbType) -> str:
    """Strip the infinitive ending of a verb.

    Examples:
        >>> verb_stem("puhua", VerbType.I)
        'puhu'
        >>> verb_stem("tarvita", VerbType.V)
        'tarvi'
    """
    suffix_length = VERB_SUFFIX_LENGTHS.get(verb_type, 0)
    if len(infinitive) <= suffix_length:
        return infinitive
    return infinitive[: len(infinitive) - suffix_length]


def noun_stem(nominative: str, declension_type: DeclensionType) -> str:
    """Derive the inflecting stem of a noun.

    Classes without a stem-changing ending use the nominative as is.

    Examples:
        >>> noun_stem("talo", DeclensionType.I)
        'talo'
        >>> noun_stem("nainen", DeclensionType.IV)
        'nais'
        >>> noun_stem("käsi", DeclensionType.V)
        'käde'
    """
    rule = NOUN_SUFFIX_REPLACEMENTS.get(declension_type)
    if rule is None:
        return nominative

    endings, replacement = rule
    for ending in endings:
        if nominative.endswith(ending) and len(nominative) > len(ending):
            return nominative[: len(nominative) - len(ending)] + replacement
    return nominative


def stem(canonical: str, word_class: VerbType | DeclensionType) -> str:
    """Extract the stem of a verb or noun according to its class."""
    if isinstance(word_class, VerbType):
        return verb_stem(canonical, word_class)
    return noun_stem(canonical, word_class)
