"""Text normalization utilities for matching Finnish words and answers."""

import logging
import unicodedata

logger = logging.getLogger(__name__)


def normalize(text: str) -> str:
    """Normalize Finnish text for matching/lookup.

    Composes characters to NFC, strips surrounding whitespace and lowercases.
    Unlike accent folding, ä, ö and å are kept: they are separate letters in
    Finnish (sää "weather" and saa "gets" are different words).

    Examples:
        >>> normalize("Pöytä")
        'pöytä'
        >>> normalize(" TALO ")
        'talo'
        >>> normalize("pa\\u0308iva\\u0308")
        'päivä'
    """
    return unicodedata.normalize("NFC", text).strip().lower()


def fold_diacritics(text: str) -> str:
    """Strip diacritics (ä -> a, ö -> o) after normalizing.

    Used for lenient comparison of answers typed without a Finnish keyboard.

    Examples:
        >>> fold_diacritics("Pöytä")
        'poyta'
    """
    # NFD decomposition separates base characters from combining diacriticals
    decomposed = unicodedata.normalize("NFD", text)
    # Filter out combining diacritical marks (category "Mn")
    stripped = "".join(c for c in decomposed if unicodedata.category(c) != "Mn")
    return normalize(stripped)


def tokenize(text: str) -> list[str]:
    """Split Finnish text into word tokens.

    Handles common punctuation and returns normalized tokens. Apostrophes and
    hyphens inside words are kept (vaa'an, linja-auto).

    Examples:
        >>> tokenize("Älä puhu!")
        ['älä', 'puhu']
        >>> tokenize("Linja-auto tulee.")
        ['linja-auto', 'tulee']
    """
    result: list[str] = []
    current_word: list[str] = []

    for char in normalize(text):
        if char.isalpha() or char in "'-":
            current_word.append(char)
        else:
            if current_word:
                word = "".join(current_word).strip("'-")
                if word:
                    result.append(word)
                current_word = []

    # Don't forget the last word
    if current_word:
        word = "".join(current_word).strip("'-")
        if word:
            result.append(word)

    return result


def answers_match(given: str, expected: str, *, lenient: bool = False) -> bool:
    """Compare a typed answer with the expected form.

    Case, surrounding whitespace and punctuation (such as the imperative "!")
    are ignored. With ``lenient``, ä/ö typed as a/o are accepted too.

    Examples:
        >>> answers_match("  Puhukaa ", "puhukaa!")
        True
        >>> answers_match("en  puhu", "en puhu")
        True
        >>> answers_match("poydassa", "pöydässä", lenient=True)
        True
    """
    given_tokens = tokenize(given)
    expected_tokens = tokenize(expected)
    if lenient:
        given_tokens = [fold_diacritics(t) for t in given_tokens]
        expected_tokens = [fold_diacritics(t) for t in expected_tokens]
    matched = given_tokens == expected_tokens
    if not matched:
        logger.debug("Answer %r does not match %r", given, expected)
    return matched
