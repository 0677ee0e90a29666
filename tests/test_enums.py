"""Tests for enumeration types."""

from finnish_anki.enums import (
    DECLENSION_TABLE_CASES,
    POS,
    DeclensionType,
    NounCase,
    Tense,
    VerbType,
)


class TestClassTags:
    """Tests for VerbType.parse() and DeclensionType.parse()."""

    def test_roman_tags(self) -> None:
        assert VerbType.parse("IV") == VerbType.IV
        assert DeclensionType.parse(" v ") == DeclensionType.V

    def test_numeric_tags(self) -> None:
        assert VerbType.parse("1") == VerbType.I
        assert DeclensionType.parse(6) == DeclensionType.VI

    def test_invalid_tags(self) -> None:
        assert VerbType.parse("VII") is None
        assert VerbType.parse("0") is None
        assert DeclensionType.parse("") is None
        assert DeclensionType.parse("nen") is None


class TestTense:
    def test_label(self) -> None:
        assert Tense.NEGATIVE_PRESENT.label == "negative present"
        assert Tense.PERFECT.label == "perfect"

    def test_flags(self) -> None:
        assert Tense.NEGATIVE_PERFECT.is_negative
        assert not Tense.PERFECT.is_negative
        assert Tense.IMPERATIVE.is_imperative
        assert Tense.NEGATIVE_IMPERATIVE.is_imperative
        assert not Tense.CONDITIONAL.is_imperative

    def test_string_storage(self) -> None:
        assert Tense("negative_conditional") == Tense.NEGATIVE_CONDITIONAL
        assert f"{Tense.PRESENT}" == "present"


class TestNounCase:
    def test_table_order_omits_accusative(self) -> None:
        assert len(DECLENSION_TABLE_CASES) == 9
        assert DECLENSION_TABLE_CASES[0] == NounCase.NOMINATIVE
        assert DECLENSION_TABLE_CASES[-1] == NounCase.ALLATIVE
        assert NounCase.ACCUSATIVE not in DECLENSION_TABLE_CASES


class TestPOS:
    def test_plural(self) -> None:
        assert POS.VERB.plural == "verbs"
        assert POS.NOUN.plural == "nouns"
