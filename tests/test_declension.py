"""Tests for noun declension."""

from finnish_anki.declension import decline, decline_all
from finnish_anki.enums import DECLENSION_TABLE_CASES, DeclensionType, NounCase


class TestVowelStems:
    """Tests for type I nouns."""

    def test_talo(self) -> None:
        assert decline_all("talo", DeclensionType.I) == {
            "nominative": "talo",
            "genitive": "talon",
            "partitive": "taloa",
            "inessive": "talossa",
            "elative": "talosta",
            "illative": "taloon",
            "adessive": "talolla",
            "ablative": "talolta",
            "allative": "talolle",
        }

    def test_front_harmony(self) -> None:
        assert decline("päivä", DeclensionType.I, NounCase.PARTITIVE) == "päivää"
        assert decline("päivä", DeclensionType.I, NounCase.INESSIVE) == "päivässä"
        assert decline("päivä", DeclensionType.I, NounCase.ILLATIVE) == "päivään"

    def test_long_vowel(self) -> None:
        """Test a vowel-final nominative takes the bare harmony vowel and doubles it."""
        assert decline("maa", DeclensionType.I, NounCase.GENITIVE) == "maan"
        assert decline("maa", DeclensionType.I, NounCase.PARTITIVE) == "maaa"
        assert decline("maa", DeclensionType.I, NounCase.ILLATIVE) == "maaan"
        assert decline("maa", DeclensionType.I, NounCase.INESSIVE) == "maassa"


class TestGradatingStems:
    """Tests for type II nouns."""

    def test_weak_grade_in_genitive_only(self) -> None:
        assert decline("katu", DeclensionType.II, NounCase.GENITIVE) == "kadun"
        assert decline("katu", DeclensionType.II, NounCase.ACCUSATIVE) == "kadun"

    def test_local_cases_keep_strong_grade(self) -> None:
        assert decline("katu", DeclensionType.II, NounCase.INESSIVE) == "katussa"
        assert decline("katu", DeclensionType.II, NounCase.ABLATIVE) == "katulta"
        assert decline("katu", DeclensionType.II, NounCase.ALLATIVE) == "katulle"

    def test_strong_grade_in_partitive_and_illative(self) -> None:
        assert decline("katu", DeclensionType.II, NounCase.PARTITIVE) == "katua"
        assert decline("katu", DeclensionType.II, NounCase.ILLATIVE) == "katuun"


class TestNenWords:
    """Tests for type IV nouns."""

    def test_nainen(self) -> None:
        assert decline("nainen", DeclensionType.IV, NounCase.GENITIVE) == "naisen"
        assert decline("nainen", DeclensionType.IV, NounCase.PARTITIVE) == "naista"
        assert decline("nainen", DeclensionType.IV, NounCase.ILLATIVE) == "naiseen"

    def test_local_cases_use_class_stem(self) -> None:
        assert decline("nainen", DeclensionType.IV, NounCase.INESSIVE) == "naissa"
        assert decline("nainen", DeclensionType.IV, NounCase.ADESSIVE) == "naislla"
        assert decline("nainen", DeclensionType.IV, NounCase.ALLATIVE) == "naislle"

    def test_long_word(self) -> None:
        assert decline("suomalainen", DeclensionType.IV, NounCase.GENITIVE) == "suomalaisen"


class TestSiWords:
    """Tests for type V nouns."""

    def test_kasi(self) -> None:
        assert decline("käsi", DeclensionType.V, NounCase.GENITIVE) == "käden"
        assert decline("käsi", DeclensionType.V, NounCase.PARTITIVE) == "kättä"
        assert decline("käsi", DeclensionType.V, NounCase.INESSIVE) == "kädessä"
        assert decline("käsi", DeclensionType.V, NounCase.ILLATIVE) == "käteen"
        assert decline("käsi", DeclensionType.V, NounCase.ADESSIVE) == "kädellä"

    def test_vesi(self) -> None:
        assert decline("vesi", DeclensionType.V, NounCase.PARTITIVE) == "vettä"
        assert decline("vesi", DeclensionType.V, NounCase.ILLATIVE) == "veteen"

    def test_consonant_before_ending(self) -> None:
        """Test lehti keeps a -te- stem in the partitive (lehteä)."""
        assert decline("lehti", DeclensionType.V, NounCase.GENITIVE) == "lehden"
        assert decline("lehti", DeclensionType.V, NounCase.PARTITIVE) == "lehteä"
        assert decline("lehti", DeclensionType.V, NounCase.ILLATIVE) == "lehteen"


class TestOtherTypes:
    def test_consonant_final_partitive(self) -> None:
        assert decline("mies", DeclensionType.VI, NounCase.PARTITIVE) == "miestä"
        assert decline("sydän", DeclensionType.III, NounCase.PARTITIVE) == "sydäntä"

    def test_diphthong(self) -> None:
        assert decline("yö", DeclensionType.VI, NounCase.GENITIVE) == "yön"
        assert decline("yö", DeclensionType.VI, NounCase.PARTITIVE) == "yöä"
        assert decline("yö", DeclensionType.VI, NounCase.ILLATIVE) == "yöhän"


class TestInvariants:
    def test_nominative_is_identity(self) -> None:
        for declension_type in DeclensionType:
            assert decline("talo", declension_type, NounCase.NOMINATIVE) == "talo"
            assert decline_all("käsi", declension_type)["nominative"] == "käsi"

    def test_accusative_is_genitive(self) -> None:
        assert decline("käsi", DeclensionType.V, NounCase.ACCUSATIVE) == "käden"

    def test_unknown_case_returns_nominative(self) -> None:
        unknown = "vocative"
        assert decline("talo", DeclensionType.I, unknown) == "talo"  # type: ignore[arg-type]

    def test_table_order(self) -> None:
        table = decline_all("talo", DeclensionType.I)
        assert list(table) == [case.value for case in DECLENSION_TABLE_CASES]
        assert "accusative" not in table
