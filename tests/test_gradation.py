"""Tests for consonant gradation."""

from finnish_anki.gradation import gradate


class TestGeminates:
    """Double stops shorten in the weak grade."""

    def test_kk(self) -> None:
        assert gradate("nukku") == "nuku"

    def test_pp(self) -> None:
        assert gradate("kauppa") == "kaupa"

    def test_tt(self) -> None:
        assert gradate("matto") == "mato"


class TestSingleStops:
    """Single stops between vowels weaken."""

    def test_t_becomes_d(self) -> None:
        assert gradate("katu") == "kadu"

    def test_p_becomes_v(self) -> None:
        assert gradate("tapa") == "tava"

    def test_k_disappears(self) -> None:
        assert gradate("luke") == "lue"


class TestUnchanged:
    """Stems without a qualifying site come back as is."""

    def test_no_stop(self) -> None:
        assert gradate("puhu") == "puhu"

    def test_cluster_not_graded(self) -> None:
        assert gradate("lintu") == "lintu"
        assert gradate("osta") == "osta"

    def test_word_initial_stop_not_graded(self) -> None:
        assert gradate("pii") == "pii"

    def test_short_stems(self) -> None:
        assert gradate("") == ""
        assert gradate("k") == "k"

    def test_strong_direction_is_identity(self) -> None:
        assert gradate("nukku", to_weak=False) == "nukku"
        assert gradate("kadu", to_weak=False) == "kadu"

    def test_only_one_site_mutated(self) -> None:
        # Scanning backward, the last qualifying site wins
        assert gradate("tapetti") == "tapeti"


class TestDeterminism:
    def test_repeated_calls_agree(self) -> None:
        assert gradate("katu") == gradate("katu")
