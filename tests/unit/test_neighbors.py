"""Unit tests for one-letter neighbor generation."""

from stepwords.core.dictionary import build_index
from stepwords.core.neighbors import (
    deletion_options,
    find_anagrams,
    find_neighbors,
    find_subwords,
    find_supwords,
    insertion_options,
)


def _ladder_index():
    """Index for the SOW -> STEPWORD example ladder."""
    lines = ["sow;40", "owes;40", "swore;40", "powers;40", "powders;40", "stepword;40"]
    return build_index(lines, 30)[1]


class TestDeletionOptions:
    """Tests for strings one letter shorter."""

    def test_one_per_position(self):
        assert deletion_options("cat") == ["at", "ct", "ca"]

    def test_double_letters_are_deduplicated(self):
        """Deleting either of two equal letters gives one option."""
        assert deletion_options("aab") == ["ab", "aa"]

    def test_single_letter_has_no_options(self):
        assert deletion_options("a") == []

    def test_empty_word_has_no_options(self):
        assert deletion_options("") == []


class TestInsertionOptions:
    """Tests for strings one letter longer."""

    def test_one_per_letter(self):
        assert len(insertion_options("cat")) == 26

    def test_letters_are_appended(self):
        options = insertion_options("cat")
        assert options[0] == "cata" and options[-1] == "catz"


class TestNeighborLookups:
    """Tests for dictionary-backed neighbor queries."""

    def test_subwords_find_previous_rung(self):
        assert find_subwords("powers", _ladder_index()) == ["swore"]

    def test_supwords_find_next_rung(self):
        assert find_supwords("sow", _ladder_index()) == ["owes"]

    def test_supwords_match_letters_added_mid_word(self):
        """Appending finds words where the new letter sits anywhere."""
        assert find_supwords("owes", _ladder_index()) == ["swore"]

    def test_subwords_are_one_letter_shorter(self):
        """Deletion neighbors never include the queried word itself."""
        index = build_index(["cat;40", "act;40", "at;40", "ta;40", "cart;40"], 30)[1]
        subwords = find_subwords("cart", index)
        assert "cart" not in subwords and all(len(word) == 3 for word in subwords)

    def test_subwords_union_is_deduplicated(self):
        """A word reachable through two deletions is listed once."""
        index = build_index(["ab;40", "ba;40"], 30)[1]
        assert find_subwords("aba", index) == ["ab", "ba"]

    def test_anagrams_include_word_itself(self):
        index = build_index(["cat;50", "act;50"], 30)[1]
        assert find_anagrams("cat", index) == ["cat", "act"]

    def test_unknown_word_has_no_neighbors(self):
        neighbors = find_neighbors("zzz", _ladder_index())
        assert neighbors.previous == [] and neighbors.anagrams == [] and neighbors.next == []

    def test_find_neighbors_groups_all_three(self):
        neighbors = find_neighbors("swore", _ladder_index())
        assert (neighbors.previous, neighbors.anagrams, neighbors.next) == (
            ["owes"],
            ["swore"],
            ["powers"],
        )
