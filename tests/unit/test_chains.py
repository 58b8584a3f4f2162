"""Unit tests for the longest-chain search."""

from stepwords.core.chains import find_chain_length, find_longest_chain
from stepwords.core.dictionary import DictionaryIndex, build_index

LADDER = ["sow", "owes", "swore", "powers", "powders", "stepword"]


def _index(*words: str, score: int = 40) -> DictionaryIndex:
    return build_index([f"{word};{score}" for word in words], 30)[1]


class TestChainLength:
    """Tests for chain length results."""

    def test_full_example_ladder(self):
        """STEPWORD reaches SOW through every rung of the example puzzle."""
        assert find_chain_length("stepword", _index(*LADDER)) == 6

    def test_path_walks_down_the_ladder(self):
        result = find_longest_chain("stepword", _index(*LADDER))
        assert result.path == ["stepword", "powders", "powers", "swore", "owes", "sow"]

    def test_anagrams_alone_do_not_extend(self):
        """Only deletions make a step; a same-letters word is not a rung."""
        assert find_chain_length("cat", _index("cat", "act", score=50)) == 1

    def test_single_letter_seed_is_one(self):
        assert find_chain_length("a", _index("a", "at", "cat")) == 1

    def test_empty_index_is_one(self):
        assert find_chain_length("stepword", DictionaryIndex()) == 1

    def test_seed_need_not_be_indexed(self):
        """The seed only starts the search; its rungs come from the index."""
        assert find_chain_length("stepword", _index(*LADDER[:-1])) == 6

    def test_search_does_not_walk_up(self):
        """The seed is the longest rung, so longer words are never added."""
        assert find_chain_length("sow", _index(*LADDER)) == 1

    def test_exhausted_search_is_not_truncated(self):
        result = find_longest_chain("stepword", _index(*LADDER))
        assert result.truncated is False


class TestSearchCaps:
    """Tests for the early-stop caps."""

    def test_stops_at_max_length(self):
        result = find_longest_chain("stepword", _index(*LADDER), max_length=3)
        assert (result.length, result.truncated) == (3, True)

    def test_stops_after_max_expansions(self):
        """The best chain so far is returned when the pop budget runs out."""
        result = find_longest_chain("stepword", _index(*LADDER), max_expansions=2)
        assert (result.length, result.expansions) == (3, 2)


class TestPathHandling:
    """Tests for visited-path deduplication and cycle freedom."""

    def test_duplicate_paths_are_popped_but_not_expanded(self):
        """'aba' reaches 'ab' and 'ba' through two deletions each.

        The repeated paths still count as pops but add no new work.
        """
        result = find_longest_chain("aba", _index("ab", "ba", "a"))
        assert (result.length, result.expansions) == (3, 7)

    def test_first_longest_path_wins(self):
        result = find_longest_chain("aba", _index("ab", "ba", "a"))
        assert result.path == ["aba", "ab", "a"]

    def test_paths_never_repeat_words(self):
        words = ["a", "at", "ta", "cat", "act", "tact", "cart", "trace", "crate", "carte"]
        result = find_longest_chain("carted", _index(*words))
        assert len(set(result.path)) == len(result.path)
