"""Unit tests for explorer navigation state."""

import pytest

from stepwords.core.dictionary import build_index
from stepwords.core.explorer import ExplorerSession


def _session() -> ExplorerSession:
    lines = ["sow;40", "owes;40", "swore;40", "powers;40", "powders;40", "stepword;40"]
    return ExplorerSession(build_index(lines, 30)[1])


class TestExplorerSession:
    """Tests for moving along a ladder."""

    def test_set_word_lowercases(self):
        session = _session()
        session.set_word("Powers")
        assert session.current == "powers"

    def test_select_records_breadcrumb(self):
        session = _session()
        session.set_word("powers")
        session.select("swore")
        session.select("owes")
        assert (session.path, session.current) == (["powers", "swore"], "owes")

    def test_back_to_truncates_trail(self):
        session = _session()
        session.set_word("powers")
        session.select("swore")
        session.select("owes")
        session.back_to(0)
        assert (session.path, session.current) == (["powers"], "powers")

    def test_select_does_not_repeat_breadcrumb(self):
        """Moving on from a breadcrumb does not record it twice."""
        session = _session()
        session.set_word("powers")
        session.select("swore")
        session.back_to(0)
        session.select("powders")
        assert session.path == ["powers"]

    def test_new_word_resets_trail(self):
        session = _session()
        session.set_word("powers")
        session.select("swore")
        session.set_word("sow")
        assert session.path == []

    def test_same_word_keeps_trail(self):
        session = _session()
        session.set_word("powers")
        session.select("swore")
        session.set_word("swore")
        assert session.path == ["powers"]

    def test_back_to_unknown_position_raises(self):
        session = _session()
        with pytest.raises(IndexError):
            session.back_to(5)

    def test_is_known(self):
        session = _session()
        assert session.is_known("sow") and not session.is_known("xyz")

    def test_neighbors_of_current_word(self):
        session = _session()
        session.set_word("powers")
        assert session.neighbors().previous == ["swore"]

    def test_neighbors_without_word_are_empty(self):
        neighbors = _session().neighbors()
        assert neighbors.previous == [] and neighbors.next == []

    def test_submit_known_word_clears_trail(self):
        """Confirming a word in the index starts a fresh trail."""
        session = _session()
        session.set_word("powers")
        session.select("swore")
        assert session.submit() is True and session.path == []

    def test_submit_unknown_word_keeps_trail(self):
        session = _session()
        session.set_word("powers")
        session.select("zzz")
        assert session.submit() is False and session.path == ["powers"]
