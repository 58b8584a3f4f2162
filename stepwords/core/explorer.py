"""Navigation state for browsing a ladder one rung at a time."""

from stepwords.core.dictionary import DictionaryIndex
from stepwords.core.neighbors import WordNeighbors, find_neighbors


class ExplorerSession:
    """Current word plus the breadcrumb trail of words visited to reach it.

    Attributes:
        index: Dictionary index neighbors are looked up in
        current: Word being explored, empty when none is set
        path: Words visited before the current one, oldest first
    """

    def __init__(self, index: DictionaryIndex, word: str = "") -> None:
        self.index = index
        self.current = word.lower()
        self.path: list[str] = []

    def set_word(self, word: str) -> None:
        """Type a new word; changing the word clears the trail."""
        word = word.lower()
        if word != self.current:
            self.path = []
        self.current = word

    def select(self, word: str) -> None:
        """Move to a neighbor, recording the current word on the trail once."""
        if self.current not in self.path:
            self.path.append(self.current)
        self.current = word

    def back_to(self, position: int) -> None:
        """Jump back to a breadcrumb, dropping everything after it."""
        if not 0 <= position < len(self.path):
            raise IndexError(f"No breadcrumb at position {position}")
        self.path = self.path[: position + 1]
        self.current = self.path[-1]

    def submit(self) -> bool:
        """Confirm the typed word; a known word starts a fresh trail.

        Returns:
            True if the current word is in the index
        """
        known = self.is_known()
        if known:
            self.path = []
        return known

    def is_known(self, word: str | None = None) -> bool:
        """Check whether a word (default: the current one) is in the index."""
        return self.index.contains_word(self.current if word is None else word)

    def neighbors(self) -> WordNeighbors:
        """Neighbors of the current word, empty when no word is set."""
        if not self.current:
            return WordNeighbors(word="")
        return find_neighbors(self.current, self.index)
