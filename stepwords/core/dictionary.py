"""Word list loading and the anagram-class index."""

import re
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from loguru import logger
from wordfreq import top_n_list, zipf_frequency

from stepwords.core.types import AnagramClass
from stepwords.utils.constants import Constants
from stepwords.utils.helpers import expand_file_path

if TYPE_CHECKING:
    from stepwords.core.config import Config

# Leading ASCII integer, the way a lenient integer parse reads "40", " 40" or "40abc"
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


class DataSourceError(Exception):
    """Raised when the word list cannot be fetched or read."""


def signature(word: str) -> AnagramClass:
    """Return the anagram class of a word: its letters sorted ascending."""
    return "".join(sorted(word))


def parse_score(text: str) -> int | None:
    """Parse a score field, returning None when it holds no leading integer.

    A None score fails every cutoff comparison.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


class DictionaryIndex:
    """Immutable lookup from anagram class to the distinct words sharing it.

    Words keep the order they were first seen in. The index holds no scores:
    the score cutoff is applied while building and a new cutoff means a new
    index.

    Attributes:
        classes: Read-only mapping of signature -> tuple of words
    """

    __slots__ = ("classes", "_word_count")

    def __init__(self, classes: Mapping[AnagramClass, Iterable[str]] | None = None) -> None:
        frozen = {key: tuple(words) for key, words in (classes or {}).items()}
        self.classes: Mapping[AnagramClass, tuple[str, ...]] = MappingProxyType(frozen)
        self._word_count = sum(len(words) for words in frozen.values())

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "DictionaryIndex":
        """Group words by signature, dropping repeats within a class."""
        grouped: dict[AnagramClass, dict[str, None]] = {}
        for word in words:
            grouped.setdefault(signature(word), {})[word] = None
        return cls({key: list(members) for key, members in grouped.items()})

    def lookup(self, key: AnagramClass) -> tuple[str, ...]:
        """Return the words of an anagram class, empty when unknown."""
        return self.classes.get(key, ())

    def contains_word(self, word: str) -> bool:
        """Check whether the exact word is indexed."""
        return word in self.classes.get(signature(word), ())

    @property
    def word_count(self) -> int:
        """Number of distinct words across all classes."""
        return self._word_count

    def __len__(self) -> int:
        return len(self.classes)

    def __iter__(self) -> Iterator[AnagramClass]:
        return iter(self.classes)

    def __contains__(self, key: object) -> bool:
        return key in self.classes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DictionaryIndex):
            return NotImplemented
        return dict(self.classes) == dict(other.classes)

    def __hash__(self) -> int:
        return hash(frozenset(self.classes.items()))

    def __repr__(self) -> str:
        return f"DictionaryIndex(classes={len(self)}, words={self.word_count})"

    def __reduce__(self):
        # mappingproxy cannot be pickled; worker processes get a plain dict
        return (DictionaryIndex, (dict(self.classes),))


def _accepted_words(lines: Iterable[str], score_cutoff: int) -> Iterator[str]:
    """Yield words from word;score lines whose score passes the cutoff."""
    for line in lines:
        parts = line.split(Constants.WORDLIST_SEPARATOR)
        if len(parts) < 2:
            continue
        score = parse_score(parts[1])
        if score is None or score < score_cutoff:
            continue
        word = parts[0].lower().strip()
        if word:
            yield word


def build_index(
    lines: Iterable[str], score_cutoff: int = Constants.DEFAULT_SCORE_CUTOFF
) -> tuple[list[str], DictionaryIndex]:
    """Build the flat word list and the anagram-class index.

    Args:
        lines: Word list lines formatted as word;score[;...]
        score_cutoff: Minimum score a word needs to be accepted

    Returns:
        Tuple of (accepted words in input order, index)
    """
    words = list(_accepted_words(lines, score_cutoff))
    return words, DictionaryIndex.from_words(words)


def load_word_lines(filepath: str) -> list[str]:
    """Read a word list file into lines.

    Raises:
        DataSourceError: If the file is missing, unreadable or not UTF-8
    """
    path = expand_file_path(filepath)
    if not path:
        raise DataSourceError("No word list path given")

    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            # Lines end at "\n" only; other line breaks stay inside a line
            return f.read().split("\n")
    except (OSError, UnicodeDecodeError) as e:
        raise DataSourceError(f"Could not read word list {path}: {e}") from e


def load_wordfreq_lines(top_n: int, lang: str = "en") -> list[str]:
    """Build word;score lines from the most common wordfreq words.

    Scores are zipf frequencies scaled by ten, so a cutoff of 30 keeps words
    with zipf >= 3.0.

    Raises:
        DataSourceError: If wordfreq has no data for the language
    """
    try:
        candidates = top_n_list(lang, top_n)
    except (LookupError, OSError, ValueError) as e:
        raise DataSourceError(f"Could not load wordfreq list for '{lang}': {e}") from e

    lines = []
    for word in candidates:
        if not word.isalpha():
            continue
        score = round(zipf_frequency(word, lang) * Constants.ZIPF_SCORE_MULTIPLIER)
        lines.append(f"{word}{Constants.WORDLIST_SEPARATOR}{score}")
    return lines


def load_index(config: "Config", verbose: bool = False) -> tuple[list[str], DictionaryIndex]:
    """Load the configured word sources and build the index.

    File lines come first, then wordfreq lines, so file order wins within a class.

    Args:
        config: Configuration object
        verbose: Whether to log progress

    Returns:
        Tuple of (accepted words, index)
    """
    lines: list[str] = []

    if config.wordlist:
        if verbose:
            logger.info(f"Loading word list from {config.wordlist}...")
        lines.extend(load_word_lines(config.wordlist))

    if config.top_n:
        if verbose:
            logger.info(f"Loading top {config.top_n} words from wordfreq...")
        lines.extend(load_wordfreq_lines(config.top_n))

    words, index = build_index(lines, config.score_cutoff)

    if verbose:
        logger.info(
            f"  Indexed {index.word_count} words in {len(index)} anagram classes "
            f"(score >= {config.score_cutoff}, {len(lines)} lines read)"
        )

    return words, index
