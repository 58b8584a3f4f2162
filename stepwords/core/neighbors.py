"""One-letter neighbors of a word within the dictionary index.

Previous rungs of a ladder are found by deleting one letter, next rungs by
adding one letter, and anagrams share the word's signature outright.
"""

from collections.abc import Iterable

from pydantic import BaseModel, Field

from stepwords.core.dictionary import DictionaryIndex, signature
from stepwords.utils.constants import Constants


class WordNeighbors(BaseModel):
    """Neighbors of a word, grouped the way the explorer shows them."""

    word: str
    previous: list[str] = Field(default_factory=list)
    anagrams: list[str] = Field(default_factory=list)
    next: list[str] = Field(default_factory=list)


def deletion_options(word: str) -> list[str]:
    """Strings formed by deleting one character, without repeats.

    Words of one letter have no deletion options.
    """
    if len(word) <= 1:
        return []
    return list(dict.fromkeys(word[:i] + word[i + 1 :] for i in range(len(word))))


def insertion_options(word: str) -> list[str]:
    """Strings formed by appending each letter of the alphabet.

    Letters are only appended at the end. Lookups go through the signature,
    so the position of the new letter does not change what is found.
    """
    return [word + letter for letter in Constants.ALPHABET]


def _lookup_all(options: Iterable[str], index: DictionaryIndex) -> list[str]:
    """Union of index lookups over option signatures, first-seen order."""
    results: dict[str, None] = {}
    for option in options:
        for match in index.lookup(signature(option)):
            results[match] = None
    return list(results)


def find_subwords(word: str, index: DictionaryIndex) -> list[str]:
    """Words one letter shorter that could precede this word in a ladder."""
    return _lookup_all(deletion_options(word), index)


def find_supwords(word: str, index: DictionaryIndex) -> list[str]:
    """Words one letter longer that could follow this word in a ladder."""
    return _lookup_all(insertion_options(word), index)


def find_anagrams(word: str, index: DictionaryIndex) -> list[str]:
    """Words with exactly the same letters, the word itself included if indexed."""
    return list(index.lookup(signature(word)))


def find_neighbors(word: str, index: DictionaryIndex) -> WordNeighbors:
    """Collect previous, anagram and next neighbors of a word."""
    return WordNeighbors(
        word=word,
        previous=find_subwords(word, index),
        anagrams=find_anagrams(word, index),
        next=find_supwords(word, index),
    )
