"""Longest anagram-ladder chain reachable from a seed word.

The search walks down the ladder: the seed is treated as the longest rung and
each step removes one letter, so every path found reads seed-first and could
be played in reverse as a puzzle.
"""

from collections import deque

from loguru import logger
from pydantic import BaseModel

from stepwords.core.dictionary import DictionaryIndex, signature
from stepwords.core.neighbors import deletion_options
from stepwords.core.types import CandidatePath
from stepwords.utils.constants import Constants


class ChainSearchResult(BaseModel):
    """Outcome of a chain search from one seed word."""

    seed: str
    length: int
    path: list[str]
    expansions: int = 0
    truncated: bool = False


def _extensions(path: CandidatePath, index: DictionaryIndex) -> list[CandidatePath]:
    """Paths extended by one deletion neighbor of the last word.

    Words already on the path are skipped. A neighbor reachable through two
    deletion options appears twice; the visited set absorbs the repeat.
    """
    extended = []
    for option in deletion_options(path[-1]):
        for word in index.lookup(signature(option)):
            if word not in path:
                extended.append(path + (word,))
    return extended


def find_longest_chain(
    seed: str,
    index: DictionaryIndex,
    max_length: int = Constants.MAX_CHAIN_LENGTH,
    max_expansions: int = Constants.MAX_EXPANSIONS,
) -> ChainSearchResult:
    """Breadth-first search over paths for the longest chain below a seed.

    Stops once the best chain reaches max_length or after max_expansions
    queue pops, returning the best chain found so far. Never raises for a
    lowercase alphabetic seed.

    Args:
        seed: Starting (longest) word
        index: Dictionary index to search
        max_length: Chain length at which to stop early
        max_expansions: Maximum number of paths popped from the queue

    Returns:
        ChainSearchResult with the best length and path
    """
    if len(seed) < 2:
        return ChainSearchResult(seed=seed, length=1, path=[seed])

    queue: deque[CandidatePath] = deque([(seed,)])
    visited: set[CandidatePath] = set()
    best: CandidatePath = (seed,)
    expansions = 0

    while queue and expansions < max_expansions:
        expansions += 1
        path = queue.popleft()

        if path in visited:
            continue
        visited.add(path)

        for extended in _extensions(path, index):
            queue.append(extended)
            if len(extended) > len(best):
                best = extended

        if len(best) >= max_length:
            break

    if len(best) >= Constants.LOGGED_CHAIN_LENGTH:
        logger.debug(f'  "{seed}" ({len(seed)} letters) -> max chain: {len(best)}')

    return ChainSearchResult(
        seed=seed,
        length=len(best),
        path=list(best),
        expansions=expansions,
        truncated=bool(queue),
    )


def find_chain_length(
    seed: str,
    index: DictionaryIndex,
    max_length: int = Constants.MAX_CHAIN_LENGTH,
    max_expansions: int = Constants.MAX_EXPANSIONS,
) -> int:
    """Return only the longest chain length reachable from a seed."""
    return find_longest_chain(seed, index, max_length, max_expansions).length
