"""Core domain logic for stepwords."""

from .chains import ChainSearchResult, find_chain_length, find_longest_chain
from .config import Config, load_config
from .dictionary import (
    DataSourceError,
    DictionaryIndex,
    build_index,
    load_index,
    load_word_lines,
    load_wordfreq_lines,
    signature,
)
from .explorer import ExplorerSession
from .neighbors import (
    WordNeighbors,
    find_anagrams,
    find_neighbors,
    find_subwords,
    find_supwords,
)

__all__ = [
    "ChainSearchResult",
    "Config",
    "DataSourceError",
    "DictionaryIndex",
    "ExplorerSession",
    "WordNeighbors",
    "build_index",
    "find_anagrams",
    "find_chain_length",
    "find_longest_chain",
    "find_neighbors",
    "find_subwords",
    "find_supwords",
    "load_config",
    "load_index",
    "load_word_lines",
    "load_wordfreq_lines",
    "signature",
]
