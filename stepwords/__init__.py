"""stepwords - anagram ladder explorer for Stepwords puzzles.

Find how long a ladder of anagram-plus-one-letter steps can get below a word,
and suggest starting words that produce long ladders.
"""

from .core import (
    ChainSearchResult,
    Config,
    DataSourceError,
    DictionaryIndex,
    build_index,
    find_chain_length,
    find_longest_chain,
    load_config,
)
from .processing import run_command, suggest_seed

__version__ = "0.1.0"
__all__ = [
    "ChainSearchResult",
    "Config",
    "DataSourceError",
    "DictionaryIndex",
    "build_index",
    "find_chain_length",
    "find_longest_chain",
    "load_config",
    "run_command",
    "suggest_seed",
]
