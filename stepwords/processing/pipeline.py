"""Command execution: load the index once, then run the requested search."""

import random
import time

from loguru import logger
from pydantic import BaseModel

from stepwords.core.chains import ChainSearchResult, find_longest_chain
from stepwords.core.config import Config
from stepwords.core.dictionary import DictionaryIndex, load_index
from stepwords.core.explorer import ExplorerSession
from stepwords.core.neighbors import WordNeighbors
from stepwords.processing.suggestion import SuggestionResult, find_suggestion
from stepwords.reports import write_json_report
from stepwords.utils.constants import Constants
from stepwords.utils.helpers import format_chain


def run_chain(config: Config, index: DictionaryIndex) -> ChainSearchResult:
    """Find and print the longest chain below the configured word."""
    result = find_longest_chain(
        config.word or "",
        index,
        max_length=config.max_chain_length,
        max_expansions=config.max_expansions,
    )
    if not index.contains_word(result.seed):
        logger.warning(f"'{result.seed}' is not in the word list; searching anyway")

    print(f"{result.seed}: chain length {result.length}")
    print(format_chain(result.path, Constants.CHAIN_ARROW))
    if result.truncated:
        logger.info(f"  Search stopped early after {result.expansions} expansions")
    return result


def run_explore(config: Config, index: DictionaryIndex) -> WordNeighbors:
    """Print previous words, anagrams and next words of the configured word."""
    session = ExplorerSession(index)
    session.set_word(config.word or "")
    if not session.submit():
        logger.warning(f"'{session.current}' is not in the word list")

    neighbors = session.neighbors()
    for label, words in (
        ("Previous words", neighbors.previous),
        ("Anagrams", neighbors.anagrams),
        ("Next words", neighbors.next),
    ):
        print(f"{label} ({len(words)}): {', '.join(words) if words else '-'}")
    return neighbors


def run_suggest(config: Config, index: DictionaryIndex, words: list[str]) -> SuggestionResult:
    """Suggest and print a starting word with a long enough chain."""
    result = find_suggestion(
        index,
        words,
        config.target_length,
        config.min_chain_length,
        rng=random.Random(config.seed),
        max_attempts=config.max_attempts,
        max_length=config.max_chain_length,
        max_expansions=config.max_expansions,
        jobs=config.jobs,
        verbose=config.verbose,
    )
    if result.found:
        print(f"{result.word}: chain length {result.chain_length}")
    else:
        print(
            f"No words found with chains of length {config.min_chain_length}+ for length "
            f"{config.target_length}. Tested {result.attempts} candidates. "
            "Try a shorter length or a lower minimum chain."
        )
    return result


def run_command(config: Config) -> BaseModel:
    """Load the word sources and run the configured command.

    Args:
        config: Configuration object

    Returns:
        The command's result model
    """
    start_time = time.time()
    verbose = config.verbose

    if verbose:
        logger.info("Loading word sources...")
    words, index = load_index(config, verbose)

    if verbose:
        logger.info(f"Running '{config.command}'...")

    result: BaseModel
    if config.command == "chain":
        result = run_chain(config, index)
    elif config.command == "explore":
        result = run_explore(config, index)
    else:
        result = run_suggest(config, index, words)

    if config.report:
        write_json_report(config.report, result)
        if verbose:
            logger.info(f"  Report written to {config.report}")

    if verbose:
        logger.info(f"Done in {time.time() - start_time:.2f}s")

    return result
