"""Starting-word suggestion with optional multiprocessing support."""

import random
import threading
import time
from multiprocessing import Pool

from loguru import logger
from pydantic import BaseModel
from tqdm import tqdm

from stepwords.core.chains import find_chain_length
from stepwords.core.dictionary import DictionaryIndex
from stepwords.processing.worker_context import WorkerContext, get_worker_context, init_worker
from stepwords.utils.constants import Constants

# Candidates handed to a worker at a time; small so a match stops the pool quickly
_CHUNK_SIZE = 4


class SuggestionResult(BaseModel):
    """Outcome of a starting-word search.

    word is None when no candidate qualified within the attempt budget.
    """

    word: str | None = None
    chain_length: int = 0
    best_length: int = 0
    target_length: int
    min_chain_length: int
    attempts: int = 0
    candidates: int = 0
    cancelled: bool = False
    elapsed_time: float = 0.0

    @property
    def found(self) -> bool:
        """True when a qualifying word was found."""
        return self.word is not None


def evaluate_candidate_worker(word: str) -> tuple[str, int]:
    """Worker function for multiprocessing.

    Args:
        word: Candidate starting word

    Returns:
        Tuple of (word, chain length)
    """
    context = get_worker_context()
    return word, find_chain_length(word, context.index, context.max_length, context.max_expansions)


def shuffled_candidates(
    word_list: list[str], target_length: int, rng: random.Random
) -> list[str]:
    """Distinct words of exactly target_length in random order."""
    candidates = list(dict.fromkeys(word for word in word_list if len(word) == target_length))
    rng.shuffle(candidates)
    return candidates


def find_suggestion(
    index: DictionaryIndex,
    word_list: list[str],
    target_length: int,
    min_chain_length: int,
    *,
    rng: random.Random | None = None,
    max_attempts: int = Constants.MAX_SUGGESTION_ATTEMPTS,
    max_length: int = Constants.MAX_CHAIN_LENGTH,
    max_expansions: int = Constants.MAX_EXPANSIONS,
    jobs: int = 1,
    cancel_event: threading.Event | None = None,
    verbose: bool = False,
) -> SuggestionResult:
    """Find a random word of target_length whose chain reaches min_chain_length.

    Candidates are tested in shuffled order and the first qualifying one wins.
    With jobs > 1 the candidates are scored in a process pool but consumed in
    the same order, so the answer matches the sequential search.

    Args:
        index: Dictionary index to search
        word_list: Flat word list to sample from
        target_length: Exact length of suggested words
        min_chain_length: Chain length a suggestion must reach
        rng: Random source for shuffling (a fresh one when omitted)
        max_attempts: Maximum number of candidates to test
        max_length: Per-search chain length cap
        max_expansions: Per-search queue pop budget
        jobs: Number of worker processes
        cancel_event: Set from another thread to stop the search
        verbose: Whether to show progress

    Returns:
        SuggestionResult; its word is None when nothing qualified
    """
    start_time = time.time()
    rng = rng or random.Random()

    candidates = shuffled_candidates(word_list, target_length, rng)
    to_test = candidates[: min(max_attempts, len(candidates))]

    result = SuggestionResult(
        target_length=target_length,
        min_chain_length=min_chain_length,
        candidates=len(candidates),
    )

    if verbose:
        logger.info(
            f"  Testing up to {len(to_test)} of {len(candidates)} "
            f"{target_length}-letter candidates..."
        )

    if jobs > 1 and len(to_test) > 1:
        if verbose:
            logger.info(f"  Using {jobs} parallel workers")
        context = WorkerContext(index=index, max_length=max_length, max_expansions=max_expansions)
        # Leaving the with-block terminates workers still scoring later candidates
        with Pool(processes=jobs, initializer=init_worker, initargs=(context,)) as pool:
            scored = pool.imap(evaluate_candidate_worker, to_test, chunksize=_CHUNK_SIZE)
            _consume(scored, result, len(to_test), cancel_event, verbose)
    else:
        scored = _score_in_process(to_test, index, max_length, max_expansions, cancel_event)
        _consume(scored, result, len(to_test), cancel_event, verbose)

    result.elapsed_time = time.time() - start_time

    if result.found:
        logger.info(f'Found good word: "{result.word}" with chain length {result.chain_length}')
    elif result.cancelled:
        logger.info(f"Suggestion search cancelled after {result.attempts} candidates")
    else:
        logger.info(
            f"No words found with chains of length {min_chain_length}+ for length "
            f"{target_length}. Tested {result.attempts} candidates."
        )

    return result


def _score_in_process(to_test, index, max_length, max_expansions, cancel_event):
    """Score candidates one at a time, stopping before the next once cancelled."""
    for word in to_test:
        if cancel_event is not None and cancel_event.is_set():
            return
        yield word, find_chain_length(word, index, max_length, max_expansions)


def _consume(scored, result: SuggestionResult, total: int, cancel_event, verbose: bool) -> None:
    """Walk scored candidates in order, stopping at the first qualifying one."""
    if verbose:
        scored = tqdm(scored, total=total, desc="Testing candidates", unit="word")

    try:
        for word, length in scored:
            result.attempts += 1
            result.best_length = max(result.best_length, length)
            if length >= result.min_chain_length:
                result.word = word
                result.chain_length = length
                break
            if cancel_event is not None and cancel_event.is_set():
                break
    finally:
        if verbose:
            scored.close()

    if not result.found and cancel_event is not None and cancel_event.is_set():
        result.cancelled = True


def suggest_seed(
    index: DictionaryIndex,
    word_list: list[str],
    target_length: int,
    min_chain_length: int,
    **kwargs,
) -> str | None:
    """Return a qualifying starting word, or None when none was found."""
    return find_suggestion(index, word_list, target_length, min_chain_length, **kwargs).word
