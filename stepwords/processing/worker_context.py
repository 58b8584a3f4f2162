"""Read-only context shared with suggestion worker processes."""

from dataclasses import dataclass

from stepwords.core.dictionary import DictionaryIndex

# Set once per worker process by the pool initializer
_worker_context: "WorkerContext | None" = None


@dataclass(frozen=True)
class WorkerContext:
    """Everything a worker needs to score a candidate word.

    Attributes:
        index: Dictionary index, pickled once per worker
        max_length: Chain length at which a search stops early
        max_expansions: Queue pop budget per search
    """

    index: DictionaryIndex
    max_length: int
    max_expansions: int


def init_worker(context: WorkerContext) -> None:
    """Pool initializer: store the context for this process."""
    global _worker_context  # pylint: disable=global-statement
    _worker_context = context


def get_worker_context() -> WorkerContext:
    """Return the context stored by init_worker."""
    if _worker_context is None:
        raise RuntimeError("Worker context used before init_worker was called")
    return _worker_context
