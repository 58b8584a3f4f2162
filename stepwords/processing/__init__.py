"""Search orchestration for stepwords."""

from .pipeline import run_chain, run_command, run_explore, run_suggest
from .suggestion import SuggestionResult, find_suggestion, suggest_seed

__all__ = [
    "SuggestionResult",
    "find_suggestion",
    "run_chain",
    "run_command",
    "run_explore",
    "run_suggest",
    "suggest_seed",
]
