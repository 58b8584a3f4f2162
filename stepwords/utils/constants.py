"""Constants used throughout the stepwords codebase."""

import string


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Word list format
    WORDLIST_SEPARATOR = ";"
    """Separator between fields of a word list line (word;score)."""

    DEFAULT_SCORE_CUTOFF = 30
    """Minimum score for a word to enter the index."""

    ZIPF_SCORE_MULTIPLIER = 10
    """Scale applied to wordfreq zipf values to match word list scores."""

    ALPHABET = string.ascii_lowercase
    """Letters tried when looking for the next rung of a ladder."""

    # Search caps
    MAX_CHAIN_LENGTH = 15
    """Chain length at which the search stops early."""

    MAX_EXPANSIONS = 1000
    """Maximum number of paths popped from the search queue."""

    MAX_SUGGESTION_ATTEMPTS = 1000
    """Maximum number of candidates tested when suggesting a starting word."""

    # Suggestion defaults
    DEFAULT_TARGET_LENGTH = 10
    """Default length of suggested starting words."""

    DEFAULT_MIN_CHAIN_LENGTH = 5
    """Default chain length a suggested word must reach."""

    LOGGED_CHAIN_LENGTH = 3
    """Chains at least this long are logged at debug level."""

    # Display
    CHAIN_ARROW = " -> "
    """Separator used when printing a chain."""
