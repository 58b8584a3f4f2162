"""Configuration loading and validation."""

import argparse
import json
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from stepwords.utils.constants import Constants
from stepwords.utils.helpers import expand_file_path

Command = Literal["chain", "explore", "suggest"]


class Config(BaseModel):
    """Configuration for a stepwords run."""

    command: Command = "suggest"
    word: str | None = None

    # Word sources
    wordlist: str | None = None
    top_n: int | None = Field(default=None, ge=1)
    score_cutoff: int = Constants.DEFAULT_SCORE_CUTOFF

    # Search caps
    max_chain_length: int = Field(default=Constants.MAX_CHAIN_LENGTH, ge=1)
    max_expansions: int = Field(default=Constants.MAX_EXPANSIONS, ge=1)
    max_attempts: int = Field(default=Constants.MAX_SUGGESTION_ATTEMPTS, ge=1)

    # Suggestion
    target_length: int = Field(default=Constants.DEFAULT_TARGET_LENGTH, ge=1)
    min_chain_length: int = Field(default=Constants.DEFAULT_MIN_CHAIN_LENGTH, ge=1)
    seed: int | None = None
    jobs: int = Field(default=1, ge=1)

    # Output
    report: str | None = None
    verbose: bool = False
    debug: bool = False

    @field_validator("word")
    @classmethod
    def normalize_word(cls, value: str | None) -> str | None:
        """Lowercase and trim the word; blank means unset."""
        if value is None:
            return None
        value = value.strip().lower()
        return value or None

    @field_validator("wordlist", "report")
    @classmethod
    def expand_paths(cls, value: str | None) -> str | None:
        """Expand ~ in file paths."""
        return expand_file_path(value)

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Config":
        """Check settings that depend on each other."""
        if not self.wordlist and not self.top_n:
            raise ValueError("Must specify either wordlist or top_n (or both)")
        if self.command in ("chain", "explore") and not self.word:
            raise ValueError(f"The '{self.command}' command needs a word")
        if self.word and not self.word.isalpha():
            raise ValueError(f"Word must be alphabetic: {self.word!r}")
        if self.debug:
            self.verbose = True
        return self


def _load_json(path: str | None) -> dict[str, Any]:
    """Read a JSON config file; missing path means no values."""
    expanded = expand_file_path(path)
    if not expanded:
        return {}
    with open(expanded, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {expanded} must hold a JSON object")
    return data


def load_config(
    json_path: str | None,
    args: argparse.Namespace | None = None,
    parser: argparse.ArgumentParser | None = None,
) -> Config:
    """Build a Config from a JSON file and CLI arguments.

    CLI values override JSON values. Arguments left at None do not override.
    Problems are reported through parser.error when a parser is given.

    Args:
        json_path: Optional path to a JSON config file
        args: Parsed CLI arguments
        parser: Parser used to report errors

    Returns:
        Validated Config
    """
    try:
        values = _load_json(json_path)
    except (OSError, ValueError) as e:
        if parser is not None:
            parser.error(f"Could not load config file: {e}")
        raise

    if args is not None:
        for key, value in vars(args).items():
            if key == "config" or value is None:
                continue
            # store_true flags only override when set
            if value is False and key in ("verbose", "debug"):
                continue
            values[key] = value

    try:
        return Config(**values)
    except ValidationError as e:
        if parser is not None:
            messages = "; ".join(err["msg"] for err in e.errors())
            parser.error(messages)
        raise
