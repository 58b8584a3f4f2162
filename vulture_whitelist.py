"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic) that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validators - used by framework via @field_validator decorator
_.normalize_word  # noqa: F821  # unused method (stepwords/core/config.py:44)
_.expand_paths  # noqa: F821  # unused method (stepwords/core/config.py:53)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (stepwords/core/config.py:59)

# Pickle protocol hook - called by multiprocessing when shipping the index to workers
_.__reduce__  # noqa: F821  # unused method (stepwords/core/dictionary.py)

# Console script entry point - referenced from pyproject.toml
main  # noqa: F821  # unused function (stepwords/__main__.py)
