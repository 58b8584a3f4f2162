"""Utility functions for stepwords."""

from stepwords.utils.constants import Constants
from stepwords.utils.helpers import expand_file_path, format_chain
from stepwords.utils.logging import setup_logger

__all__ = [
    "Constants",
    "expand_file_path",
    "format_chain",
    "setup_logger",
]
