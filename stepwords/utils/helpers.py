"""Shared utility functions for stepwords."""

import os


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def format_chain(path: tuple[str, ...] | list[str], separator: str = " -> ") -> str:
    """Render a chain shortest word first, as a ladder is played."""
    return separator.join(word.upper() for word in reversed(path))
