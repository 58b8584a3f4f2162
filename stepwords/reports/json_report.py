"""JSON report writer for command results."""

from pathlib import Path

from pydantic import BaseModel


def write_json_report(path: str, result: BaseModel) -> Path:
    """Write a result model as indented JSON, creating parent directories.

    Args:
        path: Output file path
        result: Result model to serialize

    Returns:
        Path of the written file
    """
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result.model_dump_json(indent=2) + "\n", encoding="utf-8")
    return output
