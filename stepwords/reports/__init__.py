"""Report generation for stepwords."""

from .json_report import write_json_report

__all__ = ["write_json_report"]
