"""Shared file I/O helpers."""

from .files import current_time_ms, file_last_modified_ms
from .json_io import load_json_file, write_json_atomic, write_text_atomic

__all__ = [
    "current_time_ms",
    "file_last_modified_ms",
    "load_json_file",
    "write_json_atomic",
    "write_text_atomic",
]
