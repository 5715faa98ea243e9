"""Utility functions and helpers."""

from .chunking import divide
from .datetime_utils import get_date_stamp, is_partition_key
from .text_cleaning import strip_control_chars, title_case, parse_leading_int

__all__ = [
    "divide",
    "get_date_stamp",
    "is_partition_key",
    "strip_control_chars",
    "title_case",
    "parse_leading_int",
]
