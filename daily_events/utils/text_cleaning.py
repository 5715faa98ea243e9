"""Text helpers shared by the extraction and normalization services."""

from __future__ import annotations

import re
from typing import Final, Optional

_CONTROL_CHARS: Final[re.Pattern[str]] = re.compile(r"[\t\n]")
_WORD: Final[re.Pattern[str]] = re.compile(r"\w\S*")
_LEADING_INT: Final[re.Pattern[str]] = re.compile(r"^\s*([+-]?\d+)")


def strip_control_chars(text: str) -> str:
    """Remove tab and newline characters (other whitespace is kept)."""
    return _CONTROL_CHARS.sub("", text)


def title_case(text: str) -> str:
    """Upper-case the first character of every word and lower-case the rest.

    A word starts at a word character and runs to the next whitespace, so
    hyphenated words keep a single capital: ``"QUICK-brown"`` -> ``"Quick-brown"``.
    """
    return _WORD.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text)


def parse_leading_int(text: str) -> Optional[int]:
    """Parse the integer prefix of *text*, ``None`` when there is none.

    ``"15 "`` -> 15, ``"07th"`` -> 7, ``"abc"`` -> None.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))

__all__ = ["strip_control_chars", "title_case", "parse_leading_int"]
