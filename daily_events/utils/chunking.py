"""Splitting sequences into bounded-size chunks."""

from __future__ import annotations

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def divide(items: Sequence[T], size: int) -> List[List[T]]:
    """Split *items* into consecutive lists of at most *size* elements.

    Only the last chunk may be shorter; concatenating the chunks gives back
    *items* in order.
    """
    if size < 1:
        raise ValueError(f"chunk size must be positive, got {size}")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]

__all__ = ["divide"]
