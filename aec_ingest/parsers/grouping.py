"""
Row grouping for multi-row record kinds.

Two-candidate-preferred records span two consecutive rows and
preference-distribution records span four.  The file is trusted to list
the rows of one logical record back to back; this module does not check
that, it only slices.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def group_rows(rows: Sequence[T], size: int) -> list[list[T]]:
    """Partition *rows* into consecutive groups of *size*, in order.

    The final group may be shorter than *size*; deciding whether that is
    an error is left to the caller.

    Raises:
        ValueError: If *size* is less than 1.
    """
    if size < 1:
        raise ValueError(f"Group size must be at least 1, got {size}")
    return [list(rows[i:i + size]) for i in range(0, len(rows), size)]
