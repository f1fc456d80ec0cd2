"""Small sequence helpers shared by the scale, spelling and chord layers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def rotate(items: Sequence[T], start: int) -> list[T]:
    """
    Rotate a sequence so that it begins at index `start`.

    The index wraps in both directions: rotate([0, 1, 2], -1) == [2, 0, 1].
    """
    if not items:
        return []
    start %= len(items)
    return [*items[start:], *items[:start]]
