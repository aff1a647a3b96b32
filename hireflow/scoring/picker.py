"""
Seeded selection without replacement.

:func:`pick` walks a linear congruential generator from a seed and
collects distinct pool indices in the order they come up.  The
generator is the ANSI C ``rand`` recurrence reduced modulo 2**31, which
has full period, so every residue class of every pool size is reached
and the loop always terminates.
"""

from __future__ import annotations

from typing import List, Sequence, TypeVar

T = TypeVar("T")

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = 2 ** 31


def next_state(state: int) -> int:
    """Advance the generator by one step."""
    return (state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS


def pick(pool: Sequence[T], seed: int, count: int) -> List[T]:
    """Select up to ``count`` distinct entries of ``pool``.

    Args:
        pool: Ordered entries to choose from.
        seed: Starting generator state.
        count: Requested number of entries.  Values above the pool
            size are capped; zero or negative values select nothing.

    Returns:
        The chosen entries in selection order.
    """
    target = min(count, len(pool))
    if target <= 0:
        return []
    chosen: List[T] = []
    used = set()
    state = seed
    while len(chosen) < target:
        state = next_state(state)
        idx = state % len(pool)
        if idx not in used:
            used.add(idx)
            chosen.append(pool[idx])
    return chosen
