"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/accumulator.py
Order-independent accumulation of record digests.

Addition modulo 2^64 is commutative and associative, so the final sum only
depends on the multiset of records, never on the order they were read in.
"""

from typing import Iterable

from fqsum.core.models import AccumulatorState

MASK_64 = (1 << 64) - 1


def fold(state: AccumulatorState, digest_low: int) -> AccumulatorState:
    """Adds one digest low half to the running sum (wrapping at 2^64) and counts the record."""
    return AccumulatorState(sum=(state.sum + digest_low) & MASK_64, count=state.count + 1)


def fold_all(state: AccumulatorState, digest_lows: Iterable[int]) -> AccumulatorState:
    for low in digest_lows:
        state = fold(state, low)
    return state
