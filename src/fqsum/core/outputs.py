"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/outputs.py
Output strategies selected once per run:
- AggregateOutput: folds every digest into the accumulator and reports "<sum>\\t<count>"
- TraceOutput: prints each canonical record with its digest low half, no aggregate
"""

from typing import Optional, TextIO

from fqsum.core.accumulator import fold
from fqsum.core.interfaces import OutputStrategy
from fqsum.core.models import AccumulatorState, Digest


class AggregateOutput(OutputStrategy):
    """Accumulates digests silently; the only output is the final report line."""

    def __init__(self):
        self.state = AccumulatorState()

    def emit(self, canonical: bytes, digest: Digest) -> None:
        self.state = fold(self.state, digest.low)

    def finish(self, stream: TextIO) -> Optional[AccumulatorState]:
        stream.write(f"{self.state.sum_hex}\t{self.state.count}\n")
        return self.state


class TraceOutput(OutputStrategy):
    """Writes one line per record as soon as it is hashed. The accumulator is never touched."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def emit(self, canonical: bytes, digest: Digest) -> None:
        self.stream.write(f"{canonical.decode('ascii')} {digest.low_hex}\n")

    def finish(self, stream: TextIO) -> Optional[AccumulatorState]:
        return None


def select_output(debug: bool, stream: TextIO) -> OutputStrategy:
    return TraceOutput(stream) if debug else AggregateOutput()
