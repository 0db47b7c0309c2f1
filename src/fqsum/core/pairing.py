"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/pairing.py
Lock-step reading of two mate streams.

Both streams advance together, one record each per step. Streams that end at
different lengths, or mates whose canonical identifiers disagree, stop the run.
"""

import logging
from typing import Iterator, Tuple, Optional

from fqsum.core.canonicalizer import canonical_identifier
from fqsum.core.errors import MateMismatchError, StreamDesyncError
from fqsum.core.interfaces import RecordSource
from fqsum.core.models import FastqRecord, MateSlot

logger = logging.getLogger(__name__)

TaggedRecord = Tuple[FastqRecord, MateSlot]

_END = object()


class PairSynchronizer:
    """
    Drives two record sources in lock-step and verifies mate identifiers.

    Attributes:
        first: Source for the first mates
        second: Source for the second mates
        check_names: Compare canonical identifiers of each pair (disabled with --no-readnames)
    """

    def __init__(self, first: RecordSource, second: RecordSource, check_names: bool = True):
        self.first = first
        self.second = second
        self.check_names = check_names
        self.pairs_read = 0
        self._first_iter: Optional[Iterator[FastqRecord]] = None
        self._second_iter: Optional[Iterator[FastqRecord]] = None

    def next_pair(self) -> Optional[Tuple[TaggedRecord, TaggedRecord]]:
        """
        Pulls exactly one record from each stream.

        Returns:
            Both records tagged FIRST and SECOND, or None when both streams ended together.

        Raises:
            StreamDesyncError: only one of the streams ended
            MateMismatchError: canonical identifiers differ (when check_names is on)
            ReadError / TruncatedStreamError: propagated from the sources
        """
        if self._first_iter is None:
            self._first_iter = iter(self.first)
            self._second_iter = iter(self.second)

        record_a = next(self._first_iter, _END)
        record_b = next(self._second_iter, _END)
        index = self.pairs_read + 1

        if record_a is _END and record_b is _END:
            logger.debug(f"Both mate streams ended after {self.pairs_read} pairs")
            return None
        if record_a is _END:
            raise StreamDesyncError(index, self.first.path, self.second.path)
        if record_b is _END:
            raise StreamDesyncError(index, self.second.path, self.first.path)

        if self.check_names:
            id_a = canonical_identifier(record_a.identifier)
            id_b = canonical_identifier(record_b.identifier)
            if id_a != id_b:
                raise MateMismatchError(index, id_a, id_b)

        self.pairs_read = index
        return (record_a, MateSlot.FIRST), (record_b, MateSlot.SECOND)

    def __iter__(self) -> Iterator[Tuple[TaggedRecord, TaggedRecord]]:
        while True:
            pair = self.next_pair()
            if pair is None:
                return
            yield pair
