"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

runner.py
Run controller for order-independent FASTQ checksums.

Processes input groups strictly in the given order:
    - single-end: one file per group, records tagged as unpaired
    - paired-end: two files per group, read in lock-step as mates
Each record goes canonicalize → digest → output strategy (aggregate or trace).
"""
import sys
import time
import logging
from typing import Optional, Callable, Dict, Tuple, TextIO

from fqsum.core.canonicalizer import canonicalize
from fqsum.core.hasher import RecordHasher
from fqsum.core.interfaces import OutputStrategy
from fqsum.core.models import ChecksumParams, ChecksumResult, ChecksumStats, FastqRecord, MateSlot
from fqsum.core.outputs import select_output
from fqsum.core.pairing import PairSynchronizer
from fqsum.core.reader import open_record_source

logger = logging.getLogger(__name__)


# =============================
# Main Runner Class
# =============================
class ChecksumRunner:
    """
    Wires record sources, the pair synchronizer, the canonicalizer, the hasher and
    the output strategy together for one run. Collects per-group statistics.
    """
    def __init__(self, hasher: Optional[RecordHasher] = None, reader_factory: Optional[type] = None):
        self.hasher = hasher
        self.reader_factory = reader_factory

    def run(
        self,
        params: ChecksumParams,
        stream: Optional[TextIO] = None,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> ChecksumResult:
        """
        Main checksum pipeline.
        Args:
            params: Validated run configuration
            stream: Destination for the report or the debug trace (stdout by default)
            progress_callback (Optional[Callable[[str, int, int], None]]): Reports each finished group.
        Returns:
            ChecksumResult with the aggregate state (None in debug mode) and record count
        Raises:
            ChecksumError subclasses; nothing is written to the report on failure
        """
        stream = sys.stdout if stream is None else stream
        hasher = self.hasher or RecordHasher.for_name(params.algorithm)
        output = select_output(params.debug, stream)
        stats = ChecksumStats()
        stats.add_listener(self._log_group)
        total_start_time = time.time()
        records = 0

        groups = params.groups
        for group_index, group in enumerate(groups, 1):
            start_time = time.time()
            if params.paired:
                processed = self._run_pair(group, params, hasher, output)
            else:
                processed = self._run_single(group[0], params, hasher, output)
            records += processed

            label = " + ".join(group)
            stats.update_group(label, processed, time.time() - start_time)
            if progress_callback:
                progress_callback(label, group_index, len(groups))

        state = output.finish(stream)
        stats.total_time = time.time() - total_start_time
        return ChecksumResult(state=state, records=records, stats=stats)

    def _run_single(self, path: str, params: ChecksumParams, hasher: RecordHasher,
                    output: OutputStrategy) -> int:
        processed = 0
        with open_record_source(path, self.reader_factory) as source:
            for record in source:
                self._process(record, MateSlot.NONE, params, hasher, output)
                processed += 1
        return processed

    def _run_pair(self, paths: Tuple[str, ...], params: ChecksumParams, hasher: RecordHasher,
                  output: OutputStrategy) -> int:
        processed = 0
        first_path, second_path = paths
        with open_record_source(first_path, self.reader_factory) as first, \
                open_record_source(second_path, self.reader_factory) as second:
            synchronizer = PairSynchronizer(first, second, check_names=params.include_read_names)
            for (record_a, slot_a), (record_b, slot_b) in synchronizer:
                self._process(record_a, slot_a, params, hasher, output)
                self._process(record_b, slot_b, params, hasher, output)
                processed += 2
        return processed

    @staticmethod
    def _log_group(group_name: str, data: Dict) -> None:
        logger.debug(f"Finished {group_name}: {data['records']} records in {data['time']:.3f}s")

    @staticmethod
    def _process(record: FastqRecord, slot: MateSlot, params: ChecksumParams,
                 hasher: RecordHasher, output: OutputStrategy) -> None:
        canonical = canonicalize(record, slot, params)
        output.emit(canonical, hasher.digest(canonical))
