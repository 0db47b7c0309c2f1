"""
Core checksum engine: record source, canonicalizer, hasher, pair synchronizer,
accumulator and run controller.

- FastqRecordSource: dnaio-backed FASTQ reader (plain or gzip)
- canonicalize / canonical_identifier: exact bytes hashed per record
- RecordHasher + MD5AlgorithmImpl / XXH128AlgorithmImpl: 128-bit record digests
- PairSynchronizer: lock-step mate reading with identifier checks
- fold: order-independent sum of digests modulo 2^64
- ChecksumRunner: drives a whole run and selects the output strategy
- Models: FastqRecord, Digest, AccumulatorState, ChecksumParams and friends

All components are pure Python with no CLI dependencies.
"""

from .errors import (
    ChecksumError, ConfigurationError, OpenError, ReadError, TruncatedStreamError,
    MateMismatchError, StreamDesyncError)
from .canonicalizer import canonicalize, canonical_identifier
from .hasher import RecordHasher, MD5AlgorithmImpl, XXH128AlgorithmImpl
from .accumulator import fold, fold_all
from .reader import FastqRecordSource, open_record_source
from .pairing import PairSynchronizer
from .outputs import AggregateOutput, TraceOutput, select_output
from .runner import ChecksumRunner
from .models import (
    FastqRecord, Digest, AccumulatorState, ChecksumParams, ChecksumResult, ChecksumStats,
    MateSlot, HashAlgorithmName)

__all__ = [
    "ChecksumError",
    "ConfigurationError",
    "OpenError",
    "ReadError",
    "TruncatedStreamError",
    "MateMismatchError",
    "StreamDesyncError",
    "canonicalize",
    "canonical_identifier",
    "RecordHasher",
    "MD5AlgorithmImpl",
    "XXH128AlgorithmImpl",
    "fold",
    "fold_all",
    "FastqRecordSource",
    "open_record_source",
    "PairSynchronizer",
    "AggregateOutput",
    "TraceOutput",
    "select_output",
    "ChecksumRunner",
    "FastqRecord",
    "Digest",
    "AccumulatorState",
    "ChecksumParams",
    "ChecksumResult",
    "ChecksumStats",
    "MateSlot",
    "HashAlgorithmName",
]
