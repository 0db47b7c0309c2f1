"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the checksum engine.

Key Components:
---------------
- HashAlgorithm: Standardized interface for 128-bit hash functions (MD5, XXH3-128).
- RecordSource: Iterable of FASTQ records for one open file.
- OutputStrategy: Receives digests of canonical records (trace or aggregate).
"""

from typing import Protocol, Iterator, Optional, TextIO
from fqsum.core.models import FastqRecord, Digest, AccumulatorState


class HashAlgorithm(Protocol):
    """
    Interface for 128-bit hash algorithms.

    Allows plugging in different hashing functions without affecting the
    canonicalization or accumulation logic.
    """

    @staticmethod
    def hash(data: bytes) -> bytes:
        """Computes the 16-byte digest of the provided byte data."""
        ...


class RecordSource(Protocol):
    """
    One open FASTQ stream.

    Iteration stops on a clean end of data. A malformed record raises ReadError,
    a record cut short by end of data raises TruncatedStreamError.
    """
    path: str

    def __iter__(self) -> Iterator[FastqRecord]:
        ...

    def close(self) -> None:
        ...

    def __enter__(self) -> "RecordSource":
        ...

    def __exit__(self, exc_type, exc, tb) -> None:
        ...


class OutputStrategy(Protocol):
    """
    Destination for per-record digests. Chosen once per run.
    """

    def emit(self, canonical: bytes, digest: Digest) -> None:
        """Handle one processed record."""
        ...

    def finish(self, stream: TextIO) -> Optional[AccumulatorState]:
        """Write the final report, if any, and return the aggregate state."""
        ...
