"""
fqsum — order-independent checksums for FASTQ datasets.

Core features:
- One fingerprint per dataset, unchanged when reads (or read pairs) are reordered or split
- Paired-end mode with mate name verification
- Read names and qualities can be excluded from the checksum
- Plain and gzip-compressed FASTQ input
- CLI interface (`fqsum`) and a small programmatic API
"""

# Get version
from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("fqsum")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Public API: only what users should import directly
from fqsum.commands import ChecksumCommand
from fqsum.core import (
    ChecksumParams, ChecksumResult, AccumulatorState, HashAlgorithmName, MateSlot,
    ChecksumError, ConfigurationError, OpenError, ReadError, TruncatedStreamError,
    MateMismatchError, StreamDesyncError)

__all__ = [
    "ChecksumCommand",
    "ChecksumParams",
    "ChecksumResult",
    "AccumulatorState",
    "HashAlgorithmName",
    "MateSlot",
    "ChecksumError",
    "ConfigurationError",
    "OpenError",
    "ReadError",
    "TruncatedStreamError",
    "MateMismatchError",
    "StreamDesyncError",
    "__version__",
]
