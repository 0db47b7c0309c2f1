"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/canonicalizer.py
Builds the exact byte string hashed for each FASTQ record.
"""

import re
from functools import lru_cache

from fqsum.core.models import FastqRecord, MateSlot, ChecksumParams

# First space or tab starts the comment part of a FASTQ header
_PATTERN_HEADER_COMMENT = re.compile(rb"[ \t]")
_MATE_SUFFIXES = (b"/1", b"/2")


@lru_cache(maxsize=8192)
def canonical_identifier(identifier: bytes) -> bytes:
    """
    Normalize a read identifier so that both mates of a pair compare equal.

    Rules:
    - A trailing "/1" or "/2" mate suffix is stripped
    - Otherwise the identifier is cut at the first space or tab

    Examples:
        b"read7/1"                 → b"read7"
        b"read7 1:N:0:ATCACG"      → b"read7"
        b"read7"                   → b"read7"
    """
    if identifier.endswith(_MATE_SUFFIXES):
        return identifier[:-2]
    return _PATTERN_HEADER_COMMENT.split(identifier, maxsplit=1)[0]


def canonicalize(record: FastqRecord, mate_slot: MateSlot, params: ChecksumParams) -> bytes:
    """
    Returns the canonical hash input for a record:
    [canonical id + mate tag] + sequence + [quality].

    The mate tag comes from `mate_slot`, never from the original header, so files
    that only differ in suffix style canonicalize identically.
    """
    parts = []
    if params.include_read_names:
        parts.append(canonical_identifier(record.identifier))
        parts.append(mate_slot.tag)
    parts.append(record.sequence)
    if params.include_quality:
        parts.append(record.quality)
    return b"".join(parts)
