"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception hierarchy for checksum runs. Every error here is fatal: the run
stops and no partial checksum is reported.
"""

from typing import Optional


class ChecksumError(Exception):
    """Base class for all fqsum failures."""


class ConfigurationError(ChecksumError, ValueError):
    """Invalid option combination or input list (raised before any I/O)."""


class OpenError(ChecksumError):
    """An input file could not be opened for reading."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Could not open the file: {path} for reading"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ReadError(ChecksumError):
    """A malformed record was found in the middle of a stream."""

    def __init__(self, path: str, record_index: Optional[int] = None, reason: str = ""):
        self.path = path
        self.record_index = record_index
        self.reason = reason
        super().__init__(self._format())

    def _format(self) -> str:
        message = f"Could not read from {self.path}"
        if self.record_index is not None:
            message += f" at record {self.record_index}"
        if self.reason:
            message += f": {self.reason}"
        return message


class TruncatedStreamError(ReadError):
    """End of data was reached where a complete record was expected."""

    def _format(self) -> str:
        message = f"Could not continue reading {self.path}"
        if self.record_index is not None:
            message += f" at record {self.record_index}"
        return message + " (truncated final record)"


class MateMismatchError(ChecksumError):
    """Mate identifiers of a read pair disagree."""

    def __init__(self, record_index: int, first_id: bytes = b"", second_id: bytes = b""):
        self.record_index = record_index
        self.first_id = first_id
        self.second_id = second_id
        super().__init__(self._format())

    def _format(self) -> str:
        return (
            f"Read names at record {self.record_index} are not in the same order: "
            f"{self.first_id.decode('ascii', 'replace')} != {self.second_id.decode('ascii', 'replace')}"
        )


class StreamDesyncError(MateMismatchError):
    """One mate file ended before the other."""

    def __init__(self, record_index: int, exhausted_path: str, remaining_path: str):
        self.exhausted_path = exhausted_path
        self.remaining_path = remaining_path
        super().__init__(record_index)

    def _format(self) -> str:
        return (
            f"{self.exhausted_path} ended at record {self.record_index} but "
            f"{self.remaining_path} has more reads. Check if files have the same number of reads"
        )
