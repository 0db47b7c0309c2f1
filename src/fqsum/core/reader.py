"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/reader.py
FASTQ record source backed by dnaio.
Features:
- Plain and gzip-compressed input (decompression handled by dnaio/xopen)
- A .gz name holding uncompressed data is read as plain FASTQ
- Distinguishes a clean end of data, a malformed record and a truncated final record
- Yields records lazily; one open handle per instance
"""

import logging
from typing import BinaryIO, Iterator, Optional, Union

import dnaio

from fqsum.core.errors import OpenError, ReadError, TruncatedStreamError
from fqsum.core.interfaces import RecordSource
from fqsum.core.models import FastqRecord

logger = logging.getLogger(__name__)

_PREMATURE_END_MARKER = "premature end"
_GZIP_MAGIC = b"\x1f\x8b"


class FastqRecordSource(RecordSource):
    """
    Reads FASTQ records from one file, single pass.

    dnaio parses the first record while opening, so format errors can
    already surface from the constructor; they are mapped like the ones
    raised during iteration.

    Attributes:
        path: File being read
        records_read: Number of complete records yielded so far
    """

    def __init__(self, path: str):
        self.path = str(path)
        self.records_read = 0
        self._reader = None
        self._handle: Optional[BinaryIO] = None
        try:
            self._reader = dnaio.open(self._open_input(), fileformat="fastq", mode="r")
        except OSError as e:
            self._close_handle()
            logger.debug(f"Failed to open {self.path}: {e}")
            raise OpenError(self.path, e.strerror or str(e)) from e
        except dnaio.FastqFormatError as e:
            self._close_handle()
            raise self._format_error(e) from e
        except EOFError as e:
            # gzip stream cut short inside the first chunk
            self._close_handle()
            raise TruncatedStreamError(self.path, 1) from e
        logger.debug(f"Opened {self.path}")

    def _open_input(self) -> Union[str, BinaryIO]:
        """Path for dnaio, or a plain binary handle when a .gz name holds uncompressed data."""
        if not self.path.lower().endswith(".gz"):
            return self.path
        with open(self.path, "rb") as f:
            magic = f.read(len(_GZIP_MAGIC))
        if magic == _GZIP_MAGIC:
            return self.path
        logger.debug(f"{self.path} is not gzip-compressed, reading it as plain FASTQ")
        self._handle = open(self.path, "rb")
        return self._handle

    def __iter__(self) -> Iterator[FastqRecord]:
        if self._reader is None:
            raise ReadError(self.path, reason="source is closed")
        records = iter(self._reader)
        while True:
            try:
                read = next(records)
            except StopIteration:
                logger.debug(f"Reached end of {self.path} after {self.records_read} records")
                return
            except dnaio.FastqFormatError as e:
                raise self._format_error(e) from e
            except EOFError as e:
                # gzip member cut short
                raise TruncatedStreamError(self.path, self.records_read + 1) from e
            except OSError as e:
                raise ReadError(self.path, self.records_read + 1, str(e)) from e
            self.records_read += 1
            yield self._to_record(read)

    def _format_error(self, error: Exception) -> ReadError:
        index = self.records_read + 1
        if _PREMATURE_END_MARKER in str(error).lower():
            return TruncatedStreamError(self.path, index)
        return ReadError(self.path, index, str(error))

    @staticmethod
    def _to_record(read) -> FastqRecord:
        return FastqRecord(
            identifier=read.name.encode("ascii"),
            sequence=read.sequence.encode("ascii"),
            quality=(read.qualities or "").encode("ascii"),
        )

    def _close_handle(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def close(self) -> None:
        if self._reader is not None:
            self._reader.close()
            self._reader = None
            logger.debug(f"Closed {self.path}")
        self._close_handle()

    def __enter__(self) -> "FastqRecordSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self):
        return f"<FastqRecordSource path={self.path}, records_read={self.records_read}>"


def open_record_source(path: str, reader_factory: Optional[type] = None) -> RecordSource:
    """Opens `path` with the default dnaio-backed reader, or with `reader_factory` when given."""
    factory = reader_factory or FastqRecordSource
    return factory(path)
