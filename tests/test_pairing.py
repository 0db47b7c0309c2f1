"""
Unit tests for PairSynchronizer.
Uses in-memory record sources so only the lock-step protocol is under test.
"""
import pytest

from fqsum.core.errors import MateMismatchError, StreamDesyncError, ReadError
from fqsum.core.models import FastqRecord, MateSlot
from fqsum.core.pairing import PairSynchronizer


class ListSource:
    """Minimal RecordSource over a list of identifiers."""

    def __init__(self, path, identifiers, fail_at=None):
        self.path = path
        self.identifiers = identifiers
        self.fail_at = fail_at
        self.closed = False

    def __iter__(self):
        for i, identifier in enumerate(self.identifiers, 1):
            if i == self.fail_at:
                raise ReadError(self.path, i, "bad record")
            yield FastqRecord(identifier=identifier, sequence=b"ACGT", quality=b"IIII")

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class TestLockStep:

    def test_pairs_tagged_first_and_second(self):
        sync = PairSynchronizer(ListSource("a", [b"r1/1", b"r2/1"]), ListSource("b", [b"r1/2", b"r2/2"]))
        pairs = list(sync)
        assert len(pairs) == 2
        (rec_a, slot_a), (rec_b, slot_b) = pairs[0]
        assert (rec_a.identifier, slot_a) == (b"r1/1", MateSlot.FIRST)
        assert (rec_b.identifier, slot_b) == (b"r1/2", MateSlot.SECOND)
        assert sync.pairs_read == 2

    def test_both_empty_is_normal_end(self):
        sync = PairSynchronizer(ListSource("a", []), ListSource("b", []))
        assert sync.next_pair() is None

    def test_mixed_suffix_styles_match(self):
        sync = PairSynchronizer(ListSource("a", [b"r1 1:N:0"]), ListSource("b", [b"r1/2"]))
        assert len(list(sync)) == 1


class TestMateVerification:

    def test_mismatch_reports_record_index(self):
        sync = PairSynchronizer(
            ListSource("a", [b"r1/1", b"r2/1", b"readX/1"]),
            ListSource("b", [b"r1/2", b"r2/2", b"readY/2"]),
        )
        with pytest.raises(MateMismatchError) as exc:
            list(sync)
        assert exc.value.record_index == 3
        assert exc.value.first_id == b"readX"
        assert exc.value.second_id == b"readY"

    def test_comparison_is_case_sensitive(self):
        sync = PairSynchronizer(ListSource("a", [b"READ1/1"]), ListSource("b", [b"read1/2"]))
        with pytest.raises(MateMismatchError):
            sync.next_pair()

    def test_names_not_checked_when_disabled(self):
        sync = PairSynchronizer(
            ListSource("a", [b"readX/1"]), ListSource("b", [b"readY/2"]), check_names=False
        )
        assert len(list(sync)) == 1


class TestDesync:

    def test_first_stream_shorter(self):
        sync = PairSynchronizer(ListSource("a.fq", [b"r1/1"]), ListSource("b.fq", [b"r1/2", b"r2/2"]))
        with pytest.raises(StreamDesyncError) as exc:
            list(sync)
        assert exc.value.record_index == 2
        assert exc.value.exhausted_path == "a.fq"
        assert exc.value.remaining_path == "b.fq"

    def test_second_stream_shorter(self):
        sync = PairSynchronizer(ListSource("a.fq", [b"r1/1", b"r2/1"]), ListSource("b.fq", [b"r1/2"]))
        with pytest.raises(StreamDesyncError) as exc:
            list(sync)
        assert exc.value.exhausted_path == "b.fq"

    def test_desync_is_a_mate_mismatch(self):
        sync = PairSynchronizer(ListSource("a", []), ListSource("b", [b"r1/2"]), check_names=False)
        with pytest.raises(MateMismatchError):
            sync.next_pair()

    def test_read_errors_propagate(self):
        sync = PairSynchronizer(ListSource("a", [b"r1/1", b"r2/1"]), ListSource("b", [b"r1/2", b"r2/2"], fail_at=2))
        with pytest.raises(ReadError):
            list(sync)
