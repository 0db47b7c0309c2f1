"""
Shared fixtures for checksum tests.
Creates isolated temporary directories with controlled FASTQ files.
"""
import gzip
import logging
import hashlib
import pytest
import tempfile
from pathlib import Path
from typing import Callable, Iterable, Tuple
import sys

# Add src/ to sys.path so 'fqsum' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

Read = Tuple[str, str, str]


def fastq_text(reads: Iterable[Read]) -> str:
    return "".join(f"@{name}\n{seq}\n+\n{qual}\n" for name, seq, qual in reads)


def md5_low(data: bytes) -> int:
    """Low 64-bit half of an MD5 digest, computed independently of fqsum."""
    return int.from_bytes(hashlib.md5(data).digest()[:8], "little")


def expected_sum(*canonical: bytes) -> int:
    return sum(md5_low(c) for c in canonical) % (1 << 64)


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_fastq(temp_dir) -> Callable[..., Path]:
    """
    Factory writing FASTQ files into temp_dir.
    Files ending in .gz are gzip-compressed; `raw` bypasses record formatting.
    """
    def _write(name: str, reads: Iterable[Read] = (), raw: str = None) -> Path:
        path = temp_dir / name
        text = raw if raw is not None else fastq_text(reads)
        if name.endswith(".gz"):
            with gzip.open(path, "wb") as f:
                f.write(text.encode("ascii"))
        else:
            path.write_text(text)
        return path

    return _write


@pytest.fixture
def paired_files(write_fastq) -> Tuple[Path, Path]:
    """
    Three read pairs with old-style /1 and /2 mate suffixes.
    """
    r1 = write_fastq("sample_R1.fastq", [
        ("read1/1", "ACGTACGT", "IIIIIIII"),
        ("read2/1", "GGGGCCCC", "IIIIHHHH"),
        ("read3/1", "TTTTAAAA", "FFFFIIII"),
    ])
    r2 = write_fastq("sample_R2.fastq", [
        ("read1/2", "TGCATGCA", "IIIIIIII"),
        ("read2/2", "CCCCGGGG", "HHHHIIII"),
        ("read3/2", "AAAATTTT", "IIIIFFFF"),
    ])
    return r1, r2


@pytest.fixture(autouse=True)
def reset_fqsum_logging():
    """--verbose raises the package log level; restore it after each test."""
    logger = logging.getLogger("fqsum")
    level = logger.level
    yield
    logger.setLevel(level)
