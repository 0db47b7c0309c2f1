"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for order-independent FASTQ checksumming.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Union, Callable, Tuple
from enum import Enum

from fqsum.core.errors import ConfigurationError


# =============================
# Enums
# =============================

class MateSlot(Enum):
    """
    Logical position of a record inside a read pair.
    Unpaired records hash exactly like first mates.
    """
    NONE = "none"
    FIRST = "first"
    SECOND = "second"

    @property
    def tag(self) -> bytes:
        """Mate tag appended to the canonical identifier."""
        return b"/2" if self is MateSlot.SECOND else b"/1"

    def __repr__(self) -> str:
        return self.value


class HashAlgorithmName(Enum):
    """
    Digest algorithm applied to every canonical record.
    MD5 is the default and keeps checksums comparable with older runs.
    """
    MD5 = "md5"
    XXH128 = "xxh128"

    @property
    def display_name(self) -> str:
        """Human-readable name for help and summaries."""
        mapping = {
            HashAlgorithmName.MD5: "MD5",
            HashAlgorithmName.XXH128: "XXH3-128",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FastqRecord:
    """One FASTQ record as read from disk. Consumed immediately, never stored."""
    identifier: bytes
    sequence: bytes
    quality: bytes

    def __post_init__(self):
        for key in ("identifier", "sequence", "quality"):
            if not isinstance(getattr(self, key), bytes):
                raise ValueError(f"Field '{key}' must be bytes")

    def __repr__(self):
        return f"<FastqRecord id={self.identifier!r}, length={len(self.sequence)}>"


@dataclass(frozen=True)
class Digest:
    """
    128-bit digest split into two 64-bit halves.
    Only `low` takes part in accumulation.
    """
    low: int
    high: int

    @classmethod
    def from_bytes(cls, raw: bytes) -> "Digest":
        if len(raw) != 16:
            raise ValueError(f"Digest must be 16 bytes, got {len(raw)}")
        return cls(
            low=int.from_bytes(raw[:8], "little"),
            high=int.from_bytes(raw[8:], "little"),
        )

    @property
    def low_hex(self) -> str:
        return format(self.low, "x")


@dataclass(frozen=True)
class AccumulatorState:
    """Running modular sum of digest low halves and the number of folded records."""
    sum: int = 0
    count: int = 0

    @property
    def sum_hex(self) -> str:
        return format(self.sum, "x")


@dataclass
class ChecksumStats:
    """
    Statistics collected during a checksum run, one entry per input group
    (a single file, or a mate pair of files).
    """
    def __init__(self):
        self.total_time: float = 0.0
        self.group_stats: Dict[str, Dict[str, Union[int, float]]] = {}
        self._listeners: List[Callable[[str, Dict], None]] = []

    def add_listener(self, listener: Callable[[str, Dict], None]):
        """Adds a listener to receive updates when stats are updated."""
        self._listeners.append(listener)

    def update_group(self, group_name: str, records: int, duration: float) -> None:
        if group_name not in self.group_stats:
            self.group_stats[group_name] = {"records": 0, "time": 0.0}
        self.group_stats[group_name]["records"] += records
        self.group_stats[group_name]["time"] += duration

        for listener in self._listeners:
            listener(group_name, self.group_stats[group_name])

    @property
    def total_records(self) -> int:
        return sum(int(data["records"]) for data in self.group_stats.values())

    def print_summary(self) -> str:
        lines = [
            "📊 Checksum Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            "Input: RECORDS / TIME",
        ]
        for group, data in self.group_stats.items():
            lines.append(f"{group}: {data['records']} / {data['time']:.3f}s")
        return "\n".join(lines)


@dataclass(frozen=True)
class ChecksumResult:
    """Outcome of a run. `state` is None in debug mode (no aggregate is produced)."""
    state: Union[AccumulatorState, None]
    records: int
    stats: ChecksumStats = field(compare=False, default_factory=ChecksumStats)


"""
DTO for checksum parameters with built-in validation.
Interface-agnostic: used by the CLI and by library callers.
"""

ALLOWED_EXTENSIONS: Tuple[str, ...] = (".fq", ".fq.gz", ".fastq", ".fastq.gz")


@dataclass(frozen=True)
class ChecksumParams:
    """Immutable run configuration."""
    input_files: Tuple[str, ...]
    paired: bool = True
    include_read_names: bool = True
    include_quality: bool = True
    debug: bool = False
    algorithm: HashAlgorithmName = HashAlgorithmName.MD5

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        # Lists are accepted for convenience and frozen into a tuple
        object.__setattr__(self, "input_files", tuple(str(p) for p in self.input_files))

        if not self.input_files:
            raise ConfigurationError("At least one input file is required")

        for path in self.input_files:
            if not has_allowed_extension(path):
                raise ConfigurationError(
                    f"Unsupported file extension: {path} "
                    f"(expected one of {', '.join(e.lstrip('.') for e in ALLOWED_EXTENSIONS)})"
                )

        if self.paired and len(self.input_files) % 2 != 0:
            raise ConfigurationError(
                "Running with paired end mode, but supplied an odd number of input files: "
                + " ".join(self.input_files)
            )

    @property
    def groups(self) -> List[Tuple[str, ...]]:
        """Input files split into processing groups: mate pairs, or single files."""
        step = 2 if self.paired else 1
        return [self.input_files[i:i + step] for i in range(0, len(self.input_files), step)]


def has_allowed_extension(path: str) -> bool:
    return str(path).lower().endswith(ALLOWED_EXTENSIONS)
