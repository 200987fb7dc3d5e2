from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ._exceptions import WBConfigError
from ._typing import WBResultDict
from ._units import UNIT_LABEL


def _check_count(label: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise WBConfigError(f"{label} must be an integer, got {value!r}")
    if value < 0:
        raise WBConfigError(f"{label} must be >= 0, got {value}")


@dataclass(frozen=True)
class WorkloadSpec:
    """One class of files to write: ``file_count`` files of ``file_size`` bytes."""

    file_size: int
    file_count: int
    prefix: str
    target_dir: Path
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "target_dir", Path(self.target_dir))
        if not self.name:
            object.__setattr__(self, "name", self.prefix.rstrip("_") or "files")

    @property
    def total_bytes(self) -> int:
        return self.file_size * self.file_count

    def path_for(self, index: int) -> Path:
        return self.target_dir / f"{self.prefix}{index}"

    def paths(self) -> list[Path]:
        return [self.path_for(i) for i in range(self.file_count)]

    def validate(self) -> None:
        _check_count("file_size", self.file_size)
        _check_count("file_count", self.file_count)


@dataclass(frozen=True)
class RoundResult:
    index: int
    elapsed: float


@dataclass(frozen=True)
class AggregateResult:
    rounds: int
    total_bytes: int
    seconds_min: float
    seconds_max: float
    seconds_mean: float
    throughput_min: float
    throughput_max: float
    throughput_mean: float

    def as_dict(self, spec: WorkloadSpec) -> WBResultDict:
        return {
            "name": spec.name,
            "file_size": spec.file_size,
            "file_count": spec.file_count,
            "rounds": self.rounds,
            "total_bytes": self.total_bytes,
            "seconds_min": self.seconds_min,
            "seconds_max": self.seconds_max,
            "seconds_mean": self.seconds_mean,
            "throughput_min": self.throughput_min,
            "throughput_max": self.throughput_max,
            "throughput_mean": self.throughput_mean,
            "unit": UNIT_LABEL,
        }
