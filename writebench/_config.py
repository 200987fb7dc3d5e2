from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ._workload import WorkloadSpec

SUB_FOLDER = "TEST_FOLDER"
SMALL_PREFIX = "small_"
BIG_PREFIX = "big_"


@dataclass(frozen=True)
class BenchConfig:
    folder: str = "./"
    small_size: int = 1024
    small_count: int = 1000
    big_size: int = 1024000
    big_count: int = 1
    rounds: int = 1
    cpu: int = 0
    priority: int = 50
    show_deletion: bool = False
    fsync: bool = False
    assume_yes: bool = False
    keep: bool = False
    json: bool = False

    @property
    def subfolder(self) -> Path:
        return Path(self.folder) / SUB_FOLDER

    def workloads(self) -> list[WorkloadSpec]:
        return [
            WorkloadSpec(
                file_size=self.small_size,
                file_count=self.small_count,
                prefix=SMALL_PREFIX,
                target_dir=self.subfolder,
                name="small files",
            ),
            WorkloadSpec(
                file_size=self.big_size,
                file_count=self.big_count,
                prefix=BIG_PREFIX,
                target_dir=self.subfolder,
                name="big files",
            ),
        ]

    def describe(self) -> list[str]:
        return [
            f"Path                    : {self.folder}",
            f"Small files size (Bytes): {self.small_size}",
            f"Small files amount      : {self.small_count}",
            f"Big files size (Bytes)  : {self.big_size}",
            f"Big files amount        : {self.big_count}",
            f"Number of runs          : {self.rounds}",
            f"CPU                     : {self.cpu}",
            f"Task priority           : {self.priority}",
            f"Sync each file          : {'enabled' if self.fsync else 'disabled'}",
            f"Show deleted files      : {'enabled' if self.show_deletion else 'disabled'}",
        ]
