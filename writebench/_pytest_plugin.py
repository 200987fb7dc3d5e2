"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["writebench._pytest_plugin"]

This makes the ``bench_dir`` and ``workload_factory`` fixtures available::

    def test_something(workload_factory):
        spec = workload_factory(file_size=16, file_count=3)
        timed_write_round(spec)
"""
from pathlib import Path

import pytest

from ._workload import WorkloadSpec


@pytest.fixture
def bench_dir(tmp_path: Path) -> Path:
    """An empty, existing directory for benchmark files (function scope)."""
    d = tmp_path / "bench"
    d.mkdir()
    return d


@pytest.fixture
def workload_factory(bench_dir: Path):
    """Build :class:`WorkloadSpec` objects that target ``bench_dir`` by default."""
    def make(
        file_size: int = 128,
        file_count: int = 4,
        prefix: str = "small_",
        target_dir: Path | None = None,
    ) -> WorkloadSpec:
        return WorkloadSpec(
            file_size=file_size,
            file_count=file_count,
            prefix=prefix,
            target_dir=target_dir if target_dir is not None else bench_dir,
        )
    return make
