from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from ._aggregate import aggregate, check_round_count
from ._units import fmt_rate, fmt_seconds, size_label
from ._workload import AggregateResult, RoundResult, WorkloadSpec


class NullReporter:
    def start(self, spec: WorkloadSpec) -> None:
        pass

    def round(self, result: RoundResult, rate: float) -> None:
        pass

    def summary(self, spec: WorkloadSpec, result: AggregateResult) -> None:
        pass


class ConsoleReporter(NullReporter):
    """Print one line per round and one summary line per workload class."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _print(self, line: str) -> None:
        stream = sys.stdout if self._stream is None else self._stream
        print(line, file=stream, flush=True)

    def start(self, spec: WorkloadSpec) -> None:
        self._print(
            f"\nWriting {spec.name} ({spec.file_count} x {size_label(spec.file_size)})..."
        )

    def round(self, result: RoundResult, rate: float) -> None:
        self._print(
            f"  round {result.index + 1}: {fmt_seconds(result.elapsed)}, {fmt_rate(rate)}"
        )

    def summary(self, spec: WorkloadSpec, result: AggregateResult) -> None:
        self._print(format_summary(spec, result))


def format_summary(spec: WorkloadSpec, result: AggregateResult) -> str:
    return (
        f"{spec.name}: min {fmt_seconds(result.seconds_min)}"
        f" / avg {fmt_seconds(result.seconds_mean)}"
        f" / max {fmt_seconds(result.seconds_max)}"
        f" | min {fmt_rate(result.throughput_min)}"
        f" / avg {fmt_rate(result.throughput_mean)}"
        f" / max {fmt_rate(result.throughput_max)}"
    )


def run_benchmark(
    specs: Iterable[WorkloadSpec],
    round_count: int,
    *,
    reporter: NullReporter | None = None,
    fsync: bool = False,
) -> list[tuple[WorkloadSpec, AggregateResult]]:
    """Aggregate each workload class in order, one after the other."""
    check_round_count(round_count)
    specs = list(specs)
    for spec in specs:
        spec.validate()
    if reporter is None:
        reporter = ConsoleReporter()
    results: list[tuple[WorkloadSpec, AggregateResult]] = []
    for spec in specs:
        reporter.start(spec)
        result = aggregate(spec, round_count, on_round=reporter.round, fsync=fsync)
        reporter.summary(spec, result)
        results.append((spec, result))
    return results
