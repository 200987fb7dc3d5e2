from __future__ import annotations

import logging
import math
from typing import Callable

from ._exceptions import WBConfigError
from ._round import allocate_payload, timed_write_round
from ._units import throughput
from ._workload import AggregateResult, RoundResult, WorkloadSpec

logger = logging.getLogger(__name__)

RoundCallback = Callable[[RoundResult, float], None]


class RunningStats:
    """Running count, sum and extrema of round times."""

    def __init__(self) -> None:
        self._count: int = 0
        self._total: float = 0.0
        self._min: float = math.inf
        self._max: float = 0.0

    def add(self, elapsed: float) -> None:
        if elapsed < 0.0:
            raise ValueError(f"elapsed time must be >= 0, got {elapsed}")
        self._count += 1
        self._total += elapsed
        if elapsed < self._min:
            self._min = elapsed
        if elapsed > self._max:
            self._max = elapsed

    @property
    def count(self) -> int:
        return self._count

    @property
    def total(self) -> float:
        return self._total

    @property
    def minimum(self) -> float:
        return self._min

    @property
    def maximum(self) -> float:
        return self._max

    def finalize(self, total_bytes: int) -> AggregateResult:
        if self._count == 0:
            raise WBConfigError("cannot summarize zero rounds")
        # Summing identical floats can drift past the extrema.
        mean = min(max(self._total / self._count, self._min), self._max)
        return AggregateResult(
            rounds=self._count,
            total_bytes=total_bytes,
            seconds_min=self._min,
            seconds_max=self._max,
            seconds_mean=mean,
            # fastest round gives the highest rate
            throughput_min=throughput(total_bytes, self._max),
            throughput_max=throughput(total_bytes, self._min),
            throughput_mean=throughput(total_bytes, mean),
        )


def check_round_count(round_count: object) -> None:
    if isinstance(round_count, bool) or not isinstance(round_count, int):
        raise WBConfigError(f"round count must be an integer, got {round_count!r}")
    if round_count < 1:
        raise WBConfigError(f"round count must be >= 1, got {round_count}")


def aggregate(
    spec: WorkloadSpec,
    round_count: int,
    *,
    on_round: RoundCallback | None = None,
    fsync: bool = False,
) -> AggregateResult:
    """Run ``round_count`` timed rounds of ``spec`` and summarize them.

    Every round rewrites the same file names. ``on_round`` receives each
    :class:`RoundResult` together with its throughput as soon as it completes.
    """
    check_round_count(round_count)
    spec.validate()
    payload = allocate_payload(spec.file_size)
    total_bytes = spec.total_bytes

    stats = RunningStats()
    for round_index in range(round_count):
        result = timed_write_round(spec, payload, index=round_index, fsync=fsync)
        stats.add(result.elapsed)
        if on_round is not None:
            on_round(result, throughput(total_bytes, result.elapsed))

    summary = stats.finalize(total_bytes)
    logger.debug(
        "%s: %d rounds, mean %.6f s", spec.name, summary.rounds, summary.seconds_mean
    )
    return summary
