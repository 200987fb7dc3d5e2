"""Pin the benchmark to one CPU and ask for real-time FIFO scheduling.

Both steps are best effort: they usually need elevated privileges and are
Linux-only, so a failure is logged and the run continues.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchedulingStatus:
    affinity: int
    scheduler: int


def set_affinity(cpu: int) -> int:
    setaffinity = getattr(os, "sched_setaffinity", None)
    if setaffinity is None:
        logger.warning("CPU affinity is not supported on this platform")
        return -1
    try:
        setaffinity(0, {cpu})
    except (OSError, ValueError, OverflowError) as exc:
        logger.warning("cannot pin process to CPU %d: %s", cpu, exc)
        return -1
    return 0


def set_fifo_scheduler(priority: int) -> int:
    setscheduler = getattr(os, "sched_setscheduler", None)
    if setscheduler is None:
        logger.warning("real-time scheduling is not supported on this platform")
        return -1
    try:
        setscheduler(0, os.SCHED_FIFO, os.sched_param(priority))
    except (OSError, ValueError, OverflowError) as exc:
        logger.warning("cannot switch to SCHED_FIFO priority %d: %s", priority, exc)
        return -1
    return 0


def configure_scheduling(cpu: int, priority: int = 50) -> SchedulingStatus:
    return SchedulingStatus(
        affinity=set_affinity(cpu),
        scheduler=set_fifo_scheduler(priority),
    )
