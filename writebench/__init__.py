from ._aggregate import RunningStats, aggregate
from ._config import BenchConfig
from ._driver import ConsoleReporter, NullReporter, format_summary, run_benchmark
from ._exceptions import WBConfigError, WBError, WBPayloadError, WBWriteError
from ._folder import clean_folder, create_test_folder
from ._round import allocate_payload, timed_write_round
from ._sched import SchedulingStatus, configure_scheduling
from ._typing import WBResultDict
from ._units import UNIT_DIVISOR, UNIT_LABEL, throughput
from ._workload import AggregateResult, RoundResult, WorkloadSpec

__all__ = [
    "WorkloadSpec",
    "RoundResult",
    "AggregateResult",
    "RunningStats",
    "BenchConfig",
    "timed_write_round",
    "allocate_payload",
    "aggregate",
    "run_benchmark",
    "format_summary",
    "ConsoleReporter",
    "NullReporter",
    "create_test_folder",
    "clean_folder",
    "configure_scheduling",
    "SchedulingStatus",
    "throughput",
    "UNIT_DIVISOR",
    "UNIT_LABEL",
    "WBError",
    "WBConfigError",
    "WBWriteError",
    "WBPayloadError",
    "WBResultDict",
]
__version__ = "0.1.0"
