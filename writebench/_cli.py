from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Callable, TextIO

from ._aggregate import check_round_count
from ._config import BenchConfig
from ._driver import ConsoleReporter, NullReporter, run_benchmark
from ._exceptions import WBError
from ._folder import clean_folder, create_test_folder
from ._sched import configure_scheduling
from ._workload import AggregateResult, WorkloadSpec

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = BenchConfig()
    parser = argparse.ArgumentParser(
        prog="writebench",
        description="Measure filesystem write throughput with small and big files",
    )
    parser.add_argument("-f", "--folder", default=defaults.folder,
                        help="folder to write the test subfolder into")
    parser.add_argument("-s", "--small-size", type=int, default=defaults.small_size,
                        help="small files size in bytes")
    parser.add_argument("-S", "--small-count", type=int, default=defaults.small_count,
                        help="small files amount")
    parser.add_argument("-b", "--big-size", type=int, default=defaults.big_size,
                        help="big files size in bytes")
    parser.add_argument("-B", "--big-count", type=int, default=defaults.big_count,
                        help="big files amount")
    parser.add_argument("-m", "--rounds", type=int, default=defaults.rounds,
                        help="number of rounds per workload")
    parser.add_argument("-p", "--cpu", type=int, default=defaults.cpu,
                        help="CPU to pin the process to")
    parser.add_argument("--priority", type=int, default=defaults.priority,
                        help="SCHED_FIFO priority")
    parser.add_argument("-d", "--show-deletion", action="store_true",
                        help="log every deleted file")
    parser.add_argument("--fsync", action="store_true",
                        help="fsync each file before closing it")
    parser.add_argument("-y", "--yes", dest="assume_yes", action="store_true",
                        help="delete the test folder without asking")
    parser.add_argument("--keep", action="store_true",
                        help="leave the test folder on disk")
    parser.add_argument("--json", action="store_true",
                        help="print results as JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def config_from_args(args: argparse.Namespace) -> BenchConfig:
    return BenchConfig(
        folder=args.folder,
        small_size=args.small_size,
        small_count=args.small_count,
        big_size=args.big_size,
        big_count=args.big_count,
        rounds=args.rounds,
        cpu=args.cpu,
        priority=args.priority,
        show_deletion=args.show_deletion,
        fsync=args.fsync,
        assume_yes=args.assume_yes,
        keep=args.keep,
        json=args.json,
    )


def ask_delete(folder: Path, stream: TextIO | None = None) -> bool:
    print(
        f"\nDo you want to delete the folder {folder} (and its files) ? [y/n] : ",
        end="", file=sys.stdout if stream is None else stream, flush=True,
    )
    try:
        answer = input()
    except EOFError:
        return False
    return answer.strip().lower().startswith("y")


def _always_yes(folder: Path) -> bool:
    return True


def _ask_on_stderr(folder: Path) -> bool:
    return ask_delete(folder, sys.stderr)


def _json_value(v: object) -> object:
    # JSON has no Infinity
    if isinstance(v, float) and not math.isfinite(v):
        return None
    return v


def results_json(results: list[tuple[WorkloadSpec, AggregateResult]]) -> str:
    return json.dumps(
        [
            {k: _json_value(v) for k, v in result.as_dict(spec).items()}
            for spec, result in results
        ],
        indent=2,
    )


def _confirm_for(config: BenchConfig) -> Callable[[Path], bool]:
    if config.assume_yes:
        return _always_yes
    # stdout carries only the JSON document
    return _ask_on_stderr if config.json else ask_delete


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    config = config_from_args(args)

    try:
        check_round_count(config.rounds)
        workloads = config.workloads()
        for spec in workloads:
            spec.validate()
    except WBError as exc:
        logger.error("%s", exc)
        return 1

    if not config.json:
        for line in config.describe():
            print(line)
    status = configure_scheduling(config.cpu, config.priority)
    if not config.json:
        print(f"Set affinity            : {status.affinity}")
        print(f"Set scheduler           : {status.scheduler}")

    try:
        sub = create_test_folder(config.folder)
    except WBError as exc:
        logger.error("%s", exc)
        return 1

    rc = 0
    try:
        reporter = NullReporter() if config.json else ConsoleReporter()
        results = run_benchmark(workloads, config.rounds, reporter=reporter, fsync=config.fsync)
        if config.json:
            print(results_json(results))
    except WBError as exc:
        logger.error("benchmark aborted: %s", exc)
        rc = 1
    finally:
        if not config.keep:
            clean_folder(
                sub,
                show_deletion=config.show_deletion,
                confirm=_confirm_for(config),
            )
    return rc
