"""Parametric write sweep: vary file size and file count."""
from __future__ import annotations

import argparse
import tempfile
from datetime import datetime
from pathlib import Path

from writebench import WorkloadSpec, aggregate, clean_folder
from writebench._units import size_label


def _fmt(v: float) -> str:
    if v >= 1000:
        return f"{v:,.0f}"
    return f"{v:.2f}"


def _row(root: Path, size: int, count: int, rounds: int, fsync: bool) -> str:
    target = Path(tempfile.mkdtemp(prefix="sweep_", dir=root))
    spec = WorkloadSpec(file_size=size, file_count=count, prefix="f_", target_dir=target)
    try:
        r = aggregate(spec, rounds, fsync=fsync)
    finally:
        clean_folder(target)
    return (
        f"| {size_label(size)} | {count:,} | {_fmt(r.seconds_min * 1000)} "
        f"| {_fmt(r.seconds_mean * 1000)} | {_fmt(r.seconds_max * 1000)} "
        f"| {_fmt(r.throughput_min)} | {_fmt(r.throughput_mean)} | {_fmt(r.throughput_max)} |"
    )


def run_sweep(root: Path, rounds: int, fsync: bool = False) -> str:
    lines: list[str] = []
    header = (
        "| Size | Count | min ms | avg ms | max ms | min MB/s | avg MB/s | max MB/s |"
    )
    sep = "|---:|---:|---:|---:|---:|---:|---:|---:|"

    # === 1. File size sweep ===
    total = 64 * 1024 * 1024  # 64MB per round
    sizes = [
        4 * 1024,            # 4KB
        64 * 1024,           # 64KB
        1024 * 1024,         # 1MB
        16 * 1024 * 1024,    # 16MB
        64 * 1024 * 1024,    # 64MB
    ]

    lines.append("## 1. Write by file size")
    lines.append("")
    lines.append(f"total = 64MB per round, rounds = {rounds}")
    lines.append("")
    lines.append(header)
    lines.append(sep)
    for sz in sizes:
        print(f"  size {size_label(sz)} ...", end=" ", flush=True)
        lines.append(_row(root, sz, total // sz, rounds, fsync))
        print("done")
    lines.append("")

    # === 2. File count sweep ===
    counts = [10, 100, 1000, 5000, 10000]
    fsize = 4096  # 4KB per file

    lines.append("## 2. Write by file count")
    lines.append("")
    lines.append(f"file_size = 4KB, rounds = {rounds}")
    lines.append("")
    lines.append(header)
    lines.append(sep)
    for cnt in counts:
        print(f"  count {cnt} ...", end=" ", flush=True)
        lines.append(_row(root, fsize, cnt, rounds, fsync))
        print("done")
    lines.append("")
    return "\n".join(lines)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Sweep write throughput over file size and count")
    parser.add_argument("-f", "--folder", default=".")
    parser.add_argument("-m", "--rounds", type=int, default=3)
    parser.add_argument("--fsync", action="store_true")
    args = parser.parse_args()

    print("=== Parametric Write Sweep ===\n")
    result = run_sweep(Path(args.folder), args.rounds, args.fsync)
    print("\n" + result)

    out_dir = Path("benchmarks") / "results"
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_path = out_dir / f"parametric_sweep_{ts}.md"
    out_path.write_text(f"# Parametric Write Sweep\n\n{result}", encoding="utf-8")
    print(f"\nSaved: {out_path}")
