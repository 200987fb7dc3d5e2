"""Throughput unit conversion and number formatting.

Throughput is reported in decimal megabytes per second: bytes / 1,000,000 / s.
"""
import math

UNIT_DIVISOR = 1_000_000
UNIT_LABEL = "MB/s"


def throughput(total_bytes: int, seconds: float) -> float:
    """Return ``total_bytes`` written in ``seconds`` as MB/s.

    A zero-length interval yields ``0.0`` for an empty workload and ``inf``
    otherwise, so the ordering between throughput figures is preserved.
    """
    if seconds <= 0.0:
        return 0.0 if total_bytes == 0 else math.inf
    return total_bytes / seconds / UNIT_DIVISOR


def fmt_seconds(seconds: float) -> str:
    return f"{seconds:.6f} s"


def fmt_rate(rate: float) -> str:
    if math.isinf(rate):
        return f"inf {UNIT_LABEL}"
    return f"{rate:.3f} {UNIT_LABEL}"


def size_label(b: int) -> str:
    if b < 1024:
        return f"{b}B"
    if b < 1024 * 1024:
        return f"{b // 1024}KB"
    if b < 1024 * 1024 * 1024:
        return f"{b // (1024 * 1024)}MB"
    return f"{b / (1024 * 1024 * 1024):.0f}GB"
