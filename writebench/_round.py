from __future__ import annotations

import logging
import os
import time

from ._exceptions import WBConfigError, WBPayloadError, WBWriteError
from ._workload import RoundResult, WorkloadSpec

logger = logging.getLogger(__name__)


def allocate_payload(size: int) -> bytes:
    """Return a zero-filled buffer of ``size`` bytes shared by every write."""
    try:
        return bytes(size)
    except (MemoryError, OverflowError) as exc:
        raise WBPayloadError(size) from exc


def timed_write_round(
    spec: WorkloadSpec,
    payload: bytes | None = None,
    *,
    index: int = 0,
    fsync: bool = False,
) -> RoundResult:
    """Write ``spec.file_count`` files of ``spec.file_size`` bytes and time the batch.

    The clock starts right before the first file is opened and stops right
    after the last one is closed. Any I/O failure aborts the round with
    :class:`WBWriteError`; files written before the failure stay on disk.
    """
    spec.validate()
    if payload is None:
        payload = allocate_payload(spec.file_size)
    elif len(payload) != spec.file_size:
        raise WBConfigError(
            f"payload is {len(payload)} bytes, workload expects {spec.file_size}"
        )

    start = time.perf_counter()
    for file_index in range(spec.file_count):
        path = spec.path_for(file_index)
        try:
            with open(path, "wb") as f:
                f.write(payload)
                if fsync:
                    f.flush()
                    os.fsync(f.fileno())
        except OSError as exc:
            raise WBWriteError(path, exc) from exc
    elapsed = time.perf_counter() - start

    logger.debug(
        "round %d: wrote %d x %d bytes to %s in %.6f s",
        index, spec.file_count, spec.file_size, spec.target_dir, elapsed,
    )
    return RoundResult(index=index, elapsed=elapsed)
