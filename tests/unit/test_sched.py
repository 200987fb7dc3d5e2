import os

import pytest

from writebench import SchedulingStatus, configure_scheduling
from writebench import _sched

needs_sched = pytest.mark.skipif(
    not hasattr(os, "sched_param"), reason="POSIX scheduling API not available"
)


def test_affinity_success(monkeypatch):
    calls = []
    monkeypatch.setattr(os, "sched_setaffinity", lambda pid, cpus: calls.append((pid, cpus)), raising=False)
    assert _sched.set_affinity(3) == 0
    assert calls == [(0, {3})]


def test_affinity_failure_is_reported(monkeypatch, caplog):
    def deny(pid, cpus):
        raise OSError(22, "Invalid argument")

    monkeypatch.setattr(os, "sched_setaffinity", deny, raising=False)
    assert _sched.set_affinity(999) == -1
    assert "CPU 999" in caplog.text


def test_affinity_unsupported(monkeypatch):
    monkeypatch.delattr(os, "sched_setaffinity", raising=False)
    assert _sched.set_affinity(0) == -1


@needs_sched
def test_scheduler_success(monkeypatch):
    calls = []
    monkeypatch.setattr(os, "sched_setscheduler", lambda pid, policy, param: calls.append((pid, policy, param.sched_priority)))
    assert _sched.set_fifo_scheduler(50) == 0
    assert calls == [(0, os.SCHED_FIFO, 50)]


@needs_sched
def test_scheduler_permission_denied(monkeypatch):
    def deny(pid, policy, param):
        raise PermissionError(1, "Operation not permitted")

    monkeypatch.setattr(os, "sched_setscheduler", deny)
    assert _sched.set_fifo_scheduler(50) == -1


def test_scheduler_unsupported(monkeypatch):
    monkeypatch.delattr(os, "sched_setscheduler", raising=False)
    assert _sched.set_fifo_scheduler(50) == -1


def test_configure_scheduling_combines_steps(monkeypatch):
    monkeypatch.setattr(_sched, "set_affinity", lambda cpu: 0)
    monkeypatch.setattr(_sched, "set_fifo_scheduler", lambda priority: -1)
    assert configure_scheduling(1, 10) == SchedulingStatus(affinity=0, scheduler=-1)


def test_affinity_out_of_range_cpu(monkeypatch):
    def too_large(pid, cpus):
        raise OverflowError("CPU number too large")

    monkeypatch.setattr(os, "sched_setaffinity", too_large, raising=False)
    assert _sched.set_affinity(2**40) == -1


@needs_sched
def test_scheduler_out_of_range_priority(monkeypatch):
    def too_large(pid, policy, param):
        raise OverflowError("signed integer is greater than maximum")

    monkeypatch.setattr(os, "sched_setscheduler", too_large)
    assert _sched.set_fifo_scheduler(2**40) == -1
