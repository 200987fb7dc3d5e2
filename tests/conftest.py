import pytest


class FakeClock:
    """Stands in for the ``time`` module; returns preset ``perf_counter`` readings."""

    def __init__(self, elapsed: list[float]) -> None:
        ticks: list[float] = []
        now = 100.0
        for e in elapsed:
            ticks.append(now)
            now += e
            ticks.append(now)
            now += 1.0
        self._ticks = iter(ticks)

    def perf_counter(self) -> float:
        return next(self._ticks)


@pytest.fixture
def fake_clock(monkeypatch):
    """Install a :class:`FakeClock` in the round module; call with round durations."""
    from writebench import _round

    def install(elapsed: list[float]) -> FakeClock:
        clock = FakeClock(elapsed)
        monkeypatch.setattr(_round, "time", clock)
        return clock
    return install
