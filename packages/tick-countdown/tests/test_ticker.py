"""Tests for Ticker - the millisecond clock source."""
from __future__ import annotations

import pytest

from tick_countdown import CountdownManager, Ticker


class FakeClock:
    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now


class TestTicker:
    def test_tick_reports_ms_since_start(self) -> None:
        clock = FakeClock()
        seen: list[int] = []
        ticker = Ticker(seen.append, time_fn=clock)
        ticker.start()

        clock.now += 0.5
        assert ticker.tick() == 500
        clock.now += 1.25
        assert ticker.tick() == 1750
        assert seen == [500, 1750]
        assert ticker.last_ms == 1750

    def test_reported_time_never_decreases(self) -> None:
        clock = FakeClock()
        seen: list[int] = []
        ticker = Ticker(seen.append, time_fn=clock)
        ticker.start()
        clock.now += 2.0
        ticker.tick()
        clock.now -= 1.0
        ticker.tick()
        assert seen == [2000, 2000]

    def test_tick_before_start_raises(self) -> None:
        ticker = Ticker(lambda ms: None, time_fn=FakeClock())
        with pytest.raises(RuntimeError, match="not active"):
            ticker.tick()

    def test_double_start_raises(self) -> None:
        ticker = Ticker(lambda ms: None, time_fn=FakeClock())
        ticker.start()
        with pytest.raises(RuntimeError, match="already started"):
            ticker.start()

    def test_stop_and_restart_resets_origin(self) -> None:
        clock = FakeClock()
        ticker = Ticker(lambda ms: None, time_fn=clock)
        ticker.start()
        clock.now += 3.0
        ticker.tick()
        ticker.stop()
        assert ticker.is_active is False

        ticker.start()
        assert ticker.last_ms == 0
        clock.now += 0.25
        assert ticker.tick() == 250

    def test_drives_countdown_manager(self) -> None:
        clock = FakeClock(0.0)
        manager = CountdownManager(total_seconds=15, danger_zone_seconds=10)
        ticker = Ticker(manager.update, time_fn=clock)
        ticker.start()
        manager.start(ticker.last_ms)

        clock.now = 4.0
        ticker.tick()
        assert manager.status.remaining_seconds == 11
        clock.now = 6.5
        ticker.tick()
        assert manager.status.remaining_seconds == 9
        assert manager.status.is_in_danger_zone is True
