import pytest

from mapo.timer import Resolution, Timer


class FakeClock:
    def __init__(self, now=10.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def test_idle_timer_reads_zero():
    clock = FakeClock()
    timer = Timer(clock)
    clock.advance(4.0)
    assert not timer.is_running
    assert timer.elapsed() == 0.0
    assert timer.stop() == 0.0


def test_start_and_elapsed():
    clock = FakeClock()
    timer = Timer(clock)
    timer.start()
    assert timer.is_running
    clock.advance(2.5)
    assert timer.elapsed() == pytest.approx(2.5)


def test_stop_returns_duration_and_stops():
    clock = FakeClock()
    timer = Timer(clock)
    timer.start()
    clock.advance(1.75)
    assert timer.stop() == pytest.approx(1.75)
    assert not timer.is_running
    assert timer.stop() == 0.0


def test_second_start_keeps_original_start_time():
    clock = FakeClock()
    timer = Timer(clock)
    timer.start()
    clock.advance(1.0)
    timer.start()
    clock.advance(1.0)
    assert timer.elapsed() == pytest.approx(2.0)


def test_restart_after_stop_measures_fresh():
    clock = FakeClock()
    timer = Timer(clock)
    timer.start()
    clock.advance(5.0)
    timer.stop()
    clock.advance(3.0)
    timer.start()
    clock.advance(0.5)
    assert timer.elapsed() == pytest.approx(0.5)


def test_tick_measures_since_previous_tick():
    clock = FakeClock()
    timer = Timer(clock)
    clock.advance(3.0)
    assert timer.tick() == pytest.approx(3.0)
    assert timer.tick() == 0.0
    clock.advance(0.25)
    assert timer.tick() == pytest.approx(0.25)


def test_tick_works_without_start():
    clock = FakeClock()
    timer = Timer(clock)
    clock.advance(1.0)
    timer.tick()
    assert not timer.is_running


def test_millisecond_resolution():
    clock = FakeClock()
    timer = Timer(clock)
    timer.start()
    clock.advance(2.5)
    assert timer.elapsed(Resolution.MILLISECONDS) == pytest.approx(2500.0)


def test_finer_resolutions_give_larger_readings():
    clock = FakeClock()
    timer = Timer(clock)
    timer.start()
    clock.advance(1.0)
    readings = [timer.elapsed(r) for r in Resolution]
    assert readings == sorted(readings)
    assert readings[0] == pytest.approx(1.0)


def test_real_clock_is_monotonic():
    timer = Timer()
    timer.start()
    assert timer.elapsed() >= 0.0