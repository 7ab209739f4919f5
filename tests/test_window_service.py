import pytest

pytest.importorskip("glfw")

from spotzoom.services.window_service import FrameClock


class ManualClock:
    def __init__(self):
        self.now = 10.0

    def __call__(self):
        return self.now


def test_first_tick_has_no_duration():
    clock = FrameClock(ManualClock())
    assert clock.tick() == 0.0
    assert clock.fps == 0


def test_dt_is_previous_frame_duration():
    manual = ManualClock()
    clock = FrameClock(manual)
    clock.tick()
    manual.now += 0.02
    assert clock.tick() == pytest.approx(0.02)
    assert clock.fps == 50


def test_fps_is_averaged():
    manual = ManualClock()
    clock = FrameClock(manual, window=4)
    clock.tick()
    for duration in (1 / 40, 1 / 120, 1 / 60, 1 / 60):
        manual.now += duration
        clock.tick()
    assert clock.fps == 60


def test_clock_going_backwards_is_ignored():
    manual = ManualClock()
    clock = FrameClock(manual)
    clock.tick()
    manual.now -= 1.0
    assert clock.tick() == 0.0
