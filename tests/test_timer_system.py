"""Tests for frame-driven one-shot timers."""

from systems.timer_system import OneShotTimer, TimerService


def test_fires_once_after_duration():
    timer = OneShotTimer()
    fired = []
    timer.start_once(0.5, lambda: fired.append(True))
    timer.update(0.25)
    assert fired == [] and timer.is_running()
    timer.update(0.25)
    assert fired == [True]
    assert not timer.is_running()
    timer.update(1.0)
    assert fired == [True]


def test_callback_can_rearm():
    timer = OneShotTimer()
    count = []

    def again():
        count.append(1)
        if len(count) < 3:
            timer.start_once(0.1, again)

    timer.start_once(0.1, again)
    for _ in range(10):
        timer.update(0.1)
    assert len(count) == 3
    assert not timer.is_running()


def test_stop_cancels():
    timer = OneShotTimer()
    fired = []
    timer.start_once(0.1, lambda: fired.append(True))
    timer.stop()
    timer.update(1.0)
    assert fired == []


def test_negative_duration_fires_next_update():
    timer = OneShotTimer()
    fired = []
    timer.start_once(-2.0, lambda: fired.append(True))
    assert timer.duration == 0.0
    timer.update(0.0)
    assert fired == [True]


def test_service_ticks_all_timers():
    service = TimerService()
    a, b = service.create("a"), service.create("b")
    fired = []
    a.start_once(0.1, lambda: fired.append("a"))
    b.start_once(0.3, lambda: fired.append("b"))
    for _ in range(4):
        service.update(0.1)
    assert fired == ["a", "b"]
    service.remove(a)
    assert len(service) == 1
