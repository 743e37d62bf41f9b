import pytest

from asteroid_arena.scheduler import Scheduler


def test_every_fires_once_per_interval():
    scheduler = Scheduler()
    calls = []
    scheduler.every(1000, lambda: calls.append(scheduler.now))

    assert scheduler.advance(999) == 0
    assert scheduler.advance(1) == 1
    assert scheduler.advance(3000) == 3
    assert calls == [1000, 2000, 3000, 4000]
    assert scheduler.now == 4000


def test_after_fires_once():
    scheduler = Scheduler()
    calls = []
    scheduler.after(500, lambda: calls.append("done"))
    scheduler.advance(10_000)
    scheduler.advance(10_000)
    assert calls == ["done"]
    assert scheduler.tasks == []


def test_cancelled_task_never_runs():
    scheduler = Scheduler()
    calls = []
    task = scheduler.every(100, lambda: calls.append(1))
    task.cancel()
    task.cancel()
    scheduler.advance(1000)
    assert calls == []


def test_cancel_after_firing_is_harmless():
    scheduler = Scheduler()
    task = scheduler.after(10, lambda: None)
    scheduler.advance(20)
    task.cancel()
    assert scheduler.advance(20) == 0


def test_due_order_then_registration_order():
    scheduler = Scheduler()
    order = []
    scheduler.every(300, lambda: order.append("slow"))
    scheduler.every(100, lambda: order.append("fast"))
    scheduler.after(300, lambda: order.append("once"))
    scheduler.advance(300)
    assert order == ["fast", "fast", "slow", "fast", "once"]


def test_callback_can_schedule_and_cancel():
    scheduler = Scheduler()
    order = []
    ticker = scheduler.every(100, lambda: order.append("tick"))

    def stop():
        order.append("stop")
        ticker.cancel()
        scheduler.after(0, lambda: order.append("after-stop"))

    scheduler.after(250, stop)
    scheduler.advance(1000)
    assert order == ["tick", "tick", "stop", "after-stop"]


def test_negative_elapsed_does_not_rewind():
    scheduler = Scheduler()
    scheduler.advance(50)
    scheduler.advance(-20)
    assert scheduler.now == 50


def test_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        Scheduler().every(0, lambda: None)

