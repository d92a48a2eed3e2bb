from neonraid.scheduler import EventScheduler


def test_callback_runs_when_due():
    scheduler = EventScheduler()
    calls = []
    scheduler.schedule(100, lambda: calls.append("a"))

    assert scheduler.advance(99) == 0
    assert calls == []
    assert scheduler.advance(1) == 1
    assert calls == ["a"]
    assert len(scheduler) == 0


def test_due_order_then_schedule_order():
    scheduler = EventScheduler()
    calls = []
    scheduler.schedule(50, lambda: calls.append("late"))
    scheduler.schedule(10, lambda: calls.append("first"))
    scheduler.schedule(10, lambda: calls.append("second"))

    scheduler.advance(100)

    assert calls == ["first", "second", "late"]


def test_delay_is_relative_to_current_time():
    scheduler = EventScheduler()
    scheduler.advance(1000)
    assert scheduler.schedule(250, lambda: None) == 1250


def test_clear_discards_pending():
    scheduler = EventScheduler()
    calls = []
    scheduler.schedule(10, lambda: calls.append("x"))
    scheduler.clear()
    scheduler.advance(100)
    assert calls == []
