from engine.sched.timers import TimerQueue


def test_call_later_fires_once_at_due_time():
    t = TimerQueue()
    fired = []
    t.call_later(100, lambda: fired.append(t.now_ms))
    t.advance(99)
    assert fired == []
    t.advance(1)
    assert fired == [100]
    t.advance(1000)
    assert fired == [100]


def test_callbacks_run_in_due_order_with_clock_at_due_time():
    t = TimerQueue()
    order = []
    t.call_later(300, lambda: order.append(("c", t.now_ms)))
    t.call_later(100, lambda: order.append(("a", t.now_ms)))
    t.call_later(100, lambda: order.append(("b", t.now_ms)))
    t.advance(500)
    assert order == [("a", 100), ("b", 100), ("c", 300)]
    assert t.now_ms == 500


def test_timer_armed_inside_callback_is_relative_to_its_due_time():
    t = TimerQueue()
    seen = []
    t.call_later(100, lambda: t.call_later(50, lambda: seen.append(t.now_ms)))
    t.advance(1000)
    assert seen == [150]


def test_call_every_repeats_until_cancelled():
    t = TimerQueue()
    ticks = []
    h = t.call_every(1000, lambda: ticks.append(t.now_ms))
    t.advance(3500)
    assert ticks == [1000, 2000, 3000]
    t.cancel(h)
    t.advance(5000)
    assert ticks == [1000, 2000, 3000]
    assert t.pending == 0


def test_repeating_timer_can_cancel_itself():
    t = TimerQueue()
    ticks = []
    holder = {}

    def tick():
        ticks.append(t.now_ms)
        if len(ticks) == 2:
            t.cancel(holder["h"])

    holder["h"] = t.call_every(10, tick)
    t.advance(100)
    assert ticks == [10, 20]


def test_next_frame_waits_for_following_advance():
    t = TimerQueue()
    ran = []

    def outer():
        ran.append("outer")
        t.call_next_frame(lambda: ran.append("inner"))

    t.call_next_frame(outer)
    assert ran == []
    t.advance(16)
    assert ran == ["outer"]
    t.advance(16)
    assert ran == ["outer", "inner"]


def test_cancel_all_drops_everything():
    t = TimerQueue()
    ran = []
    t.call_later(10, lambda: ran.append(1))
    t.call_every(10, lambda: ran.append(2))
    t.call_next_frame(lambda: ran.append(3))
    assert t.pending == 3
    t.cancel_all()
    t.advance(100)
    assert ran == []
    assert t.pending == 0
