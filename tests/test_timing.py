from tetris_engine.game import GravityClock, ScoringRules


def test_first_poll_only_starts_the_clock():
    clock = GravityClock()
    assert not clock.due(5000, 1)
    assert clock.last_tick_ms == 5000


def test_due_follows_level_interval():
    clock = GravityClock()
    clock.start(0)
    assert not clock.due(999, 1)
    assert clock.due(1000, 1)
    assert clock.due(500, 6)
    assert not clock.due(99, 20)
    assert clock.due(100, 20)


def test_mark_restarts_interval():
    clock = GravityClock()
    clock.start(0)
    clock.mark(1000)
    assert not clock.due(1500, 1)
    assert clock.due(2000, 1)


def test_custom_interval_source():
    clock = GravityClock(ScoringRules(base_interval_ms=500, min_interval_ms=50).drop_interval_ms)
    clock.start(0)
    assert clock.due(500, 1)
    assert not clock.due(49, 30)
