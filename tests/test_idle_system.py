"""Tests for the idle/form selector."""

import random

import pytest

from ai.ai_core import AIState, PatrolBrain
from ai.idle_system import FormVariant, IdleFormSelector
from settings import FORM_FLIP_TABLE
from systems.timer_system import TimerService


@pytest.fixture
def brain():
    return PatrolBrain((0, 0))


def test_first_toggle_enters_idle_with_long_timer(brain, fake_timer):
    selector = IdleFormSelector(brain, fake_timer, rng=random.Random(3))
    selector.toggle()
    assert brain.state is AIState.IDLE
    assert len(fake_timer.durations) == 1
    assert 20 * 0.3 <= fake_timer.durations[0] <= 20 * 1.2


def test_second_toggle_returns_to_patrol_with_short_timer(brain, fake_timer):
    selector = IdleFormSelector(brain, fake_timer, rng=random.Random(3))
    selector.toggle()
    fake_timer.fire()
    assert brain.state is AIState.PATROL
    assert len(fake_timer.durations) == 2
    assert 10 * 0.3 <= fake_timer.durations[1] <= 10 * 1.2


def test_form_flip_follows_catalog(brain, fake_timer):
    selector = IdleFormSelector(brain, fake_timer, rng=random.Random(11))
    for _ in range(20):
        selector.toggle()
        fake_timer.running = False
        if brain.state is AIState.IDLE:
            assert selector.form.name in FORM_FLIP_TABLE
            assert selector.flipped is FORM_FLIP_TABLE[selector.form.name]


def test_custom_catalog(brain, fake_timer):
    selector = IdleFormSelector(brain, fake_timer, flip_table={"ghost": True},
                                rng=random.Random(0))
    selector.toggle()
    assert selector.form == FormVariant("ghost", True)


def test_running_timer_not_rearmed(brain, fake_timer):
    selector = IdleFormSelector(brain, fake_timer, rng=random.Random(1))
    selector.toggle()
    selector.toggle()
    assert brain.state is AIState.PATROL
    assert len(fake_timer.durations) == 1


def test_idle_interrupts_chase(brain, fake_timer):
    brain.state = AIState.CHASE
    IdleFormSelector(brain, fake_timer).toggle()
    assert brain.state is AIState.IDLE


def test_seeded_runs_repeat(fake_timer):
    def run(seed):
        b = PatrolBrain((0, 0))
        timer = type(fake_timer)()
        selector = IdleFormSelector(b, timer, rng=random.Random(seed))
        forms = []
        for _ in range(6):
            selector.toggle()
            timer.running = False
            forms.append(selector.form.name)
        return forms, timer.durations

    assert run(42) == run(42)


def test_empty_catalog_rejected(brain, fake_timer):
    with pytest.raises(ValueError):
        IdleFormSelector(brain, fake_timer, flip_table={})


def test_oscillates_on_real_timer(brain):
    timers = TimerService()
    timer = timers.create("idle")
    selector = IdleFormSelector(brain, timer, rng=random.Random(5))
    selector.toggle()

    seen = [brain.state]
    for _ in range(60 * 120):
        timers.update(1 / 60)
        if brain.state is not seen[-1]:
            seen.append(brain.state)
        assert timer.is_running()
    assert seen[:3] == [AIState.IDLE, AIState.PATROL, AIState.IDLE]
    assert selector.episodes >= 2
