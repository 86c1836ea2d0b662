"""Tests for the buffered movement integrator."""

import math

import pytest

from systems.movement_system import MovementConfig, MovementIntegrator, MovementState
from tests.conftest import FakeBody

# Exact in binary floating point so timer comparisons are unambiguous.
DT = 1 / 32
BUFFER = 4 * DT


def make(body=None, **overrides):
    params = dict(air_buffer_seconds=BUFFER, jump_buffer_seconds=BUFFER)
    params.update(overrides)
    return MovementIntegrator(body or FakeBody(), MovementConfig(**params))


def settle(integrator, ticks=2):
    for _ in range(ticks):
        integrator.step(0, False, DT)


# ── Configuration ─────────────────────────────────────────

def test_jump_speed_from_height_and_gravity():
    cfg = MovementConfig(jump_height=40, gravity=310)
    assert cfg.jump_speed == pytest.approx(157.48, abs=0.01)


@pytest.mark.parametrize("field", [
    "max_speed", "jump_height", "gravity", "acceleration",
    "deceleration", "air_buffer_seconds", "jump_buffer_seconds",
])
def test_negative_config_rejected(field):
    with pytest.raises(ValueError, match=field):
        MovementConfig(**{field: -1.0})


def test_strong_gravity_must_not_be_lighter():
    with pytest.raises(ValueError, match="gravity_strong"):
        MovementConfig(gravity=500, gravity_strong=400)


def test_fresh_state_has_nothing_buffered():
    cfg = MovementConfig()
    st = MovementState.for_config(cfg)
    assert st.air_time == cfg.air_buffer_seconds
    assert st.jump_time == cfg.jump_buffer_seconds
    assert st.target_gravity == cfg.gravity


# ── Horizontal ────────────────────────────────────────────

def test_accelerates_from_rest():
    integ = MovementIntegrator(FakeBody(), MovementConfig(max_speed=120, acceleration=512))
    integ.step(1, False, 1 / 60)
    assert integ.state.velocity.x == pytest.approx(512 / 60)
    assert integ.state.velocity.x == pytest.approx(8.533, abs=1e-3)


def test_speed_capped_at_max():
    integ = make(max_speed=120, acceleration=512)
    for _ in range(200):
        integ.step(1, False, DT)
    assert integ.state.velocity.x == pytest.approx(120)


@pytest.mark.parametrize("start", [100.0, -100.0, 3.0])
def test_releasing_converges_to_zero_without_overshoot(start):
    integ = make(deceleration=1024)
    integ.state.velocity.x = start
    previous = abs(start)
    for _ in range(100):
        integ.step(0, False, DT)
        vx = integ.state.velocity.x
        assert abs(vx) <= previous
        assert vx * start >= 0
        previous = abs(vx)
    assert integ.state.velocity.x == 0


def test_turning_uses_deceleration():
    integ = make(acceleration=100, deceleration=1000)
    integ.state.velocity.x = 100.0
    integ.step(-1, False, DT)
    assert integ.state.velocity.x == pytest.approx(100 - 1000 * DT)


def test_direction_is_clamped():
    integ = make(max_speed=120)
    integ.step(5, False, DT)
    assert integ.state.target_speed == 120
    integ.step(-3, False, DT)
    assert integ.state.target_speed == -120


# ── Jump buffering / coyote time ──────────────────────────

def test_jump_from_ground_launches_exact_speed():
    integ = make()
    settle(integ)
    assert integ.step(0, True, DT) is True
    st = integ.state
    assert st.velocity.y == -integ.config.jump_speed
    assert st.target_gravity == integ.config.gravity
    assert st.air_time == integ.config.air_buffer_seconds
    assert st.jump_time == integ.config.jump_buffer_seconds
    assert st.on_ground is False


def test_launch_then_touchdown_counts_as_landing():
    body = FakeBody()
    integ = make(body)
    landed = []
    integ.on_land(lambda: landed.append(True))
    settle(integ)
    landed.clear()
    integ.step(0, True, DT)
    assert not integ.state.on_ground
    integ.step(0, False, DT)                     # body still reports floor
    assert landed == [True]


def test_early_request_fires_on_landing():
    body = FakeBody(on_floor=False)
    integ = make(body)
    settle(integ)
    assert integ.step(0, True, DT) is False      # airborne, nothing to jump from
    integ.step(0, False, DT)
    body.on_floor = True
    assert integ.step(0, False, DT) is True
    assert integ.state.velocity.y == -integ.config.jump_speed


def test_early_request_expires():
    body = FakeBody(on_floor=False)
    integ = make(body)
    integ.step(0, True, DT)
    for _ in range(3):
        integ.step(0, False, DT)
    assert integ.state.jump_time == BUFFER
    body.on_floor = True
    assert integ.step(0, False, DT) is False


def test_coyote_time_allows_late_jump():
    body = FakeBody()
    integ = make(body)
    settle(integ)
    body.on_floor = False
    for _ in range(2):
        integ.step(0, False, DT)
    assert integ.step(0, True, DT) is True       # air_time 3/32 < 4/32


def test_coyote_time_runs_out():
    body = FakeBody()
    integ = make(body)
    settle(integ)
    body.on_floor = False
    for _ in range(3):
        integ.step(0, False, DT)
    assert integ.step(0, True, DT) is False      # air_time clamped at ceiling
    assert integ.state.air_time == BUFFER


def test_held_jump_does_not_rejump_in_air():
    body = FakeBody()
    integ = make(body)
    settle(integ)
    integ.step(0, True, DT)
    body.on_floor = False
    for _ in range(10):
        assert integ.step(0, True, DT) is False
    assert integ.jumps == 1


def test_timers_stay_within_bounds():
    body = FakeBody(on_floor=False)
    integ = make(body)
    for i in range(50):
        integ.step(0, i % 3 == 0, DT)
        st = integ.state
        assert 0 <= st.air_time <= BUFFER
        assert 0 <= st.jump_time <= BUFFER


# ── Gravity ───────────────────────────────────────────────

def test_holding_jump_keeps_light_gravity():
    body = FakeBody()
    integ = make(body, gravity=300, gravity_strong=900)
    settle(integ)
    integ.step(0, True, DT)
    body.on_floor = False
    vy = integ.state.velocity.y
    integ.step(0, True, DT)
    assert integ.state.velocity.y == pytest.approx(vy + 300 * DT)


def test_releasing_jump_cuts_to_strong_gravity():
    body = FakeBody()
    integ = make(body, gravity=300, gravity_strong=900)
    settle(integ)
    integ.step(0, True, DT)
    body.on_floor = False
    integ.step(0, True, DT)
    vy = integ.state.velocity.y
    integ.step(0, False, DT)
    assert integ.state.velocity.y == pytest.approx(vy + 900 * DT)


def test_falling_uses_strong_gravity():
    body = FakeBody(on_floor=False)
    integ = make(body, gravity=300, gravity_strong=900)
    integ.state.velocity.y = 10.0
    integ.step(0, False, DT)
    assert integ.state.velocity.y == pytest.approx(10 + 900 * DT)


# ── Landing hook ──────────────────────────────────────────

def test_landing_hook_fires_once_per_touchdown():
    body = FakeBody(on_floor=False)
    integ = make(body)
    landed = []
    integ.on_land(lambda: landed.append(True))
    integ.step(0, False, DT)
    body.on_floor = True
    for _ in range(5):
        integ.step(0, False, DT)
    assert landed == [True]


def test_landing_hook_skipped_when_jump_fires():
    body = FakeBody(on_floor=False)
    integ = make(body)
    landed = []
    integ.on_land(lambda: landed.append(True))
    integ.step(0, True, DT)
    body.on_floor = True
    assert integ.step(0, False, DT) is True
    assert landed == []


def test_launch_speed_matches_projectile_equation():
    integ = make(jump_height=40, gravity=310, gravity_strong=900)
    settle(integ)
    integ.step(0, True, DT)
    assert integ.state.velocity.y == pytest.approx(-math.sqrt(2 * 40 * 310))
