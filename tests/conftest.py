"""Shared fakes for the controller's ports."""

import pygame
import pytest

from systems.ports import ContactResult, RayHit


class FakeBody:
    """Point body on an optional infinite floor; walls toggled by hand."""

    def __init__(self, x=0.0, y=0.0, on_floor=True):
        self.pos = pygame.math.Vector2(x, y)
        self.on_floor = on_floor
        self.on_wall = False
        self.calls = 0

    @property
    def position(self):
        return pygame.math.Vector2(self.pos)

    def apply_velocity_and_resolve(self, velocity, delta):
        self.calls += 1
        vel = pygame.math.Vector2(velocity)
        if self.on_floor and vel.y > 0:
            vel.y = 0.0
        if self.on_wall:
            vel.x = 0.0
        self.pos += vel * delta
        return ContactResult(on_floor=self.on_floor, on_wall=self.on_wall,
                             velocity=vel)

    def query_floor(self):
        return self.on_floor

    def query_wall(self):
        return self.on_wall


class FakeEdgeSensor:
    def __init__(self, hit=True):
        self.hit = hit
        self.casts = []

    def cast_downward(self, origin_offset_x, length):
        self.casts.append((origin_offset_x, length))
        return RayHit(hit=self.hit)


class FakeAnimator:
    def __init__(self):
        self.plays = []
        self.flips = []

    def play(self, clip_name, speed_scale=1.0):
        self.plays.append((clip_name, speed_scale))

    def set_flip(self, flipped):
        self.flips.append(flipped)


class FakeTimer:
    """IdleTimer that only records; tests fire it by hand."""

    def __init__(self):
        self.running = False
        self.durations = []
        self.callback = None

    def is_running(self):
        return self.running

    def start_once(self, duration, callback):
        self.running = True
        self.durations.append(duration)
        self.callback = callback

    def fire(self):
        self.running = False
        callback, self.callback = self.callback, None
        callback()


@pytest.fixture
def body():
    return FakeBody()


@pytest.fixture
def edge_sensor():
    return FakeEdgeSensor()


@pytest.fixture
def animator():
    return FakeAnimator()


@pytest.fixture
def fake_timer():
    return FakeTimer()
