"""
ports.py – Capability interfaces the enemy controller calls.

The controller never talks to pygame collision, sprite playback or
scheduling directly.  It calls these four ports instead:

    PhysicsBody    – moves the body by a velocity and reports contacts
    EdgeSensor     – short downward ray to detect a ledge ahead
    AnimationPort  – plays a named clip and mirrors the sprite
    IdleTimer      – one-shot callback used by the idle/form selector

Concrete pygame-backed implementations live in physics_system,
animation_system and timer_system.  Tests swap in simple fakes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

import pygame


@dataclass
class ContactResult:
    """What the physics step reports back after moving the body."""
    on_floor: bool = False
    on_wall: bool = False
    velocity: pygame.math.Vector2 | None = None   # collision-resolved velocity


@dataclass
class RayHit:
    """Result of an edge-sensor cast."""
    hit: bool = False


@runtime_checkable
class PhysicsBody(Protocol):
    @property
    def position(self) -> pygame.math.Vector2:
        """Reference point of the body (its center)."""
        ...

    def apply_velocity_and_resolve(self, velocity: pygame.math.Vector2,
                                   delta: float) -> ContactResult:
        ...

    def query_floor(self) -> bool:
        ...

    def query_wall(self) -> bool:
        ...


@runtime_checkable
class EdgeSensor(Protocol):
    def cast_downward(self, origin_offset_x: float, length: float) -> RayHit:
        ...


@runtime_checkable
class AnimationPort(Protocol):
    def play(self, clip_name: str, speed_scale: float = 1.0) -> None:
        ...

    def set_flip(self, flipped: bool) -> None:
        ...


@runtime_checkable
class IdleTimer(Protocol):
    def is_running(self) -> bool:
        ...

    def start_once(self, duration: float, callback: Callable[[], None]) -> None:
        ...
