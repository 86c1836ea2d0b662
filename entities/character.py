"""
character.py – Shared base for every moving platformer body.

A Character bundles the pieces both the player and the enemy need:

    KinematicBody      – physics port (position, sliding, contacts)
    MovementIntegrator – buffered jump / acceleration logic
    AnimationPlayer    – idle/walk clips, mirrored by facing

Subclasses decide *what* direction and jump to feed the integrator.
"""

from __future__ import annotations

import logging

import pygame

from systems.movement_system import MovementConfig, MovementIntegrator
from systems.physics_system import KinematicBody, PlatformWorld
from systems.animation_system import AnimationPlayer, dispatch_animation

logger = logging.getLogger(__name__)


class Character:
    """A body in the world that moves through a MovementIntegrator."""

    def __init__(self, world: PlatformWorld, x: float, y: float,
                 width: int, height: int, color: tuple,
                 movement_config: MovementConfig | None = None):
        self.world = world
        self.body = KinematicBody(world, x, y, width, height)
        self.movement = MovementIntegrator(self.body, movement_config)
        self.animator = AnimationPlayer((width, height), color)
        self.facing: int = 1
        self.alive: bool = True

    # ── Queries ───────────────────────────────────────────

    @property
    def position(self) -> pygame.math.Vector2:
        return self.body.position

    @property
    def velocity(self) -> pygame.math.Vector2:
        return self.movement.state.velocity

    @property
    def on_ground(self) -> bool:
        return self.movement.state.on_ground

    @property
    def rect(self) -> pygame.Rect:
        return self.body.rect

    # ── Per-frame ─────────────────────────────────────────

    def move(self, direction: float, jump: bool, dt: float,
             form_flipped: bool = False) -> bool:
        """Step movement and animation.  Returns True if a jump launched."""
        jumped = self.movement.step(direction, jump, dt)
        self.facing = dispatch_animation(
            self.movement.state, self.animator,
            self.movement.config.max_speed, form_flipped, self.facing,
        )
        self.animator.update(dt)
        return jumped

    def draw(self, surface: pygame.Surface):
        self.animator.draw(surface, self.rect)
