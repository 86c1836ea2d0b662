"""
movement_system.py – Buffered platformer movement integrator.

Turns AI (or player) intent into velocity for one fixed physics tick:

- Gravity is "cut": light gravity only while ascending right after a
  jump that is still being requested, heavy gravity otherwise.
- Horizontal speed approaches ``dir * max_speed`` with separate
  acceleration / deceleration rates and never overshoots.
- A jump fires when a request is recent enough (jump buffer) AND the
  body was grounded recently enough (coyote time).  Firing a jump
  pushes both timers to their ceilings so one request jumps once.

The integrator owns no collision code; it hands the velocity to a
PhysicsBody port and reads contacts back.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Callable

import pygame

from settings import (
    MAX_SPEED, JUMP_HEIGHT, GRAVITY, GRAVITY_STRONG,
    ACCELERATION, DECELERATION,
    AIR_BUFFER_SECONDS, JUMP_BUFFER_SECONDS,
)
from systems.ports import PhysicsBody
from utils.helpers import clamp, move_toward

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════
#  Configuration
# ══════════════════════════════════════════════════════════

@dataclass(frozen=True)
class MovementConfig:
    """Immutable movement tuning, fixed at construction."""

    max_speed: float = MAX_SPEED
    jump_height: float = JUMP_HEIGHT
    gravity: float = GRAVITY
    gravity_strong: float = GRAVITY_STRONG
    acceleration: float = ACCELERATION
    deceleration: float = DECELERATION
    air_buffer_seconds: float = AIR_BUFFER_SECONDS
    jump_buffer_seconds: float = JUMP_BUFFER_SECONDS

    def __post_init__(self):
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ValueError(
                    f"MovementConfig.{f.name} must be >= 0, "
                    f"got {getattr(self, f.name)}"
                )
        if self.gravity_strong < self.gravity:
            raise ValueError(
                "MovementConfig.gravity_strong must be >= gravity "
                f"({self.gravity_strong} < {self.gravity})"
            )

    @property
    def jump_speed(self) -> float:
        """Launch speed that reaches ``jump_height`` under ``gravity``."""
        return math.sqrt(2.0 * self.jump_height * self.gravity)


# ══════════════════════════════════════════════════════════
#  State
# ══════════════════════════════════════════════════════════

class AnimationClip(Enum):
    NONE = "none"
    IDLE = "idle"
    WALK = "walk"


@dataclass
class MovementState:
    """Per-character mutable movement state, updated every tick."""
    velocity: pygame.math.Vector2 = field(default_factory=pygame.math.Vector2)
    on_ground: bool = False
    air_time: float = 0.0
    jump_time: float = 0.0
    target_gravity: float = 0.0
    target_speed: float = 0.0
    current_animation: AnimationClip = AnimationClip.NONE

    @classmethod
    def for_config(cls, config: MovementConfig) -> "MovementState":
        """Fresh state: nothing buffered, base gravity selected."""
        return cls(
            air_time=config.air_buffer_seconds,
            jump_time=config.jump_buffer_seconds,
            target_gravity=config.gravity,
        )


# ══════════════════════════════════════════════════════════
#  Integrator
# ══════════════════════════════════════════════════════════

class MovementIntegrator:
    """Applies one tick of intent to a MovementState through a PhysicsBody.

    Usage:
        integrator = MovementIntegrator(body, MovementConfig())
        integrator.step(direction=1, jump=False, delta=1 / 60)
    """

    def __init__(self, body: PhysicsBody, config: MovementConfig | None = None,
                 state: MovementState | None = None):
        self.body = body
        self.config = config or MovementConfig()
        self.state = state or MovementState.for_config(self.config)
        self.landing_hooks: list[Callable[[], None]] = []
        self.jumps: int = 0

    def on_land(self, hook: Callable[[], None]):
        """Register a callback fired on the tick the body touches down."""
        self.landing_hooks.append(hook)

    # ── Per-tick ──────────────────────────────────────────

    def step(self, direction: float, jump: bool, delta: float) -> bool:
        """Advance one tick.  Returns True if a jump was launched."""
        cfg = self.config
        st = self.state
        vel = st.velocity

        # 1. Gravity selection (cut jump)
        if vel.y > 0 or (not jump and st.jump_time < cfg.jump_buffer_seconds):
            st.target_gravity = cfg.gravity_strong

        # 2. Vertical integration
        vel.y += st.target_gravity * delta

        # 3. Desired horizontal speed
        direction = clamp(direction, -1.0, 1.0)
        st.target_speed = direction * cfg.max_speed

        # 4. Accelerate when pushing along (or from rest), brake otherwise
        if direction != 0 and direction * vel.x >= 0:
            accel = cfg.acceleration
        else:
            accel = cfg.deceleration
        vel.x = move_toward(vel.x, st.target_speed, accel * delta)

        # 5. Physics
        was_on_ground = st.on_ground
        result = self.body.apply_velocity_and_resolve(vel, delta)
        if result.velocity is not None:
            st.velocity = pygame.math.Vector2(result.velocity)

        # 6. Buffers
        if jump:
            st.jump_time = 0.0
        st.on_ground = result.on_floor
        if st.on_ground:
            st.air_time = 0.0
        else:
            st.air_time = min(st.air_time + delta, cfg.air_buffer_seconds)
            st.jump_time = min(st.jump_time + delta, cfg.jump_buffer_seconds)

        # 7. Jump or landing
        if (st.jump_time < cfg.jump_buffer_seconds
                and st.air_time < cfg.air_buffer_seconds):
            self._launch()
            return True
        if st.on_ground and not was_on_ground:
            self._land()
        return False

    def _launch(self):
        cfg = self.config
        st = self.state
        st.velocity.y = -cfg.jump_speed
        st.target_gravity = cfg.gravity
        st.on_ground = False                 # left the floor this tick
        st.air_time = cfg.air_buffer_seconds
        st.jump_time = cfg.jump_buffer_seconds
        self.jumps += 1
        logger.debug("Jump launched at %.1f px/s", cfg.jump_speed)

    def _land(self):
        for hook in self.landing_hooks:
            hook()
