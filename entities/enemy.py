"""
enemy.py – Patrolling / chasing enemy.

Wires the behavior brain to the movement integrator.  One call to
``update(dt)`` is one tick:

    1. resolve the player (weak ref, may be gone)
    2. PatrolBrain.decide()        → direction, jump
    3. MovementIntegrator.step()   → physics port, buffers, jump/land
    4. dispatch_animation()        → idle/walk, facing × form flip

The idle/form selector is kicked once here at spawn; after that its own
timer keeps it running.  Combat code may call ``stun()`` and
``begin_attack()``; nothing in the enemy triggers those by itself.
"""

from __future__ import annotations

import logging
import random

import pygame
from settings import (
    RED, ENEMY_WIDTH, ENEMY_HEIGHT,
    ENEMY_START_X, ENEMY_START_Y,
    FORM_COLORS, DEFAULT_STUN_DURATION,
)
from entities.character import Character
from entities.player import PlayerRef
from systems.movement_system import MovementConfig
from systems.physics_system import RayEdgeSensor
from systems.ports import IdleTimer
from ai.ai_core import PatrolBrain, AIConfig, AIState, Senses
from ai.idle_system import IdleFormSelector

logger = logging.getLogger(__name__)


class Enemy(Character):
    """AI-controlled platformer enemy."""

    def __init__(self, world, idle_timer: IdleTimer,
                 player_ref: PlayerRef | None = None,
                 x: float = ENEMY_START_X, y: float = ENEMY_START_Y,
                 movement_config: MovementConfig | None = None,
                 ai_config: AIConfig | None = None,
                 rng: random.Random | None = None,
                 stats=None):
        super().__init__(world, x, y, ENEMY_WIDTH, ENEMY_HEIGHT, RED,
                         movement_config=movement_config)
        self.edge_sensor = RayEdgeSensor(self.body)
        self.player_ref = player_ref or PlayerRef()
        self.brain = PatrolBrain(
            self.body.position, ai_config,
            jump_height=self.movement.config.jump_height,
        )
        self.selector = IdleFormSelector(self.brain, idle_timer, rng=rng)
        self.stats = stats
        self.movement.on_land(self._on_land)

        self.selector.toggle()
        self._apply_form()

    # ── Queries ───────────────────────────────────────────

    @property
    def state(self) -> AIState:
        return self.brain.state

    @property
    def form(self):
        return self.selector.form

    # ── AI Update ─────────────────────────────────────────

    def update(self, dt: float):
        """Run one tick of AI + movement + animation."""
        player = self.player_ref.resolve()
        senses = Senses(
            position=self.position,
            on_floor=self.on_ground,
            on_wall=self.body.query_wall(),
            velocity_x=self.velocity.x,
            player_position=player.position if player is not None else None,
            edge_sensor=self.edge_sensor,
        )
        decision = self.brain.decide(senses, dt)

        if self.animator.color != FORM_COLORS.get(self.form.name, RED):
            self._apply_form()
        self.move(decision.direction, decision.jump, dt,
                  form_flipped=self.selector.flipped)

        if self.stats is not None:
            self.stats.record(dt, self)

    # ── External events ───────────────────────────────────

    def stun(self, duration: float = DEFAULT_STUN_DURATION):
        self.brain.stun(duration)

    def begin_attack(self):
        self.brain.begin_attack()

    def on_land(self, hook):
        """Register an extra landing callback (VFX, sound, ...)."""
        self.movement.on_land(hook)

    def player_in_attack_range(self) -> bool:
        player = self.player_ref.resolve()
        if player is None:
            return False
        return self.brain.in_attack_range(self.position, player.position)

    # ── Internals ─────────────────────────────────────────

    def _apply_form(self):
        self.animator.set_color(FORM_COLORS.get(self.form.name, RED))

    def _on_land(self):
        logger.debug("Enemy landed at x=%.1f", self.position.x)
        if self.stats is not None:
            self.stats.record_landing()

    def draw(self, surface: pygame.Surface):
        super().draw(surface)
        if self.state is AIState.STUNNED:
            pygame.draw.circle(surface, (255, 255, 120),
                               (self.rect.centerx, self.rect.top - 4), 3)
