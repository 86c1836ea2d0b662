"""
scene.py - One level: geometry, timers, player and enemy.

Used by both the windowed demo (main.Game) and the headless
SimulationRunner, so both step the world in exactly the same order:

    timers → player → enemy

Timers go first so an idle toggle that fires this frame is already
visible to the enemy's brain on the same tick.
"""

from __future__ import annotations

import logging
import random

import pygame
from settings import LEVEL_SOLIDS, GRAY, WHITE
from entities import Player, PlayerRef, Enemy
from systems.physics_system import PlatformWorld
from systems.timer_system import TimerService
from ai.ai_core import AIConfig
from ai.stats import PatrolStats
from utils.helpers import draw_text

logger = logging.getLogger(__name__)


class Scene:
    """Owns everything that lives in one running level."""

    def __init__(self, seed: int | None = None, solids=LEVEL_SOLIDS,
                 ai_config: AIConfig | None = None, with_stats: bool = False):
        self.rng = random.Random(seed)
        self.world = PlatformWorld(solids)
        self.timers = TimerService()
        self.player = Player(self.world)
        self.player_ref = PlayerRef(self.player)

        ai_config = ai_config or AIConfig()
        self.stats: PatrolStats | None = None
        self.enemy = Enemy(
            self.world,
            self.timers.create("idle"),
            player_ref=self.player_ref,
            ai_config=ai_config,
            rng=self.rng,
        )
        if with_stats:
            self.stats = PatrolStats(self.enemy.brain.start_position.x,
                                     ai_config.patrol_range)
            self.enemy.stats = self.stats
        self.time: float = 0.0
        logger.info("Scene ready (seed=%s, form=%s)", seed, self.enemy.form.name)

    def despawn_player(self):
        self.player.alive = False

    def respawn_player(self):
        self.player = Player(self.world)
        self.player_ref.set(self.player)

    def place_player(self, x: float, y: float):
        """Put the player at (x, y) top-left, at rest."""
        self.player.body.x = x
        self.player.body.y = y
        self.player.movement.state.velocity = pygame.math.Vector2()
        logger.info("Player placed at (%.0f, %.0f)", x, y)

    def update(self, dt: float):
        self.time += dt
        self.timers.update(dt)
        if self.player.alive:
            self.player.update(dt)
        self.enemy.update(dt)

    def draw(self, surface: pygame.Surface):
        self.world.draw(surface, GRAY)
        if self.player.alive:
            self.player.draw(surface)
        self.enemy.draw(surface)

        brain = self.enemy.brain
        draw_text(surface, f"state: {brain.state.value}", 24, 16)
        draw_text(surface, f"form: {self.enemy.form.name}"
                  f"{' (flipped)' if self.enemy.form.flipped else ''}", 24, 34)
        draw_text(surface, f"patrol dir: {brain.patrol_direction:+d}", 24, 52)
        start = brain.start_position
        left = int(start.x - brain.config.patrol_range)
        right = int(start.x + brain.config.patrol_range)
        pygame.draw.line(surface, WHITE, (left, int(start.y) + 10),
                         (right, int(start.y) + 10), 1)
