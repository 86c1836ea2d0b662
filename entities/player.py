"""
player.py – Player body the enemy patrols around and chases.

Controls: Left/Right (move), Space or Up (jump)

PlayerRef is how enemies see the player: a weak, optional handle.
An enemy never keeps the player alive and must cope with the player
being gone at any tick.
"""

from __future__ import annotations

import weakref

import pygame
from settings import (
    BLUE, PLAYER_WIDTH, PLAYER_HEIGHT,
    PLAYER_START_X, PLAYER_START_Y,
    PLAYER_MAX_SPEED, PLAYER_JUMP_HEIGHT,
)
from entities.character import Character
from systems.movement_system import MovementConfig


class Player(Character):
    """Keyboard- or script-driven platformer body."""

    def __init__(self, world, x: float = PLAYER_START_X,
                 y: float = PLAYER_START_Y):
        super().__init__(
            world, x, y, PLAYER_WIDTH, PLAYER_HEIGHT, BLUE,
            movement_config=MovementConfig(
                max_speed=PLAYER_MAX_SPEED,
                jump_height=PLAYER_JUMP_HEIGHT,
            ),
        )
        self.input_direction: int = 0
        self.input_jump: bool = False

    def handle_keys(self, keys):
        """Read held keys (pygame.key.get_pressed())."""
        self.input_direction = int(keys[pygame.K_RIGHT]) - int(keys[pygame.K_LEFT])
        self.input_jump = bool(keys[pygame.K_SPACE] or keys[pygame.K_UP])

    def update(self, dt: float):
        self.move(self.input_direction, self.input_jump, dt)


class PlayerRef:
    """Weak, optional reference to the player entity."""

    def __init__(self, player: Player | None = None):
        self._ref = None
        self.set(player)

    def set(self, player: Player | None):
        self._ref = weakref.ref(player) if player is not None else None

    def clear(self):
        self._ref = None

    def resolve(self) -> Player | None:
        """The live player, or None if unset, collected, or despawned."""
        if self._ref is None:
            return None
        player = self._ref()
        if player is None or not player.alive:
            return None
        return player
