"""
ai_core.py – Patrol / chase behavior brain for the platformer enemy.

The brain is a closed-set state machine.  Each tick ``decide()`` reads
what the enemy senses and returns a Decision (horizontal direction and
jump request) for the movement integrator.  It never moves the body.

States: patrol | chase | attack | stunned | idle

    patrol  – walk back and forth around the spawn point, turning at the
              patrol bound, at walls and at ledges; spot the player
    chase   – run at the player, hop when the player is above
    attack  – stand still until momentum dies, then chase again
    stunned – stand still until the stun timer runs out, then patrol
    idle    – stand still; only the idle/form selector leaves it

Attack and stunned are entered from outside (combat code calls
``begin_attack()`` / ``stun()``).  Idle is entered and left only by
ai.idle_system.IdleFormSelector.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from enum import Enum

import pygame

from settings import (
    PATROL_RANGE, CHASE_RANGE, ATTACK_RANGE,
    EDGE_CHECK_DISTANCE, EDGE_PROBE_LENGTH, ATTACK_SETTLE_SPEED,
    JUMP_HEIGHT,
)
from systems.ports import EdgeSensor
from utils.helpers import sign

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════
#  Configuration / state
# ══════════════════════════════════════════════════════════

@dataclass(frozen=True)
class AIConfig:
    """Immutable behavior tuning, fixed at construction."""

    patrol_range: float = PATROL_RANGE
    chase_range: float = CHASE_RANGE
    attack_range: float = ATTACK_RANGE
    edge_check_distance: float = EDGE_CHECK_DISTANCE
    edge_probe_length: float = EDGE_PROBE_LENGTH

    def __post_init__(self):
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ValueError(
                    f"AIConfig.{f.name} must be >= 0, got {getattr(self, f.name)}"
                )


class AIState(Enum):
    PATROL = "patrol"
    CHASE = "chase"
    ATTACK = "attack"
    STUNNED = "stunned"
    IDLE = "idle"


@dataclass
class Senses:
    """Everything the brain may look at for one tick."""
    position: pygame.math.Vector2
    on_floor: bool
    on_wall: bool
    velocity_x: float = 0.0
    player_position: pygame.math.Vector2 | None = None
    edge_sensor: EdgeSensor | None = None


@dataclass
class Decision:
    direction: int = 0
    jump: bool = False


# ══════════════════════════════════════════════════════════
#  Brain
# ══════════════════════════════════════════════════════════

class PatrolBrain:
    """Per-enemy behavior state machine.

    Parameters
    ----------
    start_position : spawn point, origin of the patrol bound
    config         : AIConfig
    jump_height    : the body's jump height; the player must be more
                     than half of it above the enemy to trigger a hop
    """

    def __init__(self, start_position, config: AIConfig | None = None,
                 jump_height: float = JUMP_HEIGHT):
        self.config = config or AIConfig()
        self.start_position = pygame.math.Vector2(start_position)
        self.jump_height = jump_height
        self.state: AIState = AIState.PATROL
        self.patrol_direction: int = 1
        self.stun_timer: float = 0.0
        self.transitions: int = 0

        self._handlers = {
            AIState.PATROL: self._patrol,
            AIState.CHASE: self._chase,
            AIState.ATTACK: self._attack,
            AIState.STUNNED: self._stunned,
            AIState.IDLE: self._idle,
        }

    # ══════════════════════════════════════════════════════
    #  Main Update
    # ══════════════════════════════════════════════════════

    def decide(self, senses: Senses, delta: float) -> Decision:
        """One tick of behavior.  Pure apart from the brain's own state."""
        return self._handlers[self.state](senses, delta)

    # ── State handlers ────────────────────────────────────

    def _patrol(self, senses: Senses, delta: float) -> Decision:
        displacement = senses.position.x - self.start_position.x
        if abs(displacement) > self.config.patrol_range:
            # Point back toward spawn so an out-of-bounds body can't flip-flop
            self._set_patrol_direction(-sign(displacement))
        elif self._should_turn_around(senses):
            self._set_patrol_direction(-self.patrol_direction)

        if self._player_in_range(senses, self.config.chase_range):
            self._transition(AIState.CHASE)
        return Decision(direction=self.patrol_direction)

    def _chase(self, senses: Senses, delta: float) -> Decision:
        if not self._player_in_range(senses, self.config.chase_range):
            self._transition(AIState.PATROL)
            return Decision()

        player = senses.player_position
        direction = sign(player.x - senses.position.x)
        player_above = player.y < senses.position.y - self.jump_height / 2
        return Decision(direction=direction,
                        jump=player_above and senses.on_floor)

    def _attack(self, senses: Senses, delta: float) -> Decision:
        if abs(senses.velocity_x) < ATTACK_SETTLE_SPEED:
            self._transition(AIState.CHASE)
        return Decision()

    def _stunned(self, senses: Senses, delta: float) -> Decision:
        self.stun_timer -= delta
        if self.stun_timer <= 0:
            self.stun_timer = 0.0
            self._transition(AIState.PATROL)
        return Decision()

    def _idle(self, senses: Senses, delta: float) -> Decision:
        return Decision()

    # ── Sensing ───────────────────────────────────────────

    def _should_turn_around(self, senses: Senses) -> bool:
        if senses.on_wall:
            return True
        if senses.on_floor and senses.edge_sensor is not None:
            ray = senses.edge_sensor.cast_downward(
                self.config.edge_check_distance * self.patrol_direction,
                self.config.edge_probe_length,
            )
            return not ray.hit
        return False

    @staticmethod
    def _player_in_range(senses: Senses, limit: float) -> bool:
        if senses.player_position is None:
            return False
        return senses.position.distance_to(senses.player_position) < limit

    def in_attack_range(self, position, player_position) -> bool:
        """Query for combat code; the brain itself never starts attacks."""
        if player_position is None:
            return False
        return (pygame.math.Vector2(position).distance_to(player_position)
                < self.config.attack_range)

    # ── External events ───────────────────────────────────

    def stun(self, duration: float):
        self.stun_timer = max(0.0, duration)
        self._transition(AIState.STUNNED)

    def begin_attack(self):
        self._transition(AIState.ATTACK)

    def enter_idle(self):
        self._transition(AIState.IDLE)

    def leave_idle(self):
        self._transition(AIState.PATROL)

    # ── Helpers ───────────────────────────────────────────

    def _set_patrol_direction(self, direction: int):
        if direction == 0 or direction == self.patrol_direction:
            return
        self.patrol_direction = direction
        logger.debug("Patrol turned, now heading %+d", direction)

    def _transition(self, new_state: AIState):
        if new_state is self.state:
            return
        logger.debug("AI %s -> %s", self.state.value, new_state.value)
        self.state = new_state
        self.transitions += 1
