"""
idle_system.py – Idle episodes and random form changes.

A two-phase oscillator driven by a single one-shot timer:

    not idle ──toggle──▶ idle   (new random form, next toggle in 20 × U(0.3, 1.2) s)
    idle     ──toggle──▶ patrol (next toggle in 10 × U(0.3, 1.2) s)

``toggle()`` is called once when the enemy spawns and afterwards only
by its own timer, so it keeps going for the enemy's whole lifetime
regardless of what the brain is doing (idle can interrupt a chase).
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from settings import (
    FORM_FLIP_TABLE, IDLE_EPISODE_BASE, ACTIVE_EPISODE_BASE, IDLE_JITTER,
)
from ai.ai_core import AIState, PatrolBrain
from systems.ports import IdleTimer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormVariant:
    """A visual skin and whether its art is mirrored."""
    name: str
    flipped: bool = False


class IdleFormSelector:
    """Drives the brain in and out of idle and picks forms.

    Parameters
    ----------
    brain      : PatrolBrain to drive (only enter_idle/leave_idle are used)
    timer      : IdleTimer port
    flip_table : form name -> flipped, fixed at construction
    rng        : random.Random, seed it for reproducible runs
    """

    def __init__(self, brain: PatrolBrain, timer: IdleTimer,
                 flip_table: dict[str, bool] | None = None,
                 rng: random.Random | None = None):
        self.brain = brain
        self.timer = timer
        self.flip_table = dict(flip_table if flip_table is not None else FORM_FLIP_TABLE)
        if not self.flip_table:
            raise ValueError("form catalog must not be empty")
        self.rng = rng or random.Random()
        first = next(iter(self.flip_table))
        self.form = FormVariant(first, self.flip_table[first])
        self.episodes: int = 0

    @property
    def flipped(self) -> bool:
        return self.form.flipped

    def toggle(self):
        if self.brain.state is not AIState.IDLE:
            self.brain.enter_idle()
            self.form = self._pick_form()
            self.episodes += 1
            self._schedule(IDLE_EPISODE_BASE)
        else:
            self.brain.leave_idle()
            self._schedule(ACTIVE_EPISODE_BASE)

    def _pick_form(self) -> FormVariant:
        name = self.rng.choice(list(self.flip_table))
        logger.debug("Form changed to %s", name)
        return FormVariant(name, self.flip_table[name])

    def _schedule(self, base: float):
        if self.timer.is_running():
            return
        duration = base * self.rng.uniform(*IDLE_JITTER)
        self.timer.start_once(duration, self.toggle)
        logger.debug("Next idle toggle in %.1fs", duration)
