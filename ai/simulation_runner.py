"""
simulation_runner.py – Headless scripted run of one enemy.

Steps a Scene at the fixed tick rate with no window and no keyboard.
The player is driven by a small script so every enemy state gets
exercised:

    wander near spawn  → enemy patrols / idles
    walk at the enemy  → enemy chases
    climb the platform → enemy hops at it from below
    drop back down     → enemy chases on the floor
    vanish             → enemy falls back to patrol
    reappear, stun     → enemy is stunned, then patrols again

Usage (from CLI):
    python main.py --simulate 60 --seed 7 --plot
"""

from __future__ import annotations

import logging

from settings import FIXED_DT, PERCH_X, PERCH_Y
from scene import Scene

logger = logging.getLogger(__name__)


# Script time at which the player climbs onto the floating platform
PERCH_TIME = 10.0


class PlayerScript:
    """Time-based input script for the player body."""

    # (start time, direction, jump)
    STEPS = (
        (0.0, 0, False),
        (2.0, 1, False),
        (4.5, 0, False),
        (6.0, -1, True),
        (6.3, -1, False),
        (8.0, 0, False),
        (PERCH_TIME, 0, False),
        (14.0, -1, True),
        (14.3, -1, False),
        (16.0, 0, False),
    )

    def __init__(self, loop_seconds: float = 20.0):
        self.loop_seconds = loop_seconds

    def perches(self, t: float, dt: float) -> bool:
        """True on the tick the player climbs onto the floating platform."""
        t = t % self.loop_seconds
        return t <= PERCH_TIME < t + dt

    def inputs(self, t: float) -> tuple[int, bool]:
        t = t % self.loop_seconds
        direction, jump = 0, False
        for start, d, j in self.STEPS:
            if t >= start:
                direction, jump = d, j
        return direction, jump


class SimulationRunner:
    """Run a Scene for *seconds* of simulated time.

    Parameters
    ----------
    seconds : simulated duration
    seed    : RNG seed for idle timing and form picks
    plot    : save the x-trace graph at the end
    """

    def __init__(self, seconds: float = 30.0, seed: int | None = None,
                 plot: bool = False) -> None:
        self._seconds = max(FIXED_DT, seconds)
        self._plot = plot
        self.scene = Scene(seed=seed, with_stats=True)
        self._script = PlayerScript()

    def run(self) -> dict:
        """Execute the run, print the summary, return stats as a dict."""
        scene = self.scene
        ticks = int(round(self._seconds / FIXED_DT))
        despawned = False
        logger.info("=== Simulating %d ticks (%.1fs) ===", ticks, self._seconds)

        for i in range(ticks):
            t = i * FIXED_DT
            phase = t % 40.0
            if phase >= 25.0 and not despawned:
                scene.despawn_player()
                despawned = True
                logger.info("t=%.1fs player despawned", t)
            elif phase < 25.0 and despawned:
                scene.respawn_player()
                despawned = False
                scene.enemy.stun()
                logger.info("t=%.1fs player respawned, enemy stunned", t)

            if not despawned and self._script.perches(t, FIXED_DT):
                scene.place_player(PERCH_X, PERCH_Y)

            direction, jump = self._script.inputs(t)
            scene.player.input_direction = direction
            scene.player.input_jump = jump
            scene.update(FIXED_DT)

        scene.stats.end_run(scene.enemy, plot=self._plot)
        return scene.stats.as_dict()
