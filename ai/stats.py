"""
stats.py  –  Per-run behavior statistics for one enemy.

PatrolStats samples the enemy every tick (time, x, AI state) and counts
state changes, landings and time spent per state.  At the end of a run
it prints a formatted summary and saves a line graph of the enemy's x
position with its patrol bounds via matplotlib.

Purely observational: recording never changes the enemy.
"""

import logging

logger = logging.getLogger(__name__)

import matplotlib
matplotlib.use("Agg")  # non-interactive backend so the plot doesn't block pygame
import matplotlib.pyplot as plt

from settings import STATS_PLOT_FILE


class PatrolStats:
    """Tracks one enemy over a run and produces end-of-run reports.

    Attributes tracked:
        times           – list[float] (seconds since start)
        xs              – list[float] (enemy center x)
        states          – list[str]   (AI state value per tick)
        state_time      – dict[str, float] seconds spent per state
        state_changes   – int
        landings        – int
        jumps           – int (read from the integrator at end_run)
    """

    def __init__(self, start_x: float, patrol_range: float):
        self.start_x: float = start_x
        self.patrol_range: float = patrol_range

        self.elapsed: float = 0.0
        self.times: list[float] = []
        self.xs: list[float] = []
        self.states: list[str] = []
        self.state_time: dict[str, float] = {}
        self.state_changes: int = 0
        self.landings: int = 0
        self.jumps: int = 0
        self.max_overshoot: float = 0.0

    # ===========================================================
    #  Per-tick / per-event recorders
    # ===========================================================

    def record(self, dt: float, enemy):
        """Call once per tick after the enemy updated."""
        self.elapsed += dt
        state = enemy.state.value
        if self.states and self.states[-1] != state:
            self.state_changes += 1

        self.times.append(self.elapsed)
        self.xs.append(enemy.position.x)
        self.states.append(state)
        self.state_time[state] = self.state_time.get(state, 0.0) + dt

        if state == "patrol":
            overshoot = abs(enemy.position.x - self.start_x) - self.patrol_range
            self.max_overshoot = max(self.max_overshoot, overshoot)

    def record_landing(self):
        self.landings += 1

    # ===========================================================
    #  End-of-run
    # ===========================================================

    def end_run(self, enemy=None, plot: bool = False,
                filename: str = STATS_PLOT_FILE):
        """Finalise stats, print summary, optionally save the trace plot."""
        if enemy is not None:
            self.jumps = enemy.movement.jumps
        self._print_summary()
        if plot:
            self._plot_trace(filename)

    # ===========================================================
    #  Reports
    # ===========================================================

    def _print_summary(self):
        """Print a clean formatted run summary to stdout."""
        print("\n" + "=" * 52)
        print("  PATROL RUN SUMMARY")
        print("=" * 52)
        print(f"  Duration         : {self.elapsed:.1f}s ({len(self.times)} ticks)")
        print(f"  State changes    : {self.state_changes}")
        print(f"  Jumps / Landings : {self.jumps} / {self.landings}")
        print(f"  Max overshoot    : {self.max_overshoot:.2f}px")
        print("-" * 52)
        for state, seconds in sorted(self.state_time.items()):
            print(f"  {state:<16} : {seconds:6.1f}s")
        print("=" * 52 + "\n")

    def _plot_trace(self, filename: str):
        """Save x-over-time with the patrol bounds shaded."""
        if not self.times:
            return

        fig, ax = plt.subplots(figsize=(10, 4))
        ax.axhspan(self.start_x - self.patrol_range,
                   self.start_x + self.patrol_range,
                   color="tab:green", alpha=0.15, label="patrol bound")
        ax.plot(self.times, self.xs, linewidth=1.2, label="enemy x")

        chasing = [x if s == "chase" else None
                   for x, s in zip(self.xs, self.states)]
        ax.plot(self.times, chasing, color="tab:red", linewidth=2, label="chase")

        ax.set_xlabel("Time (seconds)")
        ax.set_ylabel("x (px)")
        ax.set_title("Patrol Enemy Trace")
        ax.grid(True)
        ax.legend(loc="upper right")

        fig.savefig(filename, dpi=100, bbox_inches="tight")
        plt.close(fig)
        logger.info("Trace graph saved to %s", filename)

    # ===========================================================
    #  Data accessors
    # ===========================================================

    def as_dict(self) -> dict:
        """Return a plain dict snapshot (useful for JSON serialisation)."""
        return {
            "duration":       round(self.elapsed, 2),
            "ticks":          len(self.times),
            "state_changes":  self.state_changes,
            "landings":       self.landings,
            "jumps":          self.jumps,
            "max_overshoot":  round(self.max_overshoot, 2),
            "state_time":     {k: round(v, 2) for k, v in self.state_time.items()},
        }
