"""
main.py - Entry point for the patrol enemy demo.

Windowed demo:
    python main.py
        Left/Right  move the player      Space/Up  jump
        S           stun the enemy       A         inject an attack
        D           despawn / respawn the player
        R           restart              ESC       quit

Headless simulation:
    python main.py --simulate 60 [--seed 7] [--plot] [--verbose]
"""
VERSION = "1.0.0"

import argparse
import logging
import sys

import pygame

logger = logging.getLogger(__name__)

# ── Project imports ───────────────────────────────────────
from settings import SCREEN_WIDTH, SCREEN_HEIGHT, FPS, FIXED_DT, TITLE, BG_COLOR, YELLOW
from scene import Scene
from utils import draw_text


# ══════════════════════════════════════════════════════════
#  GAME CLASS
# ══════════════════════════════════════════════════════════

class Game:
    """Top-level demo controller.  Owns the loop, events, and rendering."""

    def __init__(self, seed: int | None = None):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.seed = seed
        self.scene = Scene(seed=seed)
        self.running = True
        self._accumulator = 0.0

    # ── Main loop ─────────────────────────────────────────

    def run(self):
        """Start the game loop (fixed-step physics, variable render)."""
        while self.running:
            frame_dt = self.clock.tick(FPS) / 1000.0
            self._handle_events()

            # Clamp so a stalled window doesn't fast-forward the world
            self._accumulator += min(frame_dt, 0.25)
            while self._accumulator >= FIXED_DT:
                self.scene.player.handle_keys(pygame.key.get_pressed())
                self.scene.update(FIXED_DT)
                self._accumulator -= FIXED_DT

            self._draw()

        pygame.quit()
        sys.exit()

    # ── Events ────────────────────────────────────────────

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_r:
                    logger.info("Restarting scene")
                    self.scene = Scene(seed=self.seed)
                elif event.key == pygame.K_s:
                    self.scene.enemy.stun()
                elif event.key == pygame.K_a:
                    self.scene.enemy.begin_attack()
                elif event.key == pygame.K_d:
                    if self.scene.player.alive:
                        self.scene.despawn_player()
                    else:
                        self.scene.respawn_player()

    # ── Rendering ─────────────────────────────────────────

    def _draw(self):
        self.screen.fill(BG_COLOR)
        self.scene.draw(self.screen)
        if self.scene.enemy.player_in_attack_range():
            draw_text(self.screen, "in attack range", SCREEN_WIDTH - 140, 16, YELLOW)
        draw_text(self.screen, f"v{VERSION}", SCREEN_WIDTH - 50, SCREEN_HEIGHT - 20)
        pygame.display.flip()


# ══════════════════════════════════════════════════════════
#  CLI
# ══════════════════════════════════════════════════════════

def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument("--simulate", type=float, metavar="SECONDS",
                        help="run headless for SECONDS of simulated time")
    parser.add_argument("--seed", type=int, default=None,
                        help="RNG seed for idle timing and form picks")
    parser.add_argument("--plot", action="store_true",
                        help="save the enemy x-trace graph after --simulate")
    parser.add_argument("--verbose", action="store_true",
                        help="log AI transitions (DEBUG)")
    args = parser.parse_args(argv)
    if args.simulate is not None and args.simulate <= 0:
        parser.error("--simulate must be a positive number of seconds")
    return args


def main(argv=None):
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    if args.simulate is not None:
        from ai.simulation_runner import SimulationRunner
        SimulationRunner(args.simulate, seed=args.seed, plot=args.plot).run()
        return
    Game(seed=args.seed).run()


# ── Run ───────────────────────────────────────────────────
if __name__ == "__main__":
    main()
