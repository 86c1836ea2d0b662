"""
animation_system.py – Clip playback and per-tick animation dispatch.

AnimationPlayer     : concrete AnimationPort.  Builds simple procedural
                      frames per clip (no sprite sheets), advances them
                      scaled by the speed hint, mirrors at draw time.
dispatch_animation  : picks idle/walk from movement state and only
                      restarts a clip when it actually changes.
"""

from __future__ import annotations

import logging

import pygame

from settings import (
    ANIM_FRAME_DURATION, ANIM_WALK_FRAMES, ANIM_IDLE_FRAMES, WHITE,
)
from systems.movement_system import AnimationClip, MovementState
from systems.ports import AnimationPort
from utils.helpers import sign

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════
#  Procedural frames
# ══════════════════════════════════════════════════════════

def _build_frames(clip: str, size: tuple[int, int],
                  color: tuple) -> list[pygame.Surface]:
    """Squash-and-stretch blobs with an eye on the leading side."""
    w, h = size
    count = ANIM_WALK_FRAMES if clip == "walk" else ANIM_IDLE_FRAMES
    frames = []
    for i in range(count):
        surf = pygame.Surface((w, h), pygame.SRCALPHA)
        if clip == "walk":
            squash = (0, 2, 0, -1)[i % 4]
        else:
            squash = i % 2
        body = pygame.Rect(0, squash, w, h - squash)
        pygame.draw.rect(surf, color, body, border_radius=4)
        eye_x = w - max(3, w // 4)
        pygame.draw.circle(surf, WHITE, (eye_x, squash + h // 3), max(1, w // 8))
        frames.append(surf)
    return frames


# ══════════════════════════════════════════════════════════
#  Animation Player
# ══════════════════════════════════════════════════════════

class AnimationPlayer:
    """Plays named clips; implements the AnimationPort interface."""

    CLIPS = ("idle", "walk")

    def __init__(self, size: tuple[int, int], color: tuple = WHITE):
        self.size = size
        self.color = color
        self._frames: dict[str, list[pygame.Surface]] = {}
        self.current: str | None = None
        self.speed_scale: float = 1.0
        self.flipped: bool = False
        self.frame_index: int = 0
        self._frame_timer: float = 0.0
        self.plays: int = 0
        self.set_color(color)

    def set_color(self, color: tuple):
        self.color = color
        self._frames = {
            clip: _build_frames(clip, self.size, color) for clip in self.CLIPS
        }

    # ── AnimationPort ─────────────────────────────────────

    def play(self, clip_name: str, speed_scale: float = 1.0):
        if clip_name not in self._frames:
            raise KeyError(f"unknown clip {clip_name!r}")
        self.current = clip_name
        self.speed_scale = speed_scale
        self.frame_index = 0
        self._frame_timer = 0.0
        self.plays += 1

    def set_flip(self, flipped: bool):
        self.flipped = flipped

    # ── Per-frame ─────────────────────────────────────────

    def update(self, dt: float):
        if self.current is None or self.speed_scale <= 0:
            return
        self._frame_timer += dt * self.speed_scale
        frames = self._frames[self.current]
        while self._frame_timer >= ANIM_FRAME_DURATION:
            self._frame_timer -= ANIM_FRAME_DURATION
            self.frame_index = (self.frame_index + 1) % len(frames)

    @property
    def image(self) -> pygame.Surface:
        clip = self.current or "idle"
        frame = self._frames[clip][self.frame_index % len(self._frames[clip])]
        if self.flipped:
            frame = pygame.transform.flip(frame, True, False)
        return frame

    def draw(self, surface: pygame.Surface, rect: pygame.Rect):
        surface.blit(self.image, rect.topleft)


# ══════════════════════════════════════════════════════════
#  Dispatch
# ══════════════════════════════════════════════════════════

def choose_clip(state: MovementState) -> AnimationClip | None:
    """Clip the movement state asks for, or None to leave it unchanged."""
    if state.on_ground:
        return AnimationClip.WALK if state.target_speed != 0 else AnimationClip.IDLE
    if state.velocity.y >= 0:
        return AnimationClip.IDLE
    return None


def dispatch_animation(state: MovementState, port: AnimationPort,
                       max_speed: float, form_flipped: bool, facing: int) -> int:
    """Push this tick's clip and facing to *port*.  Returns updated facing.

    ``facing`` is the last non-zero travel sign; it is kept while the
    character stands still so an idle enemy doesn't snap around.
    """
    clip = choose_clip(state)
    if clip is not None and clip != state.current_animation:
        if clip is AnimationClip.WALK and max_speed > 0:
            speed = abs(state.target_speed) / max_speed
        else:
            speed = 1.0
        port.play(clip.value, speed)
        state.current_animation = clip

    if state.target_speed != 0:
        facing = sign(state.target_speed)
    port.set_flip((facing < 0) != form_flipped)
    return facing
