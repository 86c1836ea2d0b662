"""
physics_system.py – pygame-backed physics body and edge sensor.

PlatformWorld  : static solids as pygame.Rect
KinematicBody  : float-positioned AABB that moves by a velocity and
                 slides along solids (axis-separated: X then Y)
RayEdgeSensor  : vertical segment cast below a point ahead of the body,
                 using pygame.Rect.clipline

Y grows downward, as in pygame.  Floor contact means the body was
pushed up out of a solid while moving down this step; wall contact
means horizontal motion was blocked.
"""

from __future__ import annotations

import logging

import pygame

from systems.ports import ContactResult, RayHit

logger = logging.getLogger(__name__)


class PlatformWorld:
    """Static level geometry."""

    def __init__(self, solids=()):
        self.solids: list[pygame.Rect] = [pygame.Rect(s) for s in solids]

    def add_solid(self, rect) -> pygame.Rect:
        solid = pygame.Rect(rect)
        self.solids.append(solid)
        return solid

    def overlapping(self, x: float, y: float, w: float, h: float):
        """Yield solids overlapping the float box (touching edges don't count)."""
        for solid in self.solids:
            if (x < solid.right and x + w > solid.left
                    and y < solid.bottom and y + h > solid.top):
                yield solid

    def segment_hits(self, start, end) -> bool:
        for solid in self.solids:
            if solid.clipline(start, end):
                return True
        return False

    def draw(self, surface: pygame.Surface, color):
        for solid in self.solids:
            pygame.draw.rect(surface, color, solid)


class KinematicBody:
    """Axis-aligned box that moves through a PlatformWorld."""

    def __init__(self, world: PlatformWorld, x: float, y: float,
                 width: int, height: int):
        self.world = world
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        self._on_floor = False
        self._on_wall = False

    # ── Geometry ──────────────────────────────────────────

    @property
    def position(self) -> pygame.math.Vector2:
        return pygame.math.Vector2(self.x + self.width / 2,
                                   self.y + self.height / 2)

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(round(self.x), round(self.y),
                           self.width, self.height)

    # ── PhysicsBody port ──────────────────────────────────

    def apply_velocity_and_resolve(self, velocity: pygame.math.Vector2,
                                   delta: float) -> ContactResult:
        vel = pygame.math.Vector2(velocity)
        self._on_floor = False
        self._on_wall = False

        # Horizontal pass
        self.x += vel.x * delta
        for solid in self.world.overlapping(self.x, self.y,
                                            self.width, self.height):
            if vel.x > 0:
                self.x = solid.left - self.width
            elif vel.x < 0:
                self.x = solid.right
            else:
                continue
            vel.x = 0.0
            self._on_wall = True

        # Vertical pass
        self.y += vel.y * delta
        for solid in self.world.overlapping(self.x, self.y,
                                            self.width, self.height):
            if vel.y > 0:
                self.y = solid.top - self.height
                self._on_floor = True
            elif vel.y < 0:
                self.y = solid.bottom
            else:
                continue
            vel.y = 0.0

        return ContactResult(on_floor=self._on_floor,
                             on_wall=self._on_wall,
                             velocity=vel)

    def query_floor(self) -> bool:
        return self._on_floor

    def query_wall(self) -> bool:
        return self._on_wall

    def draw(self, surface: pygame.Surface, color):
        pygame.draw.rect(surface, color, self.rect)


class RayEdgeSensor:
    """Downward ray cast from the body's feet, shifted sideways."""

    def __init__(self, body: KinematicBody):
        self.body = body

    def cast_downward(self, origin_offset_x: float, length: float) -> RayHit:
        ox = round(self.body.position.x + origin_offset_x)
        oy = round(self.body.bottom)
        hit = self.body.world.segment_hits((ox, oy), (ox, oy + round(length)))
        return RayHit(hit=hit)
