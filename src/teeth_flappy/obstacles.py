"""
obstacles.py: Scrolling columns with a random gap narrowed by triangular teeth.
"""

import random
from typing import List, Optional, Tuple

import pygame

from .constants import (
    SCREEN_WIDTH, PLAY_BOTTOM, COLUMN_WIDTH, SCROLL_SPEED,
    MIN_GAP_H, MAX_GAP_H, GAP_MARGIN, GAP_OFFSET,
    TEETH_COUNT, TOOTH_LEN, TOOTH_INSET,
    PILLAR_COLOR, TOOTH_COLOR, OUTLINE_COLOR
)
from .data_models import Triangle
from .geometry import Point, circle_intersects_triangle


class TeethColumn:
    """
    One obstacle column.

    The gap and the teeth are fixed at creation. Teeth are stored in
    column-local x and shifted by the current x at query and draw time.
    """

    def __init__(self, x: float, gap_y: float, gap_height: int):
        self.x = x
        self.gap_y = gap_y
        self.gap_height = gap_height
        self.scored = False
        self._outline: Optional[pygame.Surface] = None
        self.top_teeth: Tuple[Triangle, ...] = ()
        self.bottom_teeth: Tuple[Triangle, ...] = ()
        self._build_teeth()

    @classmethod
    def spawn(cls, rng: random.Random) -> "TeethColumn":
        """Creates a column at the right edge with a random gap."""
        gap_height = rng.randint(MIN_GAP_H, MAX_GAP_H)
        gap_y = rng.uniform(GAP_MARGIN + GAP_OFFSET, PLAY_BOTTOM - GAP_MARGIN - gap_height)
        return cls(float(SCREEN_WIDTH), gap_y, gap_height)

    def _build_teeth(self):
        cell_w = COLUMN_WIDTH / max(1, TEETH_COUNT)
        inset = min(TOOTH_INSET, cell_w * 0.35)
        gap_bottom = self.gap_bottom
        top: List[Triangle] = []
        bottom: List[Triangle] = []
        for i in range(TEETH_COUNT):
            left = i * cell_w + inset
            right = (i + 1) * cell_w - inset
            mid = 0.5 * (left + right)
            # Top row points down, bottom row points up
            top.append(Triangle(left, self.gap_y, right, self.gap_y, mid, self.gap_y + TOOTH_LEN))
            bottom.append(Triangle(left, gap_bottom, right, gap_bottom, mid, gap_bottom - TOOTH_LEN))
        self.top_teeth = tuple(top)
        self.bottom_teeth = tuple(bottom)

    @property
    def gap_bottom(self) -> float:
        return self.gap_y + self.gap_height

    @property
    def gap_center_y(self) -> float:
        return self.gap_y + self.gap_height * 0.5

    @property
    def right_edge(self) -> float:
        return self.x + COLUMN_WIDTH

    def advance(self):
        self.x -= SCROLL_SPEED

    def is_offscreen(self) -> bool:
        return self.right_edge < 0

    def overlaps_horizontally(self, player_x: float, radius: float) -> bool:
        """Broad phase: does the player's horizontal extent meet the column?"""
        return player_x + radius > self.x and player_x - radius < self.right_edge

    def world_teeth(self) -> List[Tuple[Point, Point, Point]]:
        return [t.translated(self.x) for t in self.top_teeth + self.bottom_teeth]

    def collides_with_circle(self, center: Point, radius: float) -> bool:
        """Narrow phase: exact test against every tooth."""
        return any(
            circle_intersects_triangle(center, radius, a, b, c)
            for a, b, c in self.world_teeth()
        )

    def _outline_layer(self) -> pygame.Surface:
        """Translucent pillar strokes, built on first use; the gap never changes."""
        if self._outline is None:
            layer = pygame.Surface((COLUMN_WIDTH, PLAY_BOTTOM), pygame.SRCALPHA)
            lower_height = PLAY_BOTTOM - self.gap_bottom
            pygame.draw.rect(layer, OUTLINE_COLOR, (0, 0, COLUMN_WIDTH, int(self.gap_y)), width=1)
            pygame.draw.rect(layer, OUTLINE_COLOR,
                             (0, int(self.gap_bottom), COLUMN_WIDTH, int(lower_height)), width=1)
            self._outline = layer
        return self._outline

    def draw(self, surface: pygame.Surface):
        """Renders pillars, teeth and a faint outline onto surface."""
        lower_height = PLAY_BOTTOM - self.gap_bottom
        top_rect = pygame.Rect(int(self.x), 0, COLUMN_WIDTH, int(self.gap_y))
        bottom_rect = pygame.Rect(int(self.x), int(self.gap_bottom), COLUMN_WIDTH, int(lower_height))

        pygame.draw.rect(surface, PILLAR_COLOR, top_rect)
        pygame.draw.rect(surface, PILLAR_COLOR, bottom_rect)

        for a, b, c in self.world_teeth():
            pygame.draw.polygon(surface, TOOTH_COLOR, (a, b, c))

        surface.blit(self._outline_layer(), (int(self.x), 0))
