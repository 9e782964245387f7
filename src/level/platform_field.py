import logging
from typing import List, Tuple

import pygame

from config import PLATFORM_H, PLATFORM_W

logger = logging.getLogger(__name__)


class PlatformField:
    """Live platforms of the ascending world, stored as pygame rects."""

    def __init__(self, platform_w: int = PLATFORM_W, platform_h: int = PLATFORM_H):
        self.platform_w = platform_w
        self.platform_h = platform_h
        self.platforms: List[pygame.Rect] = []
        self.ground = None

    def add_ground(self, left: float, top: float, width: float, height: float) -> pygame.Rect:
        """Place the starting ground strip. It counts as a platform for spawning."""
        self.ground = pygame.Rect(int(left), int(top), int(width), int(height))
        self.platforms.append(self.ground)
        return self.ground

    def positions(self) -> List[Tuple[float, float]]:
        """Snapshot of (center x, top) for every live platform."""
        return [(float(p.centerx), float(p.top)) for p in self.platforms]

    def spawn_at(self, x: float, top_y: float) -> pygame.Rect:
        rect = pygame.Rect(0, 0, self.platform_w, self.platform_h)
        rect.centerx = int(round(x))
        rect.top = int(round(top_y))
        self.platforms.append(rect)
        logger.debug("Spawned platform at (%d, %d)", rect.centerx, rect.top)
        return rect

    def despawn_below(self, view_bottom: float) -> int:
        """Drop platforms whose top edge has scrolled below the view. Returns how many."""
        kept = [p for p in self.platforms if p.top <= view_bottom]
        removed = len(self.platforms) - len(kept)
        if self.ground is not None and self.ground.top > view_bottom:
            self.ground = None
        self.platforms = kept
        if removed:
            logger.debug("Despawned %d platform(s) below y=%.1f", removed, view_bottom)
        return removed

    def clear(self) -> None:
        self.platforms = []
        self.ground = None

    def __len__(self) -> int:
        return len(self.platforms)
