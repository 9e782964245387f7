from typing import NamedTuple

import pygame
from config import WIDTH, HEIGHT, SCROLL_SPEED, SPAWN_MARGIN


class ViewBounds(NamedTuple):
    left: float
    right: float
    top: float
    bottom: float


class Camera:
    """Camera that climbs at a constant speed. World y grows downward, so climbing lowers y."""

    def __init__(self, x=0.0, y=0.0, scroll_speed=SCROLL_SPEED, spawn_margin=SPAWN_MARGIN,
                 view_w=WIDTH, view_h=HEIGHT):
        self.x = x
        self.y = y
        self.scroll_speed = scroll_speed
        self.spawn_margin = spawn_margin
        self.view_w = view_w
        self.view_h = view_h
        self.zoom = 1.0

    def update(self, dt: float):
        self.y -= self.scroll_speed * dt

    def view_bounds(self) -> ViewBounds:
        w = self.view_w / self.zoom
        h = self.view_h / self.zoom
        return ViewBounds(self.x, self.x + w, self.y, self.y + h)

    def spawn_line(self) -> float:
        """World y where new platforms are placed."""
        return self.y - self.spawn_margin

    def to_screen(self, p):
        return (int((p[0] - self.x) * self.zoom), int((p[1] - self.y) * self.zoom))

    def to_screen_rect(self, r: pygame.Rect):
        return pygame.Rect(
            int((r.x - self.x) * self.zoom),
            int((r.y - self.y) * self.zoom),
            int(r.w * self.zoom),
            int(r.h * self.zoom)
        )
