import pygame
import logging
logger = logging.getLogger(__name__)

from config import BG, GREEN, RED, WHITE
from src.core.utils import draw_label


class DebugOverlays:
    """Draws the last spawn attempt's free regions on the spawn line."""

    def __init__(self, game):
        self.game = game

    def draw_region_overlay(self):
        game = self.game
        if not getattr(game, 'debug_show_regions', False):
            return
        regions = getattr(game, 'last_regions', None)
        if regions is None:
            return

        cam = game.camera
        overlay = pygame.Surface(game.screen.get_size(), pygame.SRCALPHA)
        _, sy = cam.to_screen((0, game.last_spawn_line))
        sy = max(2, sy)

        # Whole domain in red, free regions over it in green
        dl, _ = cam.to_screen((regions.domain.lower, 0))
        du, _ = cam.to_screen((regions.domain.upper, 0))
        pygame.draw.line(overlay, (*RED, 160), (dl, sy), (du, sy), 3)
        for region in regions:
            x0, _ = cam.to_screen((region.lower, 0))
            x1, _ = cam.to_screen((region.upper, 0))
            pygame.draw.line(overlay, (*GREEN, 220), (x0, sy), (x1, sy), 5)

        game.screen.blit(overlay, (0, 0))

        label = (f"free={len(regions)} width={regions.total_width():.0f} "
                 f"reach={game.last_reach:.1f} platforms={len(game.field)}")
        try:
            draw_label(game.screen, label, (8, 8), WHITE, size=18, bg=BG)
        except pygame.error:
            logger.exception("Debug label draw failed")
