import sys
import random

import pygame
import logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Reduce verbosity of per-tick spawn modules (only show warnings/errors)
logging.getLogger('src.level.platform_spawner').setLevel(logging.WARNING)
logging.getLogger('src.level.platform_field').setLevel(logging.WARNING)
logging.getLogger('src.level.region_set').setLevel(logging.WARNING)

from config import (
    WIDTH,
    HEIGHT,
    FPS,
    BG,
    SKY_BLUE,
    GROUND_COL,
    PLATFORM_COL,
    GROUND_H,
)

from src.systems.camera import Camera
from src.level.config_loader import load_spawn_settings, load_spawn_runtime_config, resolve_seed
from src.level.platform_field import PlatformField
from src.level.platform_spawner import PlatformSpawner
from src.debug.overlays import DebugOverlays


class Game:
    def __init__(self):
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Skyward")
        self.clock = pygame.time.Clock()

        self.settings = load_spawn_settings()
        runtime = load_spawn_runtime_config()
        self.seed = resolve_seed(runtime)
        self.debug_show_regions = runtime.show_regions
        self.debug = DebugOverlays(self)

        self.last_regions = None
        self.last_reach = 0.0
        self.last_spawn_line = 0.0
        self.reset(self.seed)

    def reset(self, seed):
        logger.info("Starting world with seed %d", seed)
        self.rng = random.Random(seed)
        self.camera = Camera()
        self.spawner = PlatformSpawner(self.settings, self.rng)
        self.field = PlatformField(
            platform_w=self.settings.platform_width, platform_h=self.settings.platform_height
        )
        bounds = self.camera.view_bounds()
        self.field.add_ground(bounds.left, bounds.bottom - GROUND_H, bounds.right - bounds.left, GROUND_H)

    def update(self, dt):
        self.camera.update(dt)
        bounds = self.camera.view_bounds()
        self.field.despawn_below(bounds.bottom)

        spawn_line = self.camera.spawn_line()
        self.spawner.spawn_pass(self.field, bounds, spawn_line)

        if self.debug_show_regions:
            # Overlay uses the mean reach so it does not consume the spawn RNG
            left, right = self.spawner.spawn_domain(bounds)
            self.last_reach = self.settings.distance_mean
            self.last_spawn_line = spawn_line
            self.last_regions = self.spawner.free_regions(
                self.field.positions(), left, right, spawn_line, self.last_reach
            )

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_r:
                    self.reset(self.seed)
                elif event.key == pygame.K_F1:
                    self.debug_show_regions = not self.debug_show_regions
                    self.last_regions = None
        return True

    def draw(self):
        self.screen.fill(BG)
        self.screen.fill(SKY_BLUE, pygame.Rect(0, 0, WIDTH, HEIGHT))
        for p in self.field.platforms:
            col = GROUND_COL if p is self.field.ground else PLATFORM_COL
            pygame.draw.rect(self.screen, col, self.camera.to_screen_rect(p))
        self.debug.draw_region_overlay()
        pygame.display.flip()

    def run(self):
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0  # Convert milliseconds to seconds
            running = self.handle_events()
            try:
                self.update(dt)
            except ValueError:
                logger.exception('Spawn update failed')
                running = False
            self.draw()
        pygame.quit()


def main():
    Game().run()
    sys.exit(0)


if __name__ == '__main__':
    main()
