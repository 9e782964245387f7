"""Per-tick platform spawn allocation.

Each attempt draws a reach distance, turns every live platform into an
exclusion chord on the spawn line, adds the footprint of platforms whose
rect already spans that line, builds the free RegionSet for the view and
samples one x from it. Nothing is kept between attempts.
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from src.level.exclusion import platform_exclusions, sample_reach_distance
from src.level.platform_field import PlatformField
from src.level.region import Region
from src.level.region_set import InvalidDomainError, RegionSet, merge_exclusions
from src.level.spawn_sampler import sample_spawn_x
from src.level.spawn_settings import SpawnSettings
from src.systems.camera import ViewBounds

logger = logging.getLogger(__name__)


class PlatformSpawner:
    def __init__(self, settings: Optional[SpawnSettings] = None, rng: Optional[random.Random] = None):
        self.settings = settings or SpawnSettings()
        self.settings.validate()
        self.rng = rng or random.Random()

    def draw_reach(self) -> float:
        s = self.settings
        return sample_reach_distance(
            self.rng, s.distance_mean, s.distance_std, s.min_distance, s.max_distance
        )

    def spawn_domain(self, bounds: ViewBounds) -> Tuple[float, float]:
        """Horizontal range a platform centre may take so the platform stays in view."""
        half_w = self.settings.platform_width / 2.0
        left = bounds.left + half_w
        right = bounds.right - half_w
        if left > right:
            raise InvalidDomainError(
                f"Platform width {self.settings.platform_width} does not fit view "
                f"[{bounds.left}, {bounds.right}]"
            )
        return left, right

    def free_regions(
        self,
        positions: Sequence[Tuple[float, float]],
        left: float,
        right: float,
        top_y: float,
        reach: float,
    ) -> RegionSet:
        exclusions = platform_exclusions(positions, top_y, reach)
        exclusions.extend(self.footprint_exclusions(positions, top_y))
        # Chords and footprints of neighbouring platforms overlap, so coalesce before building
        return RegionSet.with_sorted(left, right, merge_exclusions(exclusions))

    def footprint_exclusions(
        self,
        positions: Sequence[Tuple[float, float]],
        top_y: float,
    ) -> List[Region]:
        """
        Centre positions where a new platform's rect would overlap one already on the line.

        Only platforms whose rect spans the spawn line (|dy| < platform height)
        block anything; each blocks one platform width either side of its centre.
        """
        w = self.settings.platform_width
        h = self.settings.platform_height
        if w <= 0:
            return []
        return [
            Region(px - w, px + w)
            for px, py in positions
            if abs(top_y - py) < h
        ]

    def find_spawn_x(
        self,
        positions: Sequence[Tuple[float, float]],
        left: float,
        right: float,
        top_y: float,
    ) -> Optional[float]:
        """
        Run one spawn attempt.

        Args:
            positions: (x, y) of every live platform
            left: Left edge of the spawn domain
            right: Right edge of the spawn domain
            top_y: Height of the spawn line

        Returns:
            Spawn x, or None when no position is free this tick
        """
        reach = self.draw_reach()
        regions = self.free_regions(positions, left, right, top_y, reach)
        x = sample_spawn_x(
            regions, self.rng, self.settings.policy, self.settings.min_region_width
        )
        if x is None:
            logger.debug("No free spawn region at y=%.1f (reach %.1f)", top_y, reach)
        else:
            logger.debug(
                "Spawn x=%.1f at y=%.1f from %d region(s), reach %.1f",
                x, top_y, len(regions), reach,
            )
        return x

    def spawn_pass(self, field: PlatformField, bounds: ViewBounds, top_y: float) -> List[float]:
        """Spawn up to max_spawns_per_tick platforms on the line, stopping once it saturates."""
        left, right = self.spawn_domain(bounds)
        positions = field.positions()
        spawned = []
        for _ in range(self.settings.max_spawns_per_tick):
            x = self.find_spawn_x(positions, left, right, top_y)
            if x is None:
                break
            rect = field.spawn_at(x, top_y)
            positions.append((float(rect.centerx), float(rect.top)))
            spawned.append(x)
        return spawned
