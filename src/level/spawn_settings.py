from dataclasses import dataclass

from config import (
    MAX_PLATFORM_DISTANCE,
    MAX_SPAWNS_PER_TICK,
    MIN_PLATFORM_DISTANCE,
    MIN_REGION_WIDTH,
    PLATFORM_DISTANCE_MEAN,
    PLATFORM_DISTANCE_STD,
    PLATFORM_H,
    PLATFORM_W,
    SAMPLING_POLICY,
)
from src.level.spawn_sampler import SamplingPolicy


@dataclass
class SpawnSettings:
    """
    Tuning for the platform spawn allocator.

    Attributes:
        distance_mean: Mean of the reach distance distribution
        distance_std: Standard deviation of the reach distance distribution
        min_distance: Lower clamp of the reach distance
        max_distance: Upper clamp of the reach distance
        sampling_policy: "index" or "width" (see SamplingPolicy)
        min_region_width: Free regions narrower than this are skipped
        max_spawns_per_tick: Upper bound of platforms placed in one pass
        platform_width: Width of spawned platforms; the domain is inset by half of it
        platform_height: Height of spawned platforms; platforms this close to the
            spawn line also block their own footprint
    """
    distance_mean: float = PLATFORM_DISTANCE_MEAN
    distance_std: float = PLATFORM_DISTANCE_STD
    min_distance: float = MIN_PLATFORM_DISTANCE
    max_distance: float = MAX_PLATFORM_DISTANCE
    sampling_policy: str = SAMPLING_POLICY
    min_region_width: float = MIN_REGION_WIDTH
    max_spawns_per_tick: int = MAX_SPAWNS_PER_TICK
    platform_width: int = PLATFORM_W
    platform_height: int = PLATFORM_H

    @property
    def policy(self) -> SamplingPolicy:
        return SamplingPolicy.from_name(self.sampling_policy)

    def validate(self) -> None:
        if self.distance_std < 0:
            raise ValueError("SpawnSettings.distance_std must be >= 0")
        if self.min_distance <= 0:
            raise ValueError("SpawnSettings.min_distance must be positive")
        if self.min_distance > self.max_distance:
            raise ValueError("SpawnSettings.min_distance must not exceed max_distance")
        if self.min_region_width < 0:
            raise ValueError("SpawnSettings.min_region_width must be >= 0")
        if self.max_spawns_per_tick < 1:
            raise ValueError("SpawnSettings.max_spawns_per_tick must be at least 1")
        if self.platform_width < 0:
            raise ValueError("SpawnSettings.platform_width must be >= 0")
        if self.platform_height < 0:
            raise ValueError("SpawnSettings.platform_height must be >= 0")
        SamplingPolicy.from_name(self.sampling_policy)
