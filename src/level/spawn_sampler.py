"""Pick a spawn x from a free RegionSet."""

import random
from enum import Enum
from typing import Optional

from src.level.region import Region
from src.level.region_set import RegionSet


class SamplingPolicy(Enum):
    INDEX_UNIFORM = "index"     # every free region equally likely
    WIDTH_WEIGHTED = "width"    # regions weighted by their width

    @classmethod
    def from_name(cls, name: str) -> "SamplingPolicy":
        try:
            return cls(name)
        except ValueError:
            raise ValueError(
                f"Unknown sampling policy '{name}', expected one of "
                f"{[p.value for p in cls]}"
            ) from None


def choose_region(
    region_set: RegionSet,
    rng: random.Random,
    policy: SamplingPolicy = SamplingPolicy.INDEX_UNIFORM,
    min_width: float = 0.0,
) -> Optional[Region]:
    """
    Select one region of the set.

    Args:
        region_set: Free regions on the spawn line
        rng: Random number generator
        policy: How regions are weighted
        min_width: Regions narrower than this are never chosen

    Returns:
        The chosen region, or None if nothing qualifies
    """
    candidates = [r for r in region_set if r.width >= min_width]
    if not candidates:
        return None
    if policy is SamplingPolicy.WIDTH_WEIGHTED:
        return rng.choices(candidates, weights=[r.width for r in candidates], k=1)[0]
    return candidates[rng.randrange(len(candidates))]


def sample_spawn_x(
    region_set: RegionSet,
    rng: random.Random,
    policy: SamplingPolicy = SamplingPolicy.INDEX_UNIFORM,
    min_width: float = 0.0,
) -> Optional[float]:
    """Uniform point inside a chosen region, or None when there is no valid spawn position."""
    region = choose_region(region_set, rng, policy, min_width)
    if region is None:
        return None
    x = rng.uniform(region.lower, region.upper)
    # uniform() may round past upper by an ulp
    return max(region.lower, min(x, region.upper))
