import math
import random
from typing import Iterable, List, Optional, Tuple

from src.level.region import Region


def sample_reach_distance(
    rng: random.Random,
    mean: float,
    std: float,
    min_distance: float,
    max_distance: float,
) -> float:
    """Draw one reach distance from Normal(mean, std), clamped to [min, max]."""
    sample = rng.gauss(mean, std)
    return max(min_distance, min(sample, max_distance))


def chord_half_width(reach: float, dy: float) -> float:
    """Half the chord a horizontal line at offset dy cuts from a circle of radius reach."""
    # dy close to reach can leave a tiny negative radicand
    return math.sqrt(max(0.0, reach * reach - dy * dy))


def reach_exclusion(
    px: float,
    py: float,
    top_y: float,
    reach: float
) -> Optional[Region]:
    """
    Horizontal band at top_y that lies within reach of a platform at (px, py).

    Reach is treated as a circle of radius `reach` around the platform; the
    chord it cuts on the spawn line is where a new platform would be too close.

    Args:
        px: Platform x
        py: Platform y
        top_y: Height of the spawn line
        reach: Circle radius

    Returns:
        The excluded chord, or None if the spawn line misses the circle
    """
    dy = top_y - py
    if abs(dy) >= reach:
        return None
    dx = chord_half_width(reach, dy)
    if dx <= 0.0:
        return None
    return Region(px - dx, px + dx)


def platform_exclusions(
    positions: Iterable[Tuple[float, float]],
    top_y: float,
    reach: float
) -> List[Region]:
    """Exclusion chords for every platform in reach, sorted by lower bound."""
    exclusions = []
    for px, py in positions:
        exclusion = reach_exclusion(px, py, top_y, reach)
        if exclusion is not None:
            exclusions.append(exclusion)
    exclusions.sort(key=lambda r: r.lower)
    return exclusions
