from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Region:
    """
    Closed horizontal interval [lower, upper] on a spawn line.

    Region objects are treated as IMMUTABLE and copied freely.
    A region is only ever valid with lower < upper; clipping operations
    that would leave nothing (or a single point) return None instead.

    Attributes:
        lower: Left boundary (world x)
        upper: Right boundary (world x)
    """
    lower: float
    upper: float

    @property
    def width(self) -> float:
        return self.upper - self.lower

    @property
    def midpoint(self) -> float:
        return (self.lower + self.upper) / 2.0

    def contains(self, x: float) -> bool:
        """Inclusive point test."""
        return self.lower <= x <= self.upper

    def exclude_below_point(self, point: float) -> Optional["Region"]:
        """
        Intersect with [point, +inf).

        Returns the part of this region above point, or None when that
        part has no width.
        """
        inner_boundary = max(point, self.lower)
        if inner_boundary < self.upper:
            return Region(inner_boundary, self.upper)
        return None

    def exclude_above_point(self, point: float) -> Optional["Region"]:
        """
        Intersect with (-inf, point].

        Returns the part of this region below point, or None when that
        part has no width.
        """
        inner_boundary = min(point, self.upper)
        if inner_boundary > self.lower:
            return Region(self.lower, inner_boundary)
        return None
