"""Free-space partition of a spawn line.

A RegionSet is built from a bounding domain and a batch of exclusions that
is sorted by lower bound and mutually disjoint. Because of that ordering an
exclusion can only ever touch the still-open right-most region (the
frontier), so the whole build is a single linear pass.

The builder does not check the ordering unless asked to (strict=True).
Callers holding an arbitrary batch should run it through merge_exclusions
first.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from src.level.region import Region

logger = logging.getLogger(__name__)


class InvalidDomainError(ValueError):
    """Raised when a spawn domain has lower > upper."""


class ExclusionOrderError(ValueError):
    """Raised when an exclusion batch is not sorted and disjoint."""


def check_sorted_disjoint(exclusions: Sequence[Region]) -> None:
    """
    Verify the builder precondition.

    Raises:
        ExclusionOrderError: on the first pair that is out of order or overlaps
    """
    for prev, cur in zip(exclusions, exclusions[1:]):
        if cur.lower < prev.lower:
            raise ExclusionOrderError(
                f"Exclusions not sorted: {cur} comes after {prev}"
            )
        if cur.lower < prev.upper:
            raise ExclusionOrderError(f"Exclusions overlap: {prev} and {cur}")


def merge_exclusions(exclusions: Iterable[Region]) -> List[Region]:
    """
    Sort exclusions by lower bound and coalesce overlapping or touching ones.

    The result always satisfies check_sorted_disjoint.
    """
    merged: List[Region] = []
    for exclusion in sorted(exclusions, key=lambda r: (r.lower, r.upper)):
        if merged and exclusion.lower <= merged[-1].upper:
            last = merged[-1]
            if exclusion.upper > last.upper:
                merged[-1] = Region(last.lower, exclusion.upper)
        else:
            merged.append(exclusion)
    return merged


class RegionSet:
    """Sorted, disjoint regions left free after applying exclusions to a domain."""

    def __init__(self, domain: Region, regions: List[Region]):
        self._domain = domain
        self._set = regions

    @classmethod
    def with_sorted(
        cls,
        lower_bound: float,
        upper_bound: float,
        sorted_exclusions: Iterable[Region],
        strict: bool = False,
    ) -> "RegionSet":
        """
        Build the free set for [lower_bound, upper_bound].

        Args:
            lower_bound: Left edge of the domain
            upper_bound: Right edge of the domain
            sorted_exclusions: Exclusions sorted by lower, pairwise disjoint
            strict: Check the ordering precondition before building

        Returns:
            RegionSet of the remaining free space

        Raises:
            InvalidDomainError: if lower_bound > upper_bound
            ExclusionOrderError: if strict and the batch is unsorted/overlapping
        """
        if lower_bound > upper_bound:
            raise InvalidDomainError(
                f"Spawn domain is inverted: [{lower_bound}, {upper_bound}]"
            )
        if strict:
            sorted_exclusions = list(sorted_exclusions)
            check_sorted_disjoint(sorted_exclusions)

        domain = Region(lower_bound, upper_bound)
        finalized: List[Region] = []
        # A zero-width domain has nothing to offer
        frontier: Optional[Region] = domain if lower_bound < upper_bound else None

        for exclusion in sorted_exclusions:
            if frontier is None:
                # Fully consumed; the rest of the batch lies beyond the domain
                break
            lower_piece = frontier.exclude_above_point(exclusion.lower)
            upper_piece = frontier.exclude_below_point(exclusion.upper)

            if lower_piece is not None and upper_piece is not None:
                finalized.append(lower_piece)
                frontier = upper_piece
            elif lower_piece is not None:
                frontier = lower_piece
            elif upper_piece is not None:
                frontier = upper_piece
            else:
                frontier = None

        if frontier is not None:
            finalized.append(frontier)

        logger.debug(
            "Built %d free region(s) in [%.1f, %.1f]",
            len(finalized), lower_bound, upper_bound,
        )
        return cls(domain, finalized)

    @property
    def domain(self) -> Region:
        return self._domain

    @property
    def regions(self) -> Tuple[Region, ...]:
        return tuple(self._set)

    def total_width(self) -> float:
        return sum(r.width for r in self._set)

    def __len__(self) -> int:
        return len(self._set)

    def __iter__(self) -> Iterator[Region]:
        return iter(self._set)

    def __getitem__(self, index: int) -> Region:
        return self._set[index]

    def __bool__(self) -> bool:
        return bool(self._set)

    def __repr__(self) -> str:
        inner = ", ".join(f"[{r.lower:g}, {r.upper:g}]" for r in self._set)
        return f"RegionSet({inner})"
