"""Ray/shape intersection records and hit selection.

An ``Intersection`` pairs a ray parameter ``t`` with the shape that was hit.
Shapes are immutable values compared structurally, so holding the shape
itself gives the same semantics as holding a copy of it: two intersections
refer to "the same shape" exactly when the shapes compare equal.

``IntersectionList`` keeps intersections in insertion order. It is only
guaranteed to be sorted by ``t`` once :meth:`IntersectionList.sort` or
:meth:`IntersectionList.hit` has been called.

Example:
    >>> from whitted.core.intersection import Intersection, IntersectionList
    >>> from whitted.geometry.sphere import Sphere
    >>> s = Sphere()
    >>> xs = IntersectionList([Intersection(-1.0, s), Intersection(1.0, s)])
    >>> xs.hit().t
    1.0
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape


@dataclass(frozen=True)
class Intersection:
    """A single intersection of a ray with a shape.

    Attributes:
        t: Ray parameter at the intersection. May be negative (behind the
            origin), zero, or non-finite; filtering happens at hit selection.
        shape: The shape that was intersected.
    """

    t: float
    shape: Shape


class IntersectionList:
    """An ordered collection of intersections.

    Args:
        intersections: Initial intersections, kept in the given order.
    """

    def __init__(self, intersections: Iterable[Intersection] = ()) -> None:
        self._items: list[Intersection] = list(intersections)

    def sort(self) -> IntersectionList:
        """Sort in place by ascending ``t`` and return self.

        NaN values are placed last so sorting never fails.
        """
        self._items.sort(key=_sort_key)
        return self

    def hit(self) -> Intersection | None:
        """Return the visible intersection, if any.

        Sorts the list, then picks the intersection with the smallest ``t``
        that is finite and strictly positive.

        Returns:
            The nearest valid intersection, or None when no intersection lies
            in front of the ray origin.
        """
        self.sort()
        for intersection in self._items:
            if math.isfinite(intersection.t) and intersection.t > 0.0:
                return intersection
        return None

    def extend(self, intersections: Iterable[Intersection]) -> None:
        self._items.extend(intersections)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Intersection:
        return self._items[index]

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntersectionList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        ts = ", ".join(f"{ix.t:g}" for ix in self._items)
        return f"IntersectionList([{ts}])"


def _sort_key(intersection: Intersection) -> tuple[bool, float]:
    return (math.isnan(intersection.t), intersection.t)
