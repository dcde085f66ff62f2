# geometry/intersection.py
from typing import Iterable, Iterator, Optional


class Intersection:
    """
    A ray parameter t paired with the index of the shape that was crossed.
    """
    __slots__ = ("t", "object_id")

    def __init__(self, t: float, object_id: int):
        self.t = t
        self.object_id = object_id

    def __eq__(self, other) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t == other.t and self.object_id == other.object_id

    def __hash__(self) -> int:
        return hash((self.t, self.object_id))

    def __repr__(self) -> str:
        return f"Intersection(t={self.t}, object_id={self.object_id})"


class Intersections:
    """
    Intersections sorted by ascending t. Negative t values are kept: they do
    not count as hits, but the refractive-index bookkeeping still walks them.
    """
    def __init__(self, intersections: Iterable[Intersection] = ()):
        # sorted() is stable, so equal t values keep their input order
        self._items = sorted(intersections, key=lambda i: i.t)

    def hit(self) -> Optional[Intersection]:
        """
        Returns the intersection with the smallest non-negative t, if any.
        """
        for i in self._items:
            if i.t >= 0:
                return i
        return None

    def hit_index(self) -> Optional[int]:
        for index, i in enumerate(self._items):
            if i.t >= 0:
                return index
        return None

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Intersection:
        return self._items[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Intersections({self._items})"
