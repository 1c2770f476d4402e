from __future__ import annotations
import logging
from typing import Dict, Iterator, List, Optional
from blinker import Signal
from .interfaces import Cloneable, Transformable
from .matrix import IndexOutOfBounds, Matrix
from .point import Point

logger = logging.getLogger(__name__)


class Path(Transformable, Cloneable):
    """
    An ordered, mutable sequence of points. Geometric operations are
    applied to each point in turn.
    """

    def __init__(self, *points: Point):
        self._points: List[Point] = []

        # Fired when points are added or removed.
        self.updated = Signal()
        # Fired when a contained point moves; `origin` is that point.
        self.point_transform_changed = Signal()

        for point in points:
            self._points.append(point)
            self._connect_point_signals(point)

    def _connect_point_signals(self, point: Point):
        point.transform_changed.connect(self._on_point_transform_changed)

    def _disconnect_point_signals(self, point: Point):
        # The same point object may appear more than once.
        if not any(p is point for p in self._points):
            point.transform_changed.disconnect(
                self._on_point_transform_changed
            )

    def _on_point_transform_changed(self, sender: Point, **kwargs):
        self.point_transform_changed.send(self, origin=sender)

    @property
    def size(self) -> int:
        """Number of points in the path."""
        return len(self._points)

    @property
    def points(self) -> List[Point]:
        """A new list holding the path's points (not copies of them)."""
        return list(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(list(self._points))

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def add(self, point: Point, pos: Optional[int] = None) -> "Path":
        """
        Inserts point before position pos. Appends when pos is None or
        past the end, and prepends when pos is zero or negative.
        """
        if pos is None or pos >= self.size:
            self._points.append(point)
        elif pos <= 0:
            self._points.insert(0, point)
        else:
            self._points.insert(pos, point)
        self._connect_point_signals(point)
        self.updated.send(self)
        return self

    def remove(self, *points: Point) -> "Path":
        """
        Removes every occurrence of the given point objects. Points are
        matched by identity, not by position.
        """
        kept = [p for p in self._points if not any(p is q for q in points)]
        if len(kept) == len(self._points):
            return self
        self._points = kept
        for point in points:
            self._disconnect_point_signals(point)
        self.updated.send(self)
        return self

    def remove_at(self, *indexes: int) -> List[Point]:
        """
        Removes the points at the given indexes and returns them, in the
        order the indexes were passed.

        Raises:
            IndexOutOfBounds: if any index is outside the path. Nothing is
                removed in that case.
        """
        for index in indexes:
            if not 0 <= index < self.size:
                raise IndexOutOfBounds(
                    f"Index {index} out of range for a path of "
                    f"{self.size} points"
                )
        removed = [self._points[i] for i in indexes]
        drop = set(indexes)
        self._points = [
            p for i, p in enumerate(self._points) if i not in drop
        ]
        for point in removed:
            self._disconnect_point_signals(point)
        if removed:
            self.updated.send(self)
        return removed

    def translate(self, tx: float, ty: float) -> "Path":
        for point in self._points:
            point.translate(tx, ty)
        return self

    def rotate(self, angle: float, pivot: Optional[Point] = None) -> "Path":
        """Rotates every point counter-clockwise by angle radians."""
        pivot = pivot.clone() if pivot is not None else None
        for point in self._points:
            point.rotate(angle, pivot)
        return self

    def scale(
        self, sx: float, sy: float, pivot: Optional[Point] = None
    ) -> "Path":
        pivot = pivot.clone() if pivot is not None else None
        for point in self._points:
            point.scale(sx, sy, pivot)
        return self

    def transform(self, matrix: Matrix) -> "Path":
        """Applies a 3x3 homogeneous transform to every point."""
        logger.debug(f"Transforming {self.size} points")
        for point in self._points:
            point.transform(matrix)
        return self

    def clone(self) -> "Path":
        """
        Returns a deep copy; the new path owns copies of all points. A
        point held more than once is copied once and shared again.
        """
        clones: Dict[int, Point] = {}
        for point in self._points:
            if id(point) not in clones:
                clones[id(point)] = point.clone()
        return Path(*(clones[id(point)] for point in self._points))

    def __copy__(self) -> "Path":
        return Path(*self._points)

    def __deepcopy__(self, memo: dict) -> "Path":
        return self.clone()

    def __str__(self) -> str:
        return "->".join(str(point) for point in self._points)

    def __repr__(self) -> str:
        points = ", ".join(repr(point) for point in self._points)
        return f"Path({points})"
