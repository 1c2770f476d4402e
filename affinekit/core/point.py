from __future__ import annotations
import logging
import math
from typing import Any, Optional
import numpy as np
from blinker import Signal
from .. import config
from .interfaces import Cloneable, MatrixRepresentable, Transformable
from .matrix import Matrix
from .operations import multiply, scalar_multiply
from .transformations import RotationMatrix, ScalingMatrix, TranslationMatrix

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Formats a coordinate, dropping the fraction of integral values."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class Point(Transformable, Cloneable, MatrixRepresentable):
    """
    A point in the plane, stored as the homogeneous column vector
    [x, y, h]. Cartesian coordinates are x/h and y/h.

    Every transform builds one composed 3x3 matrix and left-multiplies
    the vector with it, so rotating or scaling around a pivot costs a
    single multiplication of the point.
    """

    def __init__(self, x: float, y: float):
        self._matrix = Matrix(3, 1, x, y, 1)
        # Fired after every change of position.
        self.transform_changed = Signal()

    def _cartesian(self, index: int) -> float:
        h = np.float64(self._matrix.get(2, 0))
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(self._matrix.get(index, 0)) / h)

    @property
    def x(self) -> float:
        return self._cartesian(0)

    @property
    def y(self) -> float:
        return self._cartesian(1)

    @property
    def matrix(self) -> Matrix:
        """A copy of the homogeneous 3x1 vector."""
        return self._matrix.clone()

    def _apply(self, matrix: Matrix) -> "Point":
        self._matrix = multiply(matrix, self._matrix)
        return self

    def _compose_around(self, operation: Matrix, pivot: Optional[Point]):
        if pivot is None:
            px, py = 0.0, 0.0
        else:
            # Read the pivot once; it may be this very point.
            px, py = pivot.x, pivot.y
        composed = multiply(
            multiply(TranslationMatrix(px, py), operation),
            TranslationMatrix(-px, -py),
        )
        if config.TRACE_TRANSFORMS:
            logger.debug(
                f"Composed {type(operation).__name__} around "
                f"({format_number(px)},{format_number(py)}): "
                f"{composed.tolist()}"
            )
        return composed

    def place(self, x: float, y: float) -> "Point":
        """Moves the point to (x, y), discarding its previous vector."""
        self._matrix = Matrix(3, 1, x, y, 1)
        self.transform_changed.send(self)
        return self

    def translate(self, tx: float, ty: float) -> "Point":
        """Moves the point by tx horizontally and ty vertically."""
        self._apply(TranslationMatrix(tx, ty))
        self.transform_changed.send(self)
        return self

    def rotate(self, angle: float, pivot: Optional[Point] = None) -> "Point":
        """
        Rotates the point counter-clockwise around pivot.

        Args:
            angle: The rotation angle in radians.
            pivot: The center of rotation. Defaults to the origin.
        """
        self._apply(self._compose_around(RotationMatrix(angle), pivot))
        self.transform_changed.send(self)
        return self

    def scale(
        self, sx: float, sy: float, pivot: Optional[Point] = None
    ) -> "Point":
        """
        Scales the point's distance from pivot by sx and sy.

        Args:
            sx: Horizontal scale factor.
            sy: Vertical scale factor.
            pivot: The fixed point of the scaling. Defaults to the origin.
        """
        self._apply(self._compose_around(ScalingMatrix(sx, sy), pivot))
        self.transform_changed.send(self)
        return self

    def transform(self, matrix: Matrix) -> "Point":
        """
        Applies an arbitrary 3x3 homogeneous transform, then normalizes the
        vector so that h is 1 again.

        Raises:
            DimensionMismatch: if matrix is not 3 columns wide.
        """
        self._apply(matrix)
        self._normalize()
        self.transform_changed.send(self)
        return self

    def _normalize(self):
        h = self._matrix.get(2, 0)
        if h == 0:
            logger.warning(
                f"Transform moved point to infinity (h=0): "
                f"{self._matrix.elements}"
            )
            with np.errstate(divide="ignore", invalid="ignore"):
                factor = np.float64(1.0) / np.float64(h)
        else:
            factor = 1 / h
        with np.errstate(invalid="ignore"):
            self._matrix = scalar_multiply(self._matrix, factor)

    def equals(self, other: "Point") -> bool:
        """True if both Cartesian coordinates match exactly."""
        return self.x == other.x and self.y == other.y

    def clone(self) -> "Point":
        """Returns an independent point at the same position."""
        point = Point.__new__(Point)
        point._matrix = self._matrix.clone()
        point.transform_changed = Signal()
        return point

    def __copy__(self) -> "Point":
        return self.clone()

    def __deepcopy__(self, memo: dict) -> "Point":
        return self.clone()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.equals(other)

    def __str__(self) -> str:
        return f"({format_number(self.x)},{format_number(self.y)})"

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"


class FixedPoint(Point):
    """
    A point that cannot move. Every mutator raises TypeError; clone()
    returns an ordinary, movable Point.
    """

    def _refuse(self, *args, **kwargs):
        raise TypeError(f"{self} is a fixed point; clone() it first")

    place = _refuse
    translate = _refuse
    rotate = _refuse
    scale = _refuse
    transform = _refuse


ORIGIN = FixedPoint(0, 0)
