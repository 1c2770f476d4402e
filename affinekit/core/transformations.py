import math
from .matrix import Matrix


class TransformationMatrix(Matrix):
    """
    A fixed 3x3 affine transform in 2D homogeneous coordinates.

    Instances are immutable: set() and transpose() raise TypeError.
    clone() returns a plain, mutable Matrix with the same values.
    """

    def __init__(self, *elements: float):
        super().__init__(3, 3, *elements)
        self._elements.flags.writeable = False
        self._frozen = True


class TranslationMatrix(TransformationMatrix):
    """Moves points by (tx, ty)."""

    def __init__(self, tx: float, ty: float):
        super().__init__(
            1, 0, tx,
            0, 1, ty,
            0, 0, 1,
        )
        self._tx = tx
        self._ty = ty

    @property
    def tx(self) -> float:
        return self._tx

    @property
    def ty(self) -> float:
        return self._ty


class RotationMatrix(TransformationMatrix):
    """Rotates points counter-clockwise by angle radians about the origin."""

    def __init__(self, angle: float):
        c = math.cos(angle)
        s = math.sin(angle)
        super().__init__(
            c, -s, 0,
            s, c, 0,
            0, 0, 1,
        )
        self._angle = angle

    @property
    def angle(self) -> float:
        return self._angle


class ScalingMatrix(TransformationMatrix):
    """Scales points by (sx, sy) relative to the origin."""

    def __init__(self, sx: float, sy: float):
        super().__init__(
            sx, 0, 0,
            0, sy, 0,
            0, 0, 1,
        )
        self._sx = sx
        self._sy = sy

    @property
    def sx(self) -> float:
        return self._sx

    @property
    def sy(self) -> float:
        return self._sy
