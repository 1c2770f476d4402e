from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .matrix import Matrix
    from .point import Point


class Cloneable(ABC):
    """An object that can produce an independent deep copy of itself."""

    @abstractmethod
    def clone(self) -> "Cloneable":
        pass


class MatrixRepresentable(ABC):
    """An object that exposes its state as a Matrix."""

    @property
    @abstractmethod
    def matrix(self) -> "Matrix":
        pass


class Translatable(ABC):
    @abstractmethod
    def translate(self, tx: float, ty: float) -> "Translatable":
        pass


class Rotatable(ABC):
    @abstractmethod
    def rotate(
        self, angle: float, pivot: Optional["Point"] = None
    ) -> "Rotatable":
        """
        Rotates counter-clockwise by angle radians around pivot, or
        around the origin when pivot is None.
        """
        pass


class Scalable(ABC):
    @abstractmethod
    def scale(
        self, sx: float, sy: float, pivot: Optional["Point"] = None
    ) -> "Scalable":
        pass


class Transformable(Translatable, Rotatable, Scalable):
    """
    Anything that can be translated, rotated, scaled, or transformed by an
    arbitrary 3x3 homogeneous matrix. All methods mutate the receiver and
    return it.
    """

    @abstractmethod
    def transform(self, matrix: "Matrix") -> "Transformable":
        pass
