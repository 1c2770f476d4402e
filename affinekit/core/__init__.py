"""
Dense matrices and the homogeneous-coordinate transforms built on them.
"""

from .matrix import Matrix, DimensionMismatch, IndexOutOfBounds
from .operations import (
    MatrixOperations,
    add,
    subtract,
    scalar_multiply,
    multiply,
)
from .transformations import (
    TransformationMatrix,
    TranslationMatrix,
    RotationMatrix,
    ScalingMatrix,
)
from .interfaces import (
    Cloneable,
    MatrixRepresentable,
    Translatable,
    Rotatable,
    Scalable,
    Transformable,
)
from .point import Point, ORIGIN
from .path import Path


__all__ = [
    "Matrix",
    "DimensionMismatch",
    "IndexOutOfBounds",
    "MatrixOperations",
    "add",
    "subtract",
    "scalar_multiply",
    "multiply",
    "TransformationMatrix",
    "TranslationMatrix",
    "RotationMatrix",
    "ScalingMatrix",
    "Cloneable",
    "MatrixRepresentable",
    "Translatable",
    "Rotatable",
    "Scalable",
    "Transformable",
    "Point",
    "ORIGIN",
    "Path",
]
