"""
fixed-shape numeric matrices, stored column-major.

element (i, j) of an n x m matrix lives at linear index k = i + j * n, so
an element list fills the first column, then the second, and so on. the
same order is used by iteration and by the text format.
"""

from __future__ import annotations

import operator
from typing import Any, Type

import numpy as np

from .base import Container, ShapeAlias
from .types import t, OutOfBoundsError, ShapeMismatchError, Scalar


class Matrix(Container):
    """
    an element of T^(N x M), addressed by a linear index or an (i, j) pair.
    subscript with rows, columns and element type to get a concrete class:
    `Matrix[3, 4, np.int32]`. the element type defaults to float64.
    """
    __slots__ = ()

    _rank = 2
    _extent_names = ('N', 'M')
    N: int = None
    M: int = None

    def _offset(self, key: Any) -> int:
        if not isinstance(key, tuple):
            return super()._offset(key)
        try:
            i, j = key
        except ValueError:
            raise TypeError("matrix pair index must be a 2-tuple")
        i, j = operator.index(i), operator.index(j)
        if not 0 <= i < self.N:
            raise OutOfBoundsError(f"row {i} out of range for {type(self).__name__}")
        if not 0 <= j < self.M:
            raise OutOfBoundsError(f"column {j} out of range for {type(self).__name__}")
        return i + j * self.N

    def __call__(self, i: Any, j: Any) -> Scalar:
        """element at row i, column j. `m[i, j]` is the writable form."""
        return self[i, j]

    def as_array(self) -> np.ndarray:
        """a writable n x m view of the storage."""
        return self._v.reshape((self.N, self.M), order='F')

    @classmethod
    def from_array(cls: Type[t], arr: Any) -> t:
        """build from anything numpy reads as an n x m array (rows as rows)."""
        arr = np.asarray(arr)
        if arr.shape != (cls.N, cls.M):
            raise ShapeMismatchError(f"expected a {cls.N}x{cls.M} array, got {arr.shape}")
        return cls._from_np(arr.astype(cls.dtype).ravel(order='F'))


# --- specializations for transformations of r^3 ---

# transformations on a plane in r^3
Mat2 = ShapeAlias(Matrix, 2, 2)
# transformations of r^3
Mat3 = ShapeAlias(Matrix, 3, 3)
# transformations of r^3 in homogeneous coordinates
Mat4 = ShapeAlias(Matrix, 4, 4)
