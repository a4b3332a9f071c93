"""
fixed-length numeric vectors.

    >>> import numpy as np
    >>> from vecmat import Vector, Z
    >>> v = Vector[3, np.float32](1, 2)
    >>> v[Z] = 5
    >>> str(v)
    '1.0, 2.0, 5.0'
"""

from __future__ import annotations

from typing import Any

from .base import Container, ShapeAlias
from .types import Scalar


class Vector(Container):
    """
    an element of T^N, addressed by a single zero-based index.
    subscript with the length and element type to get a concrete class:
    `Vector[3, np.float32]`. the element type defaults to float64.
    """
    __slots__ = ()

    _rank = 1
    _extent_names = ('N',)
    N: int = None

    def __call__(self, i: Any) -> Scalar:
        """same as `v[i]`, so vectors and matrices share a call shape."""
        return self[i]


# --- specializations for points and directions in r^3 ---

# a point on a plane in r^3
Vec2 = ShapeAlias(Vector, 2)
# a point in r^3
Vec3 = ShapeAlias(Vector, 3)
# a point in r^3 with a homogeneous coordinate
Vec4 = ShapeAlias(Vector, 4)
