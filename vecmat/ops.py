"""
products and conversions between containers: dot, cross, resize_cast, eye.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from .base import Container
from .matrix import Matrix
from .vector import Vector
from .types import DEFAULT_DTYPE, DTypeLike, OutOfBoundsError, ShapeMismatchError, Scalar, resolve_dtype


def dot(a: Container, b: Container) -> Union[Matrix, Vector, Scalar]:
    """
    the inner product. the operand order dictates the multiplication order:

    - matrix[n, m] . matrix[m, o] -> matrix[n, o]
    - matrix[n, m] . vector[m]    -> vector[n]
    - vector[n]    . matrix[n, m] -> vector[m]
    - vector[n]    . vector[n]    -> scalar

    the result takes the left operand's element type.
    """
    if isinstance(a, Matrix) and isinstance(b, Matrix):
        _require_inner(a, a.M, b, b.N)
        product = a.as_array() @ b.as_array().astype(a.dtype, copy=False)
        return Matrix[a.N, b.M, a.dtype].from_array(product)
    if isinstance(a, Matrix) and isinstance(b, Vector):
        _require_inner(a, a.M, b, b.N)
        product = a.as_array() @ b.data.astype(a.dtype, copy=False)
        return Vector[a.N, a.dtype]._from_np(product.astype(a.dtype, copy=False))
    if isinstance(a, Vector) and isinstance(b, Matrix):
        _require_inner(a, a.N, b, b.N)
        product = a.data @ b.as_array().astype(a.dtype, copy=False)
        return Vector[b.M, a.dtype]._from_np(product.astype(a.dtype, copy=False))
    if isinstance(a, Vector) and isinstance(b, Vector):
        _require_inner(a, a.N, b, b.N)
        return a.dtype.type(np.dot(a.data, b.data.astype(a.dtype, copy=False)))
    raise TypeError(f"dot is not defined for {type(a).__name__} and {type(b).__name__}")


def _require_inner(a: Container, left: int, b: Container, right: int) -> None:
    if left != right:
        raise ShapeMismatchError(f"inner dimensions of {type(a).__name__} and {type(b).__name__} differ ({left} vs {right})")


def cross(a: Vector, b: Vector) -> Vector:
    """
    the cross product in r^3.

    a length 2 vector is taken as the x and y of an r^3 vector with z = 0,
    and a length 4 vector drops its homogeneous coordinate. any other
    length raises OutOfBoundsError.
    """
    for v in (a, b):
        if not isinstance(v, Vector):
            raise TypeError(f"cross is only defined for vectors, got {type(v).__name__}")
        if not 2 <= v.N <= 4:
            raise OutOfBoundsError(f"cross needs vectors of length 2 to 4, got {v.N}")
    r3 = Vector[3, a.dtype]
    u, v = resize_cast(r3, a).data, resize_cast(r3, b).data
    c = np.array([
        u[1] * v[2] - u[2] * v[1],
        u[2] * v[0] - u[0] * v[2],
        u[0] * v[1] - u[1] * v[0],
    ], dtype=a.dtype)
    return r3._from_np(c)


def resize_cast(target: type, a: Container) -> Container:
    """
    copy `a` into a new `target` container of another shape and/or element type.

    the overlapping leading block is copied (and cast); cells only the target
    has are zero, cells only the source has are dropped.
    """
    if not (isinstance(target, type) and issubclass(target, Container) and target.dtype is not None):
        raise TypeError(f"resize_cast needs a specialized container type, got {target!r}")
    if a._family is not target._family:
        raise TypeError(f"cannot resize {type(a).__name__} into {target.__name__}")
    b = target()
    if isinstance(a, Matrix):
        n, m = min(a.N, target.N), min(a.M, target.M)
        b.as_array()[:n, :m] = a.as_array()[:n, :m].astype(target.dtype)
    else:
        n = min(a.N, target.N)
        b.data[:n] = a.data[:n].astype(target.dtype)
    return b


def eye(n: int, dtype: DTypeLike = DEFAULT_DTYPE) -> Matrix:
    """the n x n identity matrix."""
    dtype = resolve_dtype(dtype)
    return Matrix[n, n, dtype]._from_np(np.eye(n, dtype=dtype).ravel(order='F'))
