"""
the shared machinery behind vector and matrix.

a container family (Vector, Matrix) is specialized by subscripting it with
its extents and an optional element type, e.g. `Vector[3, np.float32]`.
each specialization is a real subclass created once and cached, so the
shape and element type live on the type the way template arguments would.
every instance wraps a flat numpy array holding exactly `size` elements.
"""

from __future__ import annotations

import logging
import math
import operator
from typing import Dict, Tuple, Iterator, Optional, Type, Any, Callable

import numpy as np

from .types import (
    t, DEFAULT_DTYPE, DTypeLike, Scalar, OutOfBoundsError, ShapeMismatchError,
    resolve_dtype, is_scalar, cast_to
)

logger = logging.getLogger(__name__)

# specializations created so far, keyed by (family, extents, dtype)
_specializations: Dict[Tuple[type, Tuple[int, ...], np.dtype], type] = {}


# --- element-wise kernels, all writing into `out` ---

def _add(a: np.ndarray, b: Any, out: np.ndarray) -> None:
    np.add(a, b, out=out, casting='unsafe')


def _subtract(a: np.ndarray, b: Any, out: np.ndarray) -> None:
    np.subtract(a, b, out=out, casting='unsafe')


def _multiply(a: np.ndarray, b: Any, out: np.ndarray) -> None:
    np.multiply(a, b, out=out, casting='unsafe')


def _divide(a: np.ndarray, b: Any, out: np.ndarray) -> None:
    """floating types divide exactly, integral types truncate toward zero."""
    if out.dtype.kind == 'f':
        np.true_divide(a, b, out=out, casting='unsafe')
        return
    q = np.floor_divide(a, b)
    # floor and truncation disagree only for inexact quotients of mixed sign
    q += (np.remainder(a, b) != 0) & ((a < 0) != (b < 0))
    np.copyto(out, q, casting='unsafe')


def _rebuild(family: type, shape: Tuple[int, ...], dtype: str, values: list) -> 'Container':
    """pickle hook: specializations are created on demand, so rebuild through the family."""
    return family[(*shape, dtype)](values)


# --- abstract base for all containers ---

class Container:
    """
    a fixed-shape block of numbers with element-wise arithmetic.
    the underlying storage is always flat and laid out in index order.
    """
    __slots__ = ('_v',)

    # numpy scalars on the left of an operator must defer to our reflected methods
    __array_ufunc__ = None

    # filled in by each family and by specialization
    _rank: int = 0
    _extent_names: Tuple[str, ...] = ()
    _family: Optional[type] = None
    shape: Tuple[int, ...] = ()
    size: int = 0
    dtype: Optional[np.dtype] = None

    # --- specialization ---

    def __class_getitem__(cls, params: Any) -> type:
        if cls.dtype is not None:
            raise TypeError(f"{cls.__name__} is already specialized")
        if not isinstance(params, tuple):
            params = (params,)
        if len(params) == cls._rank:
            extents, dtype = params, DEFAULT_DTYPE
        elif len(params) == cls._rank + 1:
            extents, dtype = params[:-1], params[-1]
        else:
            names = ", ".join(cls._extent_names)
            raise TypeError(f"{cls.__name__}[{names}, dtype] takes {cls._rank} extents and an optional element type")
        return cls._specialize(tuple(operator.index(n) for n in extents), resolve_dtype(dtype))

    @classmethod
    def _specialize(cls, shape: Tuple[int, ...], dtype: np.dtype) -> type:
        if any(n < 0 for n in shape):
            raise ValueError(f"extents must be non-negative, got {shape}")
        key = (cls, shape, dtype)
        special = _specializations.get(key)
        if special is None:
            name = f"{cls.__name__}[{', '.join(map(str, shape))}, {dtype.name}]"
            namespace = {
                '__slots__': (),
                '__module__': cls.__module__,
                '__qualname__': name,
                '_family': cls,
                'shape': shape,
                'size': math.prod(shape),
                'dtype': dtype,
            }
            namespace.update(zip(cls._extent_names, shape))
            special = type(name, (cls,), namespace)
            _specializations[key] = special
            logger.debug("specialized %s", name)
        return special

    # --- construction ---

    def __init__(self, *values: Any):
        cls = type(self)
        if cls.dtype is None:
            names = ", ".join(cls._extent_names)
            raise TypeError(f"{cls.__name__} needs a shape before it can be built, e.g. {cls.__name__}[{names}, float]")
        # a single non-scalar argument is the element list itself
        if len(values) == 1 and not is_scalar(values[0]):
            values = tuple(values[0])
        if len(values) > cls.size:
            raise ValueError(f"{cls.__name__} holds {cls.size} elements, got {len(values)}")
        self._v = np.zeros(cls.size, dtype=cls.dtype)
        if values:
            self._v[:len(values)] = cast_to(values, cls.dtype)

    @classmethod
    def _from_np(cls: Type[t], arr: np.ndarray) -> t:
        """internal factory that adopts an already-shaped array without re-validation."""
        instance = cls.__new__(cls)
        instance._v = arr
        return instance

    def copy(self: t) -> t:
        """an independent container with the same type and elements."""
        return type(self)._from_np(self._v.copy())

    def __copy__(self: t) -> t:
        return self.copy()

    def __deepcopy__(self: t, memo: dict) -> t:
        return self.copy()

    def __reduce__(self):
        return _rebuild, (self._family, self.shape, self.dtype.str, self._v.tolist())

    # --- element access ---

    def _offset(self, key: Any) -> int:
        k = operator.index(key)
        if not 0 <= k < self.size:
            raise OutOfBoundsError(f"index {k} out of range for {type(self).__name__}")
        return k

    def __getitem__(self, key: Any) -> Scalar:
        return self._v[self._offset(key)]

    def __setitem__(self, key: Any, value: Scalar) -> None:
        self._v[self._offset(key)] = cast_to(value, self.dtype)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._v)

    @property
    def data(self) -> np.ndarray:
        """the writable storage, in index order."""
        return self._v

    @property
    def nbytes(self) -> int:
        return self._v.nbytes

    def fill(self: t, value: Scalar) -> t:
        """broadcast a scalar into every element."""
        self._v[...] = cast_to(value, self.dtype)
        return self

    # --- element-wise algebra ---

    def _same_shape(self, other: 'Container') -> bool:
        return other._family is self._family and other.shape == self.shape

    def _combine(self: t, kernel: Callable, other: Any) -> t:
        """apply `kernel` in place against a scalar or a same-shape container."""
        if isinstance(other, Container):
            if not self._same_shape(other):
                raise ShapeMismatchError(f"cannot combine {type(self).__name__} with {type(other).__name__}")
            rhs = other._v
        elif is_scalar(other):
            rhs = cast_to(other, self.dtype)
        else:
            return NotImplemented
        kernel(self._v, rhs, self._v)
        return self

    def __neg__(self: t) -> t:
        return type(self)._from_np(-self._v)

    def __iadd__(self: t, other: Any) -> t: return self._combine(_add, other)
    def __isub__(self: t, other: Any) -> t: return self._combine(_subtract, other)
    def __imul__(self: t, other: Any) -> t: return self._combine(_multiply, other)
    def __itruediv__(self: t, other: Any) -> t: return self._combine(_divide, other)

    def __add__(self: t, other: Any) -> t: return self.copy()._combine(_add, other)
    def __sub__(self: t, other: Any) -> t: return self.copy()._combine(_subtract, other)
    def __mul__(self: t, other: Any) -> t: return self.copy()._combine(_multiply, other)
    def __truediv__(self: t, other: Any) -> t: return self.copy()._combine(_divide, other)

    # scalar on the left. there is deliberately no __rtruediv__
    def __radd__(self: t, other: Any) -> t: return self.copy()._combine(_add, other)
    def __rsub__(self: t, other: Any) -> t: return (-self)._combine(_add, other)
    def __rmul__(self: t, other: Any) -> t: return self.copy()._combine(_multiply, other)

    def __matmul__(self, other: 'Container') -> Any:
        from .ops import dot
        return dot(self, other)

    # --- comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Container):
            return NotImplemented
        # different shapes are never equal, whatever the element count
        if not self._same_shape(other):
            return False
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    # --- text ---

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(str(x) for x in self._v)})"

    def __str__(self) -> str:
        from .stream import format_text
        return format_text(self)


class ShapeAlias:
    """a container family with its extents pinned, e.g. Vec3 or Mat4."""

    def __init__(self, family: type, *shape: int):
        self._family = family
        self._shape = shape

    def __getitem__(self, dtype: DTypeLike) -> type:
        return self._family[(*self._shape, dtype)]

    def __call__(self, *values: Any) -> Container:
        return self[DEFAULT_DTYPE](*values)

    def __instancecheck__(self, instance: Any) -> bool:
        return isinstance(instance, self._family) and instance.shape == self._shape

    def __repr__(self) -> str:
        return f"{self._family.__name__}[{', '.join(map(str, self._shape))}, ...]"
