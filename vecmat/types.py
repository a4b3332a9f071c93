from __future__ import annotations

from enum import IntEnum
from typing import TypeVar, Union, Any

import numpy as np

t = TypeVar('t', bound='Container')

# numpy dtype used when a shape is given without an element type
DEFAULT_DTYPE = np.dtype(np.float64)

# signed int, unsigned int, float
_REAL_KINDS = 'iuf'

DTypeLike = Union[np.dtype, type, str]
Scalar = Union[int, float, np.number]


# --- errors ---

class OutOfBoundsError(IndexError):
    """raised when an index falls outside a container's extent."""
    pass


class ShapeMismatchError(ValueError):
    """raised when two containers cannot be combined because of their shapes."""
    pass


class ParseError(ValueError):
    """raised when a container cannot be read from text."""
    pass


# --- symbolic indices ---

class Axis(IntEnum):
    """cartesian coordinates, w being the homogeneous one."""
    X = 0
    Y = 1
    Z = 2
    W = 3


class Channel(IntEnum):
    """colour channels as laid out in rendering pipelines."""
    R = 0
    G = 1
    B = 2
    A = 3


X, Y, Z, W = Axis.X, Axis.Y, Axis.Z, Axis.W
R, G, B, A = Channel.R, Channel.G, Channel.B, Channel.A


# --- helpers ---

def resolve_dtype(dtype: DTypeLike) -> np.dtype:
    """normalize anything numpy understands as a dtype, keeping only real numeric kinds."""
    try:
        resolved = np.dtype(dtype)
    except TypeError:
        raise TypeError(f"{dtype!r} is not a numeric element type")
    if resolved.kind not in _REAL_KINDS:
        raise TypeError(f"element type must be a real number type, got {resolved.name}")
    return resolved


def is_scalar(value: Any) -> bool:
    """true for plain numbers, bools and numpy scalars, false for containers and sequences."""
    return isinstance(value, (int, float, np.number, np.bool_))


def cast_to(values: Any, dtype: np.dtype) -> Any:
    """
    cast a number, or a sequence of numbers, to `dtype` without range checks.
    out of range integers wrap and floats truncate toward zero, as the kernels do.
    """
    with np.errstate(over='ignore', invalid='ignore'):
        return np.asarray(values).astype(dtype, casting='unsafe')[()]


def failure_fill(dtype: np.dtype) -> Scalar:
    """the value a failed read leaves behind: quiet nan, or 0 where nan does not exist."""
    if dtype.kind == 'f':
        return dtype.type(np.nan)
    return dtype.type(0)
