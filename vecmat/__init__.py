r"""
'    ____   ____             _____          __
'    \   \ /   /____   ____ /     \ _____ _/  |_
'     \   Y   // __ \_/ ___\  \ /  \\__  \\   __\
'      \     /\  ___/\  \__/    Y    \/ __ \|  |
'       \___/  \___  >\___  >____|__  (____  /__|
'                  \/     \/        \/     \/
"""

# expose the container families
from .base import Container, ShapeAlias
from .vector import Vector, Vec2, Vec3, Vec4
from .matrix import Matrix, Mat2, Mat3, Mat4

# expose the free functions
from .ops import dot, cross, resize_cast, eye
from .stream import format_text, write, read, parse, SEPARATOR

# expose element types, symbolic indices and errors
from .types import (
    DEFAULT_DTYPE,
    Axis,
    Channel,
    X, Y, Z, W,
    R, G, B, A,
    OutOfBoundsError,
    ShapeMismatchError,
    ParseError,
    resolve_dtype
)

# define what `import *` does
__all__ = [
    "Container",
    "ShapeAlias",
    "Vector",
    "Vec2",
    "Vec3",
    "Vec4",
    "Matrix",
    "Mat2",
    "Mat3",
    "Mat4",
    "dot",
    "cross",
    "resize_cast",
    "eye",
    "format_text",
    "write",
    "read",
    "parse",
    "SEPARATOR",
    "DEFAULT_DTYPE",
    "Axis",
    "Channel",
    "X", "Y", "Z", "W",
    "R", "G", "B", "A",
    "OutOfBoundsError",
    "ShapeMismatchError",
    "ParseError",
    "resolve_dtype"
]
