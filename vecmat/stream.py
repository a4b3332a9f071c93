"""
text i/o for containers.

the written form is the elements in index order (column-major for
matrices) joined by ", ", with no brackets and no newline. the reader is
looser: whitespace of any kind may surround elements and the comma between
two elements is optional.

reading is all or nothing. if any element cannot be read, the stream is
put back where it was and the destination is overwritten with the failure
value (quiet nan, or 0 for integral element types).
"""

from __future__ import annotations

import logging
import re
from io import StringIO
from typing import TextIO, Type, List

import numpy as np

from .base import Container
from .types import t, ParseError, Scalar, failure_fill

logger = logging.getLogger(__name__)

SEPARATOR = ", "

# the whitespace a classic-locale stream skips
_WHITESPACE = frozenset(' \t\n\r\f\v')
_NON_FINITE = frozenset(('inf', 'infinity', 'nan'))

# what may appear while an element is still being typed, and what a whole element looks like
_INT_PREFIX = re.compile(r'[+-]?\d*')
_INT_FULL = re.compile(r'[+-]?\d+')
_FLOAT_PREFIX = re.compile(
    r'[+-]?(?:(?:\d+\.?\d*|\.\d*)(?:[eE][+-]?\d*)?|i(?:n(?:f(?:i(?:n(?:i(?:t(?:y)?)?)?)?)?)?)?|n(?:a(?:n)?)?)?',
    re.IGNORECASE)
_FLOAT_FULL = re.compile(
    r'[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)',
    re.IGNORECASE)


# --- writer ---

def format_text(a: Container) -> str:
    """the container as a comma separated list, e.g. '1.0, 2.0, 3.0'."""
    return SEPARATOR.join(str(x) for x in a.data)


def write(stream: TextIO, a: Container) -> int:
    """write the container to a text stream. returns the number of characters written."""
    return stream.write(format_text(a))


# --- reader ---

class _Scanner:
    """
    character-level cursor over a seekable text stream.
    a character is pushed back by seeking to the position taken before reading it.
    """

    def __init__(self, stream: TextIO, dtype: np.dtype):
        self._stream = stream
        self._dtype = dtype
        if dtype.kind == 'f':
            self._prefix, self._full = _FLOAT_PREFIX, _FLOAT_FULL
        else:
            self._prefix, self._full = _INT_PREFIX, _INT_FULL

    def skip_whitespace(self) -> None:
        while True:
            pos = self._stream.tell()
            c = self._stream.read(1)
            if not c or c not in _WHITESPACE:
                self._stream.seek(pos)
                return

    def skip_separator(self) -> None:
        """consume one optional comma and the whitespace around it."""
        self.skip_whitespace()
        pos = self._stream.tell()
        c = self._stream.read(1)
        if not c:
            raise ParseError("stream ended before all elements were read")
        if c != ',':
            self._stream.seek(pos)
        self.skip_whitespace()

    def element(self) -> Scalar:
        """read the longest run of characters that can still form a number, then convert it."""
        token = ''
        while True:
            pos = self._stream.tell()
            c = self._stream.read(1)
            if not c or not self._prefix.fullmatch(token + c):
                self._stream.seek(pos)
                break
            token += c
        if not self._full.fullmatch(token):
            raise ParseError(f"expected a number, got {token!r}" if token else "expected a number")
        return self._convert(token)

    def _convert(self, token: str) -> Scalar:
        if self._dtype.kind == 'f':
            with np.errstate(over='ignore'):
                value = self._dtype.type(float(token))
            if not np.isfinite(value) and token.lstrip('+-').lower() not in _NON_FINITE:
                raise ParseError(f"{token} is out of range for {self._dtype.name}")
            return value
        value = int(token)
        info = np.iinfo(self._dtype)
        if not info.min <= value <= info.max:
            raise ParseError(f"{value} does not fit in {self._dtype.name}")
        return self._dtype.type(value)


def read(stream: TextIO, a: Container) -> bool:
    """
    fill `a` from a seekable text stream. returns True on success.

    on success the stream is left right after the last element, with any
    trailing separator unread. on failure the stream is seeked back to where
    it was on entry, every element of `a` is set to the failure value and
    False is returned.
    """
    if a.size == 0:
        return True

    start = stream.tell()
    scanner = _Scanner(stream, a.dtype)
    values: List[Scalar] = []
    try:
        scanner.skip_whitespace()
        values.append(scanner.element())
        while len(values) < a.size:
            scanner.skip_separator()
            values.append(scanner.element())
    except (ParseError, OSError) as e:
        logger.debug("rolling back read of %s at element %d: %s", type(a).__name__, len(values), e)
        stream.seek(start)
        a.fill(failure_fill(a.dtype))
        return False

    a.data[:] = values
    return True


def parse(target: Type[t], text: str) -> t:
    """build a new `target` container from text, raising ParseError if it cannot be read."""
    a = target()
    if not read(StringIO(text), a):
        raise ParseError(f"could not read {target.__name__} from {text!r}")
    return a
