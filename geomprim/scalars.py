"""Scalar capability contract: the closed set of numeric types a point may carry.

Each registered scalar supplies its additive identity and the four arithmetic
operations with the semantics of the native type it stands for:

- integer scalars wrap around in two's complement at their width, divide with
  truncation toward zero and raise ZeroDivisionError on a zero divisor;
- float scalars follow IEEE rules, so division by zero gives inf or NaN.

numpy has no 128-bit integer, so ``i128`` keeps plain Python ints and
enforces the width itself.
"""
import operator
from numbers import Integral, Real

import numpy as np

from .constants import INT_BITS, SCALARS_BY_DIM, DEFAULT_INT_SCALAR, DEFAULT_FLOAT_SCALAR
from .types import PointTypeError


# ============================================================
# Scalar Types
# ============================================================
class Scalar:
    """A registered scalar type; one shared instance per name."""
    is_int = False

    def __init__(self, name: str, dtype=None):
        self.name = name
        self.dtype = dtype

    def __repr__(self) -> str:
        return f"<scalar {self.name}>"

    def zero(self):
        """Additive identity."""
        return self.coerce(0)

    def lt(self, a, b) -> bool:
        return bool(a < b)

    def to_float(self, v) -> float:
        """Promote a value to double precision."""
        return float(v)


class IntScalar(Scalar):
    """Fixed-width signed integer."""
    is_int = True

    def __init__(self, name: str, bits: int, dtype=None):
        super().__init__(name, dtype)
        self.bits = bits
        self.min = -(1 << (bits-1)); self.max = (1 << (bits-1)) - 1

    def _box(self, v: int):
        return v if self.dtype is None else self.dtype(v)

    def coerce(self, v):
        if isinstance(v, (bool, np.bool_)):
            raise PointTypeError(f"{self.name} coordinate must be integral, got bool")
        try:
            i = operator.index(v)
        except TypeError:
            raise PointTypeError(
                f"{self.name} coordinate must be integral, got {type(v).__name__}") from None
        if not self.min <= i <= self.max:
            raise OverflowError(f"{i} out of range for {self.name}")
        return self._box(i)

    def wrap(self, v: int):
        """Reduce an unbounded int to this width (two's complement)."""
        return self._box((v - self.min) % (1 << self.bits) + self.min)

    def add(self, a, b):
        return self.wrap(int(a) + int(b))

    def sub(self, a, b):
        return self.wrap(int(a) - int(b))

    def mul(self, a, b):
        return self.wrap(int(a) * int(b))

    def div(self, a, b):
        """Quotient truncated toward zero. Raises ZeroDivisionError for b == 0."""
        a = int(a); b = int(b)
        if b == 0:
            raise ZeroDivisionError(f"{self.name} division by zero")
        q = abs(a) // abs(b)
        return self.wrap(-q if (a < 0) != (b < 0) else q)


class FloatScalar(Scalar):
    """IEEE float; overflow and division by zero propagate as inf/NaN."""

    def coerce(self, v):
        if isinstance(v, (bool, np.bool_)) or not isinstance(v, Real):
            raise PointTypeError(
                f"{self.name} coordinate must be a real number, got {type(v).__name__}")
        with np.errstate(all="ignore"):
            return self.dtype(v)

    def add(self, a, b):
        with np.errstate(all="ignore"):
            return self.dtype(a + b)

    def sub(self, a, b):
        with np.errstate(all="ignore"):
            return self.dtype(a - b)

    def mul(self, a, b):
        with np.errstate(all="ignore"):
            return self.dtype(a * b)

    def div(self, a, b):
        with np.errstate(all="ignore"):
            return self.dtype(np.true_divide(a, b))


# ============================================================
# Registration
# ============================================================
SCALARS: dict[str, Scalar] = {
    "i32": IntScalar("i32", INT_BITS["i32"], np.int32),
    "i64": IntScalar("i64", INT_BITS["i64"], np.int64),
    "i128": IntScalar("i128", INT_BITS["i128"]),
    "f32": FloatScalar("f32", np.float32),
    "f64": FloatScalar("f64", np.float64),
}

# numpy dtypes that pin a scalar; float64 is treated like a Python float
_BY_DTYPE = {
    np.dtype(np.int32): "i32",
    np.dtype(np.int64): "i64",
    np.dtype(np.float32): "f32",
}


def scalar_for(name, dim: int) -> Scalar:
    """Resolve a scalar name (or Scalar) registered for points of *dim* dimensions."""
    if isinstance(name, Scalar):
        name = name.name
    if name not in SCALARS_BY_DIM.get(dim, ()):
        raise PointTypeError(f"scalar {name!r} is not registered for {dim}D points")
    return SCALARS[name]


def infer_scalar(values, dim: int) -> Scalar:
    """Pick the scalar for a set of coordinates when the caller names none.

    numpy int32/int64/float32 values pin their own scalar. Python ints fall
    back to the default integer scalar; any other float makes the point use
    the dimension's default float scalar.
    """
    pinned = set(); has_float = False
    for v in values:
        if isinstance(v, np.generic) and v.dtype in _BY_DTYPE:
            pinned.add(_BY_DTYPE[v.dtype])
        elif isinstance(v, Integral):
            pass
        elif isinstance(v, Real):
            has_float = True
        else:
            raise PointTypeError(f"non-numeric coordinate {v!r}")
    if len(pinned) > 1:
        raise PointTypeError(f"mixed scalar types: {', '.join(sorted(pinned))}")
    if pinned:
        name = pinned.pop()
        if has_float and SCALARS[name].is_int:
            name = DEFAULT_FLOAT_SCALAR[dim]
    else:
        name = DEFAULT_FLOAT_SCALAR[dim] if has_float else DEFAULT_INT_SCALAR
    return scalar_for(name, dim)
