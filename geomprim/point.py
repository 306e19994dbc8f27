"""Point/vector value type over a registered scalar, in two or three dimensions."""
import numpy as np

from .constants import DEFAULT_INT_SCALAR
from .scalars import Scalar, scalar_for, infer_scalar
from .types import PointTypeError


class Point:
    """Fixed-size coordinate tuple, used both as a location and as a vector.

    All coordinates share one registered scalar. Points are immutable values;
    ``p += q`` rebinds ``p`` to ``p + q``. Equality is exact, with no
    tolerance for float scalars.
    """
    __slots__ = ("_coords", "_scalar")
    dim = 0
    # numpy scalars on the left defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    def __init__(self, *coords, scalar=None):
        if len(coords) != self.dim:
            raise PointTypeError(
                f"{type(self).__name__} takes {self.dim} coordinates, got {len(coords)}")
        s = infer_scalar(coords, self.dim) if scalar is None else scalar_for(scalar, self.dim)
        self._coords = tuple(s.coerce(c) for c in coords)
        self._scalar = s

    @classmethod
    def _from_coords(cls, coords, scalar: Scalar):
        p = object.__new__(cls)
        p._coords = tuple(coords); p._scalar = scalar
        return p

    @classmethod
    def default(cls, scalar=DEFAULT_INT_SCALAR):
        """The origin: every coordinate is the scalar's zero."""
        s = scalar_for(scalar, cls.dim)
        return cls._from_coords((s.zero(),) * cls.dim, s)

    # --- accessors ---

    @property
    def x(self):
        return self._coords[0]

    @property
    def y(self):
        return self._coords[1]

    @property
    def coords(self) -> tuple:
        return self._coords

    @property
    def scalar(self) -> Scalar:
        return self._scalar

    def __len__(self) -> int:
        return self.dim

    def __iter__(self):
        return iter(self._coords)

    def __getitem__(self, i):
        return self._coords[i]

    def as_array(self) -> np.ndarray:
        return np.array(self._coords, dtype=self._scalar.dtype or object)

    # --- arithmetic ---

    def _check(self, other: "Point"):
        if type(other) is not type(self) or other._scalar is not self._scalar:
            raise PointTypeError(f"cannot combine {self!r} with {other!r}")

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        self._check(other); s = self._scalar
        return self._from_coords((s.add(a, b) for a, b in zip(self._coords, other._coords)), s)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        self._check(other); s = self._scalar
        return self._from_coords((s.sub(a, b) for a, b in zip(self._coords, other._coords)), s)

    def __neg__(self):
        s = self._scalar; zero = s.zero()
        return self._from_coords((s.sub(zero, a) for a in self._coords), s)

    def __mul__(self, k):
        if isinstance(k, Point):
            return NotImplemented
        s = self._scalar; k = s.coerce(k)
        return self._from_coords((s.mul(a, k) for a in self._coords), s)

    __rmul__ = __mul__

    def __truediv__(self, k):
        """Scale by 1/k with the scalar's own division (truncating for integers)."""
        if isinstance(k, Point):
            return NotImplemented
        s = self._scalar; k = s.coerce(k)
        return self._from_coords((s.div(a, k) for a in self._coords), s)

    # --- comparison ---

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        # element-wise so that NaN never equals itself
        return (type(other) is type(self) and other._scalar is self._scalar
                and all(a == b for a, b in zip(self._coords, other._coords)))

    def __hash__(self):
        return hash((self.dim, self._scalar.name, self._coords))

    # --- formatting ---

    def __str__(self) -> str:
        return "(" + ",".join(str(c) for c in self._coords) + ")"

    def __repr__(self) -> str:
        return f"{type(self).__name__}<{self._scalar.name}>{self}"


class Point2(Point):
    """2D point (x, y). Has no ordering."""
    __slots__ = ()
    dim = 2

    def __init__(self, x, y, scalar=None):
        super().__init__(x, y, scalar=scalar)


class Point3(Point):
    """3D point (x, y, z), totally ordered by x, then y, then z.

    The order gives point sets a canonical sort, e.g. before a hull scan.
    """
    __slots__ = ()
    dim = 3

    def __init__(self, x, y, z, scalar=None):
        super().__init__(x, y, z, scalar=scalar)

    @property
    def z(self):
        return self._coords[2]

    def _lex_lt(self, other: "Point3") -> bool:
        lt = self._scalar.lt
        for a, b in zip(self._coords, other._coords):
            if a != b:
                return lt(a, b)
        return False

    def _cmp(self, other: "Point3") -> int:
        self._check(other)
        if self == other:
            return 0
        if self._lex_lt(other):
            return -1
        assert not self._lex_lt(other)
        return 1

    def __lt__(self, other):
        if not isinstance(other, Point3):
            return NotImplemented
        return self._cmp(other) < 0

    def __le__(self, other):
        if not isinstance(other, Point3):
            return NotImplemented
        return self._cmp(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Point3):
            return NotImplemented
        return self._cmp(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Point3):
            return NotImplemented
        return self._cmp(other) >= 0


_BY_DIM = {2: Point2, 3: Point3}


def make_point(*coords, scalar=None) -> Point:
    """Build a Point2 or Point3 from the number of coordinates given."""
    try:
        cls = _BY_DIM[len(coords)]
    except KeyError:
        raise PointTypeError(f"no {len(coords)}D point type; use 2 or 3 coordinates") from None
    return cls(*coords, scalar=scalar)


def from_array(arr, scalar=None) -> Point:
    """Point from a 1-D array; the scalar follows the array dtype unless given."""
    arr = np.asarray(arr)
    if arr.ndim != 1:
        raise PointTypeError(f"expected a 1-D array, got shape {arr.shape}")
    return make_point(*arr, scalar=scalar)
