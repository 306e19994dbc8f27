"""Geometric quantities derived from points: products, angles, areas, orientation.

Every function accepts points of any registered scalar, as long as all
arguments share one scalar and one dimension.
"""
import logging

import numpy as np

from .point import Point, Point3
from .types import Direction, PointTypeError

logger = logging.getLogger(__name__)


def _same_kind(*pts: Point):
    first = pts[0]
    for p in pts[1:]:
        first._check(p)


# ============================================================
# Products
# ============================================================
def dot(a: Point, b: Point):
    """Sum of component-wise products, in the points' scalar type."""
    _same_kind(a, b); s = a.scalar
    total = s.zero()
    for u, v in zip(a, b):
        total = s.add(total, s.mul(u, v))
    return total

def cross(a: Point3, b: Point3) -> Point3:
    """3-vector cross product (the normal of the plane spanned by a and b)."""
    if not isinstance(a, Point3):
        raise PointTypeError(f"cross product needs 3D points, got {a!r}")
    _same_kind(a, b); s = a.scalar
    x0, y0, z0 = a; x1, y1, z1 = b
    return Point3._from_coords((
        s.sub(s.mul(y0, z1), s.mul(z0, y1)),
        s.sub(s.mul(z0, x1), s.mul(x0, z1)),
        s.sub(s.mul(x0, y1), s.mul(y0, x1)),
    ), s)

def _cross_z(u: Point, v: Point):
    """z-component of u x v; 2D points are taken as lying in the xy-plane."""
    s = u.scalar
    return s.sub(s.mul(u.x, v.y), s.mul(u.y, v.x))


# ============================================================
# Angles and Areas
# ============================================================
def angle(a: Point, b: Point, degrees: bool = False) -> float:
    """Angle between vectors a and b, in radians unless *degrees*.

    Computed in double precision. NaN if either vector has zero length.
    """
    s = a.scalar
    ab = s.to_float(dot(a, b)); aa = s.to_float(dot(a, a)); bb = s.to_float(dot(b, b))
    if aa == 0 or bb == 0:
        logger.debug(f"angle() with zero-length vector: {a} {b}")
    with np.errstate(all="ignore"):
        rad = np.arccos(np.float64(ab) / np.sqrt(np.float64(aa) * np.float64(bb)))
    return float(np.degrees(rad)) if degrees else float(rad)

def signed_area_of_parallelogram(a: Point, b: Point, c: Point) -> float:
    """Twice the signed area of triangle (a, b, c) projected onto the xy-plane.

    Positive for a counter-clockwise turn a -> b -> c, negative for clockwise.
    """
    _same_kind(a, b, c)
    return a.scalar.to_float(_cross_z(b - a, c - b))

def area_of_triangle(a: Point, b: Point, c: Point) -> float:
    return abs(signed_area_of_parallelogram(a, b, c) * 0.5)

def direction(a: Point, b: Point, c: Point) -> Direction:
    """Turn a -> b -> c: 1 counter-clockwise, -1 clockwise, 0 collinear (or NaN)."""
    area = signed_area_of_parallelogram(a, b, c)
    if area > 0:
        return 1
    if area < 0:
        return -1
    return 0

def area_of_polygon(points) -> float:
    """Polygon area via the shoelace formula. Works for either winding order.

    The polygon is implicitly closed. Fewer than three vertices give 0.0.
    """
    verts = list(points); n = len(verts)
    if n < 3:
        logger.debug(f"area_of_polygon() on degenerate polygon with {n} vertices")
    if not verts:
        return 0.0
    _same_kind(*verts); s = verts[0].scalar
    area = 0.0
    for i in range(n):
        p = verts[i]; q = verts[(i+1)%n]
        area -= s.to_float(s.mul(s.sub(q.x, p.x), s.add(q.y, p.y)))
    return abs(area / 2)
