"""Point/vector types over a closed set of scalars, and geometry primitives."""

from .types import ScalarName, Direction, PointTypeError
from .scalars import Scalar, IntScalar, FloatScalar, SCALARS, scalar_for, infer_scalar
from .point import Point, Point2, Point3, make_point, from_array
from .geometry import (
    dot, cross, angle,
    signed_area_of_parallelogram, area_of_triangle, direction, area_of_polygon,
)
from .logging_config import setup_logging
