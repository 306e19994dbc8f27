"""Shared type definitions for the geomprim package."""
from numbers import Real
from typing import Literal

ScalarName = Literal["i32", "i64", "i128", "f32", "f64"]
Direction = Literal[-1, 0, 1]
Coord = Real

class PointTypeError(TypeError):
    """Raised for unregistered scalars and mixed scalar types or dimensions."""
