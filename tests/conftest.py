"""Shared test fixtures for geomprim tests."""
import numpy as np
import pytest
from geomprim.point import Point2, Point3


def sample_points(cls, n, seed, lo=-1000, hi=1000, scalar=None):
    """n integer points drawn from a seeded generator."""
    rng = np.random.default_rng(seed)
    return [cls(*(int(v) for v in rng.integers(lo, hi, cls.dim)), scalar=scalar)
            for _ in range(n)]


@pytest.fixture(scope="session")
def p1():
    return Point3(20, 12, 30)


@pytest.fixture(scope="session")
def p2():
    return Point3(45, -100, -55)


@pytest.fixture(scope="session", params=["i32", "i64", "i128", "f32", "f64"])
def unit_square(request):
    """Unit square, counter-clockwise, for every 2D scalar."""
    s = request.param
    return [Point2(0, 0, s), Point2(1, 0, s), Point2(1, 1, s), Point2(0, 1, s)]


@pytest.fixture(scope="session")
def triangle():
    """Right triangle with legs 4 and 3, counter-clockwise."""
    return Point2(0, 0), Point2(4, 0), Point2(0, 3)
