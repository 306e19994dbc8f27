"""Tests for geomprim/logging_config.py."""
import io
import logging
import pytest
from geomprim.geometry import angle
from geomprim.logging_config import setup_logging
from geomprim.point import Point2


@pytest.fixture
def pkg_logger():
    yield
    logger = logging.getLogger("geomprim")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_setup_logging_single_handler(pkg_logger):
    setup_logging()
    logger = setup_logging(logging.DEBUG)
    assert logger.name == "geomprim"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_setup_logging_stream(pkg_logger):
    buf = io.StringIO()
    setup_logging(logging.DEBUG, stream=buf)
    angle(Point2(0, 0), Point2(1, 0))
    assert "geomprim.geometry - DEBUG - angle() with zero-length vector" in buf.getvalue()


def test_setup_logging_info_hides_debug(pkg_logger):
    buf = io.StringIO()
    setup_logging(logging.INFO, stream=buf)
    angle(Point2(0, 0), Point2(1, 0))
    assert buf.getvalue() == ""
