"""Shared test fixtures for geome tests."""
import pytest
from geome import line, linalg


@pytest.fixture(scope="session")
def horizontal():
    """y = 0, travelling +x."""
    return line.from_points((0, 0), (1, 0))


@pytest.fixture(scope="session")
def oblique():
    """Line through (1, 2) and (4, -1), off the origin."""
    return line.from_points((1, 2), (4, -1))


@pytest.fixture(scope="session")
def sample_lines():
    """Lines spread over all four quadrants of theta, with varied offsets."""
    return [
        line.of(0.1, 3.7),
        line.of(45, 0),
        line.of(123.456, -2.5),
        line.of(270, 10),
        line.of(359.9, -0.25),
        line.from_points((-3, 5), (7, -2)),
    ]


@pytest.fixture(scope="session")
def affine():
    """Translate, rotate and non-uniformly scale."""
    return linalg.trs((3, -2), 30, (2, 0.5))
