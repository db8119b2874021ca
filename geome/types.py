"""Shared type definitions for geome primitives."""
from typing import NamedTuple

import numpy as np

Point = tuple[float, float]

# 3x3 homogeneous affine transform, last row [0, 0, 1]
Mat2d = np.ndarray

class Line(NamedTuple):
    """Infinite directed line: normal angle in degrees and signed offset."""
    theta: float; offset: float

class Segment(NamedTuple):
    start: Point; end: Point

class Rect(NamedTuple):
    """Axis-aligned box. min <= max on both axes."""
    min: Point; max: Point

class Circle(NamedTuple):
    center: Point; radius: float

class Range(NamedTuple):
    min: float; max: float
