"""2D geometric primitives: lines, segments, circles, rects and ranges."""

from .types import Point, Mat2d, Line, Segment, Rect, Circle, Range
from .linalg import GeometryError
from . import linalg, line, segment, circle, rect, ranges
from .constants import EPSILON
