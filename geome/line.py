"""Directed infinite lines in normal form: dot(p, normal(theta)) == offset.

``theta`` is the angle of the normal in degrees, kept in [0, 360), and
``offset`` is the signed distance from the origin along that normal. The
direction of travel is the normal rotated by -90 degrees, so a line and
its reverse differ by 180 in theta and by sign in offset.
"""
import logging

import numpy as np

from .types import Point, Line, Mat2d
from .linalg import (
    approx as close, mod, normalize_angle, angle, direction as dir_vec,
    add, sub, scale, dot, transform_point,
)

log = logging.getLogger(__name__)

X_AXIS = Line(90.0, 0.0)
Y_AXIS = Line(0.0, 0.0)

# ============================================================
# Construction
# ============================================================
def of(theta: float, offset: float) -> Line:
    return Line(mod(theta, 360), offset)

def from_points(p1: Point, p2: Point) -> Line:
    """Line through p1 and p2, directed from p1 to p2.

    Coincident points are not rejected; atan2(0, 0) gives a direction of
    0 degrees, so the result is the horizontal line through p1.
    """
    delta = sub(p2, p1)
    if delta == (0, 0):
        log.debug("from_points: coincident points %s", p1)
    theta = mod(angle(delta) + 90, 360)
    return Line(theta, dot(p1, dir_vec(theta)))

def from_point_direction(p: Point, deg: float) -> Line:
    """Line through p travelling at *deg* degrees from the +x axis."""
    theta = mod(deg + 90, 360)
    return Line(theta, dot(p, dir_vec(theta)))

from_point_angle = from_point_direction

def normal(line: Line) -> Point:
    """Unit normal; points on the positive side have dot(p, n) > offset."""
    return dir_vec(line.theta)

def direction(line: Line) -> Point:
    """Unit tangent in the direction of travel."""
    return dir_vec(line.theta - 90)

# ============================================================
# Metrics and Predicates
# ============================================================
def signed_distance(line: Line, p: Point) -> float:
    return dot(p, normal(line)) - line.offset

def distance(line: Line, p: Point) -> float:
    return abs(signed_distance(line, p))

def closest(line: Line, p: Point) -> Point:
    """Foot of the perpendicular from p onto the line."""
    return sub(p, scale(normal(line), signed_distance(line, p)))

def approx(l1: Line, l2: Line) -> bool:
    """Direction-sensitive tolerant equality of theta and offset."""
    # Compare angles on the circle so 359.9999999 matches 0
    return (close(normalize_angle(l1.theta - l2.theta), 0)
            and close(l1.offset, l2.offset))

def same(l1: Line, l2: Line) -> bool:
    """Geometric equality, ignoring direction."""
    return approx(l1, l2) or approx(invert(l1), l2)

def is_parallel(l1: Line, l2: Line) -> bool:
    d = mod(l1.theta - l2.theta, 180)
    return close(d, 0) or close(d, 180)

def is_perpendicular(l1: Line, l2: Line) -> bool:
    return close(mod(l1.theta - l2.theta, 180), 90)

def invert(line: Line) -> Line:
    """Same line, opposite direction."""
    return Line(mod(line.theta + 180, 360), -line.offset)

# ============================================================
# Intersection
# ============================================================
def intersection(l1: Line, l2: Line) -> Point | None:
    """Crossing point of two lines, or None if parallel or coincident."""
    a1, b1 = normal(l1); c1 = l1.offset
    a2, b2 = normal(l2); c2 = l2.offset
    det = a1*b2 - a2*b1
    if close(det, 0):
        return None
    return ((c1*b2 - c2*b1)/det, (a1*c2 - a2*c1)/det)

# ============================================================
# Reflection and Transform
# ============================================================
def reflection_matrix(line: Line) -> Mat2d:
    """Affine reflection across the line: (I - 2nn^T) p + 2cn."""
    nx, ny = normal(line); c = line.offset
    return np.array([
        [1 - 2*nx*nx, -2*nx*ny, 2*c*nx],
        [-2*nx*ny, 1 - 2*ny*ny, 2*c*ny],
        [0.0, 0.0, 1.0],
    ])

def transform(line: Line, m: Mat2d) -> Line:
    """Image of the line under an affine matrix.

    Non-uniform scale and shear do not act linearly on (theta, offset),
    so two points on the line are mapped and the line rebuilt from them.
    """
    foot = scale(normal(line), line.offset)
    ahead = add(foot, direction(line))
    return from_points(transform_point(m, foot), transform_point(m, ahead))
