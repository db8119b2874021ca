"""Scalar, vector and affine-matrix primitives that the geome types build on.

Vectors are plain ``(x, y)`` tuples. Matrices are 3x3 homogeneous numpy
arrays; every constructor returns a fresh array.
"""
import math
import numbers
from functools import reduce

import numpy as np

from .constants import EPSILON
from .types import Point, Mat2d

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

# ============================================================
# Scalar Helpers
# ============================================================
def approx(a: float, b: float) -> bool:
    """Tolerant equality: relative for large magnitudes, absolute near zero."""
    return math.isclose(a, b, rel_tol=EPSILON, abs_tol=EPSILON)

def mod(a: float, b: float) -> float:
    """Floored modulo with the result always in [0, b)."""
    r = a % b
    # -1e-20 % 360 rounds to 360.0
    return 0.0 if r >= b else r

def normalize_angle(deg: float) -> float:
    """Map an angle in degrees into (-180, 180]."""
    r = mod(deg, 360)
    return r - 360 if r > 180 else r

_QUADRANT_COS = {0.0: 1.0, 90.0: 0.0, 180.0: -1.0, 270.0: 0.0}
_QUADRANT_SIN = {0.0: 0.0, 90.0: 1.0, 180.0: 0.0, 270.0: -1.0}

def cos_deg(deg: float) -> float:
    """Cosine of an angle in degrees, exact at multiples of 90."""
    r = mod(deg, 360)
    if r in _QUADRANT_COS:
        return _QUADRANT_COS[r]
    return math.cos(math.radians(r))

def sin_deg(deg: float) -> float:
    """Sine of an angle in degrees, exact at multiples of 90."""
    r = mod(deg, 360)
    if r in _QUADRANT_SIN:
        return _QUADRANT_SIN[r]
    return math.sin(math.radians(r))

# ============================================================
# Vector Helpers
# ============================================================
def add(a: Point, b: Point) -> Point:
    return (a[0]+b[0], a[1]+b[1])

def sub(a: Point, b: Point) -> Point:
    return (a[0]-b[0], a[1]-b[1])

def mul(a: Point, b: Point) -> Point:
    """Component-wise product."""
    return (a[0]*b[0], a[1]*b[1])

def div(a: Point, b: Point) -> Point:
    """Component-wise quotient."""
    return (a[0]/b[0], a[1]/b[1])

def scale(v: Point, s: float) -> Point:
    return (v[0]*s, v[1]*s)

def dot(a: Point, b: Point) -> float:
    return a[0]*b[0]+a[1]*b[1]

def cross(a: Point, b: Point) -> float:
    """Z component of the 3D cross product of a and b."""
    return a[0]*b[1]-a[1]*b[0]

def sqr_length(v: Point) -> float:
    return v[0]**2+v[1]**2

def length(v: Point) -> float:
    return math.hypot(v[0], v[1])

def dist(a: Point, b: Point) -> float:
    return math.hypot(b[0]-a[0], b[1]-a[1])

def lerp(a: Point, b: Point, t: float) -> Point:
    return (a[0]+(b[0]-a[0])*t, a[1]+(b[1]-a[1])*t)

def direction(deg: float) -> Point:
    """Unit vector at *deg* degrees counter-clockwise from +x."""
    return (cos_deg(deg), sin_deg(deg))

def angle(v: Point) -> float:
    """Angle of v in degrees, in (-180, 180]. The zero vector gives 0."""
    return math.degrees(math.atan2(v[1], v[0]))

def vec_approx(a: Point, b: Point) -> bool:
    return approx(a[0], b[0]) and approx(a[1], b[1])

# ============================================================
# Affine Matrices
# ============================================================
def identity() -> Mat2d:
    return np.eye(3)

def translation(offset: Point) -> Mat2d:
    return np.array([[1.0, 0.0, offset[0]],
                     [0.0, 1.0, offset[1]],
                     [0.0, 0.0, 1.0]])

def scaling(s: float | Point) -> Mat2d:
    """Scale about the origin by a scalar or a per-axis (sx, sy) pair."""
    sx, sy = (s, s) if isinstance(s, numbers.Real) else s
    return np.array([[sx, 0.0, 0.0],
                     [0.0, sy, 0.0],
                     [0.0, 0.0, 1.0]])

def rotation(deg: float) -> Mat2d:
    """Counter-clockwise rotation about the origin."""
    c = cos_deg(deg); s = sin_deg(deg)
    return np.array([[c, -s, 0.0],
                     [s, c, 0.0],
                     [0.0, 0.0, 1.0]])

def trs(t: Point = (0.0, 0.0), deg: float = 0.0, s: float | Point = 1.0) -> Mat2d:
    """Translate * rotate * scale, i.e. scale applied first."""
    return translation(t) @ rotation(deg) @ scaling(s)

def compose(*ms: Mat2d) -> Mat2d:
    """Matrix product m0 @ m1 @ ... ; the last matrix is applied first."""
    return reduce(np.matmul, ms, identity())

def determinant(m: Mat2d) -> float:
    """Determinant of the linear (upper-left 2x2) part."""
    return float(m[0, 0]*m[1, 1]-m[0, 1]*m[1, 0])

def invert(m: Mat2d) -> Mat2d:
    """Inverse affine transform. Raises GeometryError if m is singular.

    Singularity is judged against the size of the linear part, so small
    but well-conditioned scales still invert.
    """
    det = determinant(m)
    if det == 0 or abs(det) <= EPSILON*float(np.sum(m[:2, :2]**2)):
        raise GeometryError(f"Singular matrix: det={det:.2e}")
    return np.linalg.inv(m)

def transform_point(m: Mat2d, p: Point) -> Point:
    x, y, _ = m @ np.array([p[0], p[1], 1.0])
    return (float(x), float(y))

def mat_approx(a: Mat2d, b: Mat2d) -> bool:
    return bool(np.allclose(a, b, rtol=EPSILON, atol=EPSILON))
