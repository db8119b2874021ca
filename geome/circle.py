"""Circles: construction from center/radius or three points."""
from .types import Point, Circle
from .linalg import GeometryError, approx as close, vec_approx, sqr_length, dist

UNIT = Circle((0.0, 0.0), 1.0)

def of(center: Point, radius: float) -> Circle:
    if radius < 0:
        raise GeometryError(f"Negative radius: r={radius}")
    return Circle(center, radius)

def circumcircle(a: Point, b: Point, c: Point) -> Circle | None:
    """Circle through three points, or None if they are collinear."""
    d = 2*(a[0]*(b[1]-c[1]) + b[0]*(c[1]-a[1]) + c[0]*(a[1]-b[1]))
    if close(d, 0):
        return None
    A2 = sqr_length(a); B2 = sqr_length(b); C2 = sqr_length(c)
    center = ((A2*(b[1]-c[1]) + B2*(c[1]-a[1]) + C2*(a[1]-b[1]))/d,
              (A2*(c[0]-b[0]) + B2*(a[0]-c[0]) + C2*(b[0]-a[0]))/d)
    return Circle(center, dist(center, a))

def approx(c1: Circle, c2: Circle) -> bool:
    return vec_approx(c1.center, c2.center) and close(c1.radius, c2.radius)

def contains_point(circle: Circle, p: Point) -> bool:
    """True if p is inside or on the circle."""
    d = dist(circle.center, p)
    return d <= circle.radius or close(d, circle.radius)
