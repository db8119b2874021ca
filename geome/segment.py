"""Finite line segments between two ordered points."""
from . import line
from .constants import EPSILON
from .types import Point, Segment
from .linalg import add, sub, scale, dot, sqr_length, dist, lerp

def of(start: Point, end: Point) -> Segment:
    return Segment(start, end)

def length(seg: Segment) -> float:
    return dist(seg.start, seg.end)

def midpoint(seg: Segment) -> Point:
    return lerp(seg.start, seg.end, 0.5)

def _param(seg: Segment, p: Point) -> float | None:
    """Parameter t of p projected onto start + t*(end - start); None if degenerate."""
    d = sub(seg.end, seg.start)
    L2 = sqr_length(d)
    if L2 <= EPSILON**2:
        return None
    return dot(sub(p, seg.start), d)/L2

def closest_point(seg: Segment, p: Point) -> Point:
    """Point on the segment nearest to p."""
    t = _param(seg, p)
    if t is None:
        return seg.start
    t = max(0.0, min(1.0, t))
    return add(seg.start, scale(sub(seg.end, seg.start), t))

def distance(seg: Segment, p: Point) -> float:
    return dist(p, closest_point(seg, p))

def _on_segment(seg: Segment, p: Point) -> bool:
    t = _param(seg, p)
    return t is not None and -EPSILON <= t <= 1 + EPSILON

def intersection(s1: Segment, s2: Segment) -> Point | None:
    """Crossing point of two segments, or None if they do not cross.

    Parallel and collinear-overlapping segments also give None, since the
    supporting lines have no unique intersection.
    """
    p = line.intersection(line.from_points(*s1), line.from_points(*s2))
    if p is None:
        return None
    if _on_segment(s1, p) and _on_segment(s2, p):
        return p
    return None
