"""Axis-aligned rectangles stored as (min, max) corners.

Every function here returns a Rect with min <= max on both axes, or None
where the result would be empty. Edge names (left/top/right/bottom) follow
Y-down screen coordinates as in SVG.
"""
import logging
import numbers
from typing import Literal

from .types import Point, Rect, Mat2d
from .linalg import (
    GeometryError, approx as close, vec_approx,
    add, sub, mul, scale as vscale, lerp as vlerp, translation, scaling, compose,
)

log = logging.getLogger(__name__)

FitMode = Literal["fit", "cover", "contain", "fill"]

# ============================================================
# Construction
# ============================================================
def of(a: Point, b: Point) -> Rect:
    """Rect spanned by two opposite corners given in any order."""
    return Rect((min(a[0], b[0]), min(a[1], b[1])),
                (max(a[0], b[0]), max(a[1], b[1])))

def from_points(*points: Point) -> Rect:
    """Bounding box of the given points."""
    if not points:
        raise GeometryError("Bounding box of zero points")
    xs = [p[0] for p in points]; ys = [p[1] for p in points]
    return Rect((min(xs), min(ys)), (max(xs), max(ys)))

def by_size(min_pt: Point, size: Point) -> Rect:
    return of(min_pt, add(min_pt, size))

def from_center(center: Point, size: Point) -> Rect:
    half = vscale(size, 0.5)
    return of(sub(center, half), add(center, half))

# ============================================================
# Properties
# ============================================================
def size(r: Rect) -> Point:
    return sub(r.max, r.min)

def width(r: Rect) -> float:
    return r.max[0] - r.min[0]

def height(r: Rect) -> float:
    return r.max[1] - r.min[1]

def aspect_ratio(r: Rect) -> float:
    """width / height. Raises GeometryError for zero height."""
    h = height(r)
    if h == 0:
        raise GeometryError(f"Aspect ratio of zero-height rect: {r}")
    return width(r)/h

def center(r: Rect) -> Point:
    return vlerp(r.min, r.max, 0.5)

def left(r: Rect) -> float:
    return r.min[0]

def top(r: Rect) -> float:
    return r.min[1]

def right(r: Rect) -> float:
    return r.max[0]

def bottom(r: Rect) -> float:
    return r.max[1]

# ============================================================
# Functions
# ============================================================
def scale(r: Rect, s: float | Point) -> Rect:
    """Scale about the origin by a scalar or per-axis factor."""
    if isinstance(s, numbers.Real):
        s = (s, s)
    return of(mul(r.min, s), mul(r.max, s))

def translate(r: Rect, d: Point) -> Rect:
    return Rect(add(r.min, d), add(r.max, d))

def offset(r: Rect, d: float | Point) -> Rect:
    """Grow every side outward by d (shrink if negative).

    Shrinking past zero size collapses that axis onto the center.
    """
    if isinstance(d, numbers.Real):
        d = (d, d)
    lo = sub(r.min, d); hi = add(r.max, d)
    c = center(r)
    lo = (min(lo[0], c[0]), min(lo[1], c[1]))
    hi = (max(hi[0], c[0]), max(hi[1], c[1]))
    return Rect(lo, hi)

def contains(outer: Rect, inner: Rect) -> bool:
    return (inner.min[0] >= outer.min[0] and inner.min[1] >= outer.min[1]
            and inner.max[0] <= outer.max[0] and inner.max[1] <= outer.max[1])

def contains_point(r: Rect, p: Point) -> bool:
    return r.min[0] <= p[0] <= r.max[0] and r.min[1] <= p[1] <= r.max[1]

def intersects(a: Rect, b: Rect) -> bool:
    """True if the rects overlap or touch."""
    return (a.min[0] <= b.max[0] and a.max[0] >= b.min[0]
            and a.min[1] <= b.max[1] and a.max[1] >= b.min[1])

def unite(*rects: Rect) -> Rect:
    """Smallest rect containing all the given rects."""
    if not rects:
        raise GeometryError("Union of zero rects")
    return Rect((min(r.min[0] for r in rects), min(r.min[1] for r in rects)),
                (max(r.max[0] for r in rects), max(r.max[1] for r in rects)))

def intersect(*rects: Rect) -> Rect | None:
    """Common area of all the given rects, or None if they do not overlap."""
    if not rects:
        raise GeometryError("Intersection of zero rects")
    lo = (max(r.min[0] for r in rects), max(r.min[1] for r in rects))
    hi = (min(r.max[0] for r in rects), min(r.max[1] for r in rects))
    if lo[0] > hi[0] or lo[1] > hi[1]:
        return None
    return Rect(lo, hi)

def lerp(a: Rect, b: Rect, t: float) -> Rect:
    return of(vlerp(a.min, b.min, t), vlerp(a.max, b.max, t))

def approx(a: Rect, b: Rect) -> bool:
    return vec_approx(a.min, b.min) and vec_approx(a.max, b.max)

# ============================================================
# Object Fit
# ============================================================
def object_fit(frame: Rect, obj: Rect, mode: FitMode = "fit") -> Mat2d:
    """Matrix placing *obj* inside *frame*, like CSS object-fit.

    "fit" scales uniformly so all of obj is visible, "cover" scales
    uniformly so frame is fully covered, and "fill" stretches each axis.
    Uniform modes center obj along the axis with slack. "contain" is an
    older name for "cover".
    """
    if mode == "contain":
        mode = "cover"
    if mode not in ("fit", "cover", "fill"):
        raise ValueError(f"Unknown fit mode: {mode!r}")
    fw, fh = size(frame); ow, oh = size(obj)
    if close(ow, 0) or close(oh, 0) or close(fw, 0) or close(fh, 0):
        raise GeometryError(f"Degenerate rect in object_fit: frame={frame} obj={obj}")

    to_origin = translation(vscale(obj.min, -1))
    if mode == "fill":
        return compose(translation(frame.min), scaling((fw/ow, fh/oh)), to_origin)

    frame_ratio = fw/fh; obj_ratio = ow/oh
    by_width = frame_ratio < obj_ratio if mode == "fit" else frame_ratio > obj_ratio
    if by_width:
        s = fw/ow
        shift = (0.0, (fh - oh*s)/2)
    else:
        s = fh/oh
        shift = ((fw - ow*s)/2, 0.0)
    log.debug("object_fit %s: scale=%.6g shift=%s", mode, s, shift)
    return compose(translation(add(frame.min, shift)), scaling(s), to_origin)
