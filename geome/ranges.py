"""Closed scalar intervals [min, max]."""
from .types import Range
from .linalg import approx as close

def of(a: float, b: float) -> Range:
    return Range(min(a, b), max(a, b))

def span(r: Range) -> float:
    return r.max - r.min

def center(r: Range) -> float:
    return (r.min + r.max)/2

def offset(r: Range, d: float) -> Range:
    return Range(r.min + d, r.max + d)

def scale(r: Range, s: float, origin: float = 0.0) -> Range:
    """Scale about *origin*; a negative factor swaps the ends back into order."""
    return of((r.min - origin)*s + origin, (r.max - origin)*s + origin)

def contains(r: Range, x: float) -> bool:
    return r.min <= x <= r.max

def approx(r1: Range, r2: Range) -> bool:
    return close(r1.min, r2.min) and close(r1.max, r2.max)
