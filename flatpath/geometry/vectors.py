from __future__ import annotations
from typing import Tuple
import math

Point = Tuple[float, float]

def add_point(a: Point, b: Point) -> Point:
    return (a[0] + b[0], a[1] + b[1])

def reflect_point(p: Point, about: Point) -> Point:
    """Reflect p through the pivot `about` (p' = 2*about - p)."""
    return (about[0] + (about[0] - p[0]), about[1] + (about[1] - p[1]))

def angle_between(u: Point, v: Point) -> float:
    """Signed angle in radians from u to v, in (-pi, pi]."""
    cross = u[0]*v[1] - u[1]*v[0]
    dot = u[0]*v[0] + u[1]*v[1]
    return math.atan2(cross, dot)

def rotate_point(p: Point, angle: float) -> Point:
    """Rotate p counter-clockwise about the origin by angle (radians)."""
    c, s = math.cos(angle), math.sin(angle)
    return (c*p[0] - s*p[1], s*p[0] + c*p[1])
