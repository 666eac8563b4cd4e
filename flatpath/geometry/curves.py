from __future__ import annotations
from typing import List, Sequence
import math

from .vectors import Point, add_point, angle_between, rotate_point

TAU = 2 * math.pi

def _parameters(n: int) -> List[float]:
    # resolution 0 collapses the curve onto its endpoint
    if n <= 0:
        return [1.0]
    return [i / n for i in range(n + 1)]

def _bernstein(controls: Sequence[Point], t: float) -> Point:
    n = len(controls) - 1
    x = y = 0.0
    for i, (px, py) in enumerate(controls):
        w = math.comb(n, i) * (1 - t)**(n - i) * t**i
        x += w * px
        y += w * py
    return (x, y)

def flatten_bezier(controls: Sequence[Point], resolution: int) -> List[Point]:
    """Sample a Bezier curve of any degree at t = i/resolution, endpoints included."""
    return [_bernstein(controls, t) for t in _parameters(resolution)]

def flatten_cubic(p0: Point, p1: Point, p2: Point, p3: Point, resolution: int = 64) -> List[Point]:
    return flatten_bezier((p0, p1, p2, p3), resolution)

def flatten_quadratic(p0: Point, p1: Point, p2: Point, resolution: int = 64) -> List[Point]:
    return flatten_bezier((p0, p1, p2), resolution)

def flatten_arc(start: Point, radii: Point, rotation: float, large: bool, sweep: bool,
                end: Point, resolution: int = 64) -> List[Point]:
    """
    Flatten an SVG elliptical arc using the endpoint to center conversion
    of SVG 1.1 Appendix F.6.5.

    Zero radius degrades to a straight segment [start, end]; coincident
    endpoints draw nothing.
    """
    rx, ry = radii
    if rx == 0 or ry == 0:
        return [start, end]
    if start == end:
        return []
    rx, ry = abs(rx), abs(ry)
    phi = math.radians(rotation % 360)

    # half chord in the ellipse frame
    x1, y1 = rotate_point(((start[0] - end[0]) / 2, (start[1] - end[1]) / 2), -phi)

    lam = (x1*x1) / (rx*rx) + (y1*y1) / (ry*ry)
    if lam > 1:
        s = math.sqrt(lam)
        rx, ry = rx * s, ry * s

    rx2, ry2 = rx*rx, ry*ry
    num = rx2*ry2 - rx2*y1*y1 - ry2*x1*x1
    den = rx2*y1*y1 + ry2*x1*x1
    coef = math.sqrt(abs(num / den))
    if large == sweep:
        coef = -coef
    cx1 = coef * rx * y1 / ry
    cy1 = -coef * ry * x1 / rx

    mid = ((start[0] + end[0]) / 2, (start[1] + end[1]) / 2)
    center = add_point(rotate_point((cx1, cy1), phi), mid)

    u = ((x1 - cx1) / rx, (y1 - cy1) / ry)
    v = ((-x1 - cx1) / rx, (-y1 - cy1) / ry)
    theta = angle_between((1.0, 0.0), u)
    delta = math.fmod(angle_between(u, v), TAU)
    if not sweep and delta > 0:
        delta -= TAU
    elif sweep and delta < 0:
        delta += TAU

    out: List[Point] = []
    for t in _parameters(resolution):
        a = theta + delta * t
        p = rotate_point((rx * math.cos(a), ry * math.sin(a)), phi)
        out.append(add_point(p, center))
    return out
