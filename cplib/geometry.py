"""Plane geometry on points and lines given by two points."""

from __future__ import annotations

import math
from dataclasses import dataclass

EPS = 1e-8
VERTICAL_SLOPE = 1e9


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Line:
    """The line through ``p1`` and ``p2``."""

    p1: Point
    p2: Point


def crossing_point(l1: Line, l2: Line) -> Point:
    """Intersection of two lines; parallel lines raise ``ValueError``."""
    p1, p2, p3, p4 = l1.p1, l1.p2, l2.p1, l2.p2
    k = -(p1.y - p2.y) * (p3.x - p4.x) + (p3.y - p4.y) * (p1.x - p2.x)
    if abs(k) < EPS:
        raise ValueError("lines are parallel")
    c2 = p3.y * p4.x - p3.x * p4.y
    c1 = p1.y * p2.x - p1.x * p2.y
    l = c2 * (p1.y - p2.y) - c1 * (p3.y - p4.y)
    m = c2 * (p1.x - p2.x) - c1 * (p3.x - p4.x)
    return Point(m / k, l / k)


def slope(line: Line) -> float:
    """Slope of ``line``; :data:`VERTICAL_SLOPE` for a vertical line."""
    dx = line.p1.x - line.p2.x
    dy = line.p1.y - line.p2.y
    if abs(dx) < EPS:
        return VERTICAL_SLOPE
    return dy / dx


def make_line(p: Point, k: float) -> Line:
    """The line through ``p`` with slope ``k``; slopes above 1e8 mean vertical."""
    if k > 1e8:
        return Line(p, Point(p.x, p.y + 10))
    return Line(p, Point(p.x + 5, p.y + 5 * k))


def dist(p1: Point, p2: Point) -> float:
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def mid_point(p1: Point, p2: Point) -> Point:
    return Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)


def angle_of(p1: Point, p0: Point, p2: Point) -> float:
    """The angle at ``p0`` between rays to ``p1`` and ``p2``, in radians."""
    l01, l02, l12 = dist(p1, p0), dist(p0, p2), dist(p1, p2)
    cosine = (l01 * l01 + l02 * l02 - l12 * l12) / (2 * l01 * l02)
    return math.acos(max(-1.0, min(1.0, cosine)))


def tri_area(a: Point, b: Point, c: Point) -> float:
    x1, x2 = b.x - a.x, c.x - a.x
    y1, y2 = b.y - a.y, c.y - a.y
    return abs(x1 * y2 - x2 * y1) / 2