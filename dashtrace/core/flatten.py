# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Curve flattening.

Quadratic and cubic Bézier curves are reduced to polylines by adaptive
de Casteljau subdivision; circular arcs are sampled at a fixed number of
steps. The returned point lists exclude the start point and include the
end point, so each entry can be fed straight into ``line_to``.
"""

from __future__ import annotations

import logging
import math

from .geometry import Point, Transform, transform_point

logger = logging.getLogger(__name__)

# Maximum deviation (device units) of a flattened segment from its curve
DEFAULT_SMOOTHNESS = 0.25

# Subdivision depth cap: at most 2**16 segments per curve
MAX_FLATTEN_DEPTH = 16


def _control_deviation(p0: Point, p1: Point, p2: Point, p3: Point) -> float:
    """Largest perpendicular distance of p1, p2 from the chord p0-p3."""
    dx = p3.x - p0.x
    dy = p3.y - p0.y
    chord_len_sq = dx * dx + dy * dy

    if chord_len_sq < 1e-20:
        # Closed or degenerate chord: measure the control points from p0
        return max(math.hypot(p1.x - p0.x, p1.y - p0.y),
                   math.hypot(p2.x - p0.x, p2.y - p0.y))

    chord_len = math.sqrt(chord_len_sq)
    d1 = abs((p1.x - p0.x) * dy - (p1.y - p0.y) * dx) / chord_len
    d2 = abs((p2.x - p0.x) * dy - (p2.y - p0.y) * dx) / chord_len
    return max(d1, d2)


def flatten_cubic(p0: Point, p1: Point, p2: Point, p3: Point,
                  tolerance: float = DEFAULT_SMOOTHNESS,
                  max_depth: int = MAX_FLATTEN_DEPTH) -> list[Point]:
    """
    Flatten a cubic Bézier curve into line segment endpoints.

    A piece is accepted once both inner control points lie within
    *tolerance* of its chord; otherwise it is split at t = 0.5. Pieces at
    *max_depth* are accepted as they are, which bounds the work for
    pathological control points (cusps, self-overlap).

    Args:
        p0, p1, p2, p3: Control points.
        tolerance: Maximum allowed deviation from the true curve.
        max_depth: Subdivision depth cap.

    Returns:
        Points from (exclusive) p0 to (inclusive) p3.
    """
    if tolerance <= 0:
        tolerance = 1e-9

    segments: list[Point] = []
    stack = [(p0, p1, p2, p3, 0)]
    capped = False

    while stack:
        p0, p1, p2, p3, depth = stack.pop()

        if _control_deviation(p0, p1, p2, p3) <= tolerance:
            segments.append(p3)
            continue
        if depth >= max_depth:
            capped = True
            segments.append(p3)
            continue

        # Subdivide curve at midpoint using de Casteljau's algorithm
        p01 = Point((p0.x + p1.x) / 2, (p0.y + p1.y) / 2)
        p12 = Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)
        p23 = Point((p2.x + p3.x) / 2, (p2.y + p3.y) / 2)
        p012 = Point((p01.x + p12.x) / 2, (p01.y + p12.y) / 2)
        p123 = Point((p12.x + p23.x) / 2, (p12.y + p23.y) / 2)
        p0123 = Point((p012.x + p123.x) / 2, (p012.y + p123.y) / 2)

        # Push second half first so first half is processed next
        stack.append((p0123, p123, p23, p3, depth + 1))
        stack.append((p0, p01, p012, p0123, depth + 1))

    if capped:
        logger.debug("Curve flattening hit depth cap %d; accepting current flatness", max_depth)
    return segments


def flatten_quadratic(p0: Point, p1: Point, p2: Point,
                      tolerance: float = DEFAULT_SMOOTHNESS,
                      max_depth: int = MAX_FLATTEN_DEPTH) -> list[Point]:
    """Flatten a quadratic Bézier curve via its exact cubic elevation.

    Returns:
        Points from (exclusive) p0 to (inclusive) p2.
    """
    c1 = Point(p0.x + 2.0 / 3.0 * (p1.x - p0.x), p0.y + 2.0 / 3.0 * (p1.y - p0.y))
    c2 = Point(p2.x + 2.0 / 3.0 * (p1.x - p2.x), p2.y + 2.0 / 3.0 * (p1.y - p2.y))
    return flatten_cubic(p0, c1, c2, p2, tolerance, max_depth)


def cubic_point(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """Evaluate a cubic Bézier curve at parameter *t*."""
    mt = 1.0 - t
    b0 = mt * mt * mt
    b1 = 3.0 * mt * mt * t
    b2 = 3.0 * mt * t * t
    b3 = t * t * t
    return Point(b0 * p0.x + b1 * p1.x + b2 * p2.x + b3 * p3.x,
                 b0 * p0.y + b1 * p1.y + b2 * p2.y + b3 * p3.y)


def arc_points(cx: float, cy: float, radius: float, start_angle: float,
               end_angle: float, segments: int = 10,
               matrix: Transform | None = None) -> list[Point]:
    """Sample a circular arc at a fixed number of equal angle steps.

    Angles are in radians. The start point is not included.
    """
    segments = max(1, int(segments))
    step = (end_angle - start_angle) / segments
    points = []
    for i in range(1, segments + 1):
        angle = start_angle + i * step
        points.append(transform_point(cx + math.cos(angle) * radius,
                                      cy + math.sin(angle) * radius, matrix))
    return points
