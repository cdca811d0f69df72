# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Shape composers.

Each composer reduces a shape to move_to/line_to calls on a tracer. An
optional affine transform is applied to every sampled point before it
reaches the tracer, so dash spacing is measured in transformed (device)
space and stays even under non-uniform transforms.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..core.flatten import arc_points
from ..core.geometry import Point, Transform, as_points, transform_point

if TYPE_CHECKING:
    from .dash_line import DashLine

# Straight sub-segments per rounded-rectangle corner
CORNER_SEGMENTS = 10


def arc(tracer: DashLine, cx: float, cy: float, radius: float,
        start_angle: float, end_angle: float, segments: int = CORNER_SEGMENTS,
        matrix: Transform | None = None, connect: bool = True) -> None:
    """Trace a circular arc as *segments* straight pieces.

    With *connect*, a line (or a move, when there is no subpath yet) is
    first issued to the arc's start point.
    """
    if connect:
        start = transform_point(cx + math.cos(start_angle) * radius,
                                cy + math.sin(start_angle) * radius, matrix)
        if tracer.state.has_subpath:
            tracer.line_to(start.x, start.y)
        else:
            tracer.move_to(start.x, start.y)
    for p in arc_points(cx, cy, radius, start_angle, end_angle, segments, matrix):
        tracer.line_to(p.x, p.y)


def circle(tracer: DashLine, x: float, y: float, radius: float, points: int = 80,
           matrix: Transform | None = None) -> None:
    points = max(1, int(points))
    interval = math.pi * 2 / points
    first = transform_point(x + radius, y, matrix)
    tracer.move_to(first.x, first.y)
    for i in range(1, points + 1):
        if i == points:
            # reuse the first sample so the loop closes exactly
            nxt = first
        else:
            angle = i * interval
            nxt = transform_point(x + math.cos(angle) * radius, y + math.sin(angle) * radius, matrix)
        tracer.line_to(nxt.x, nxt.y)


def ellipse(tracer: DashLine, x: float, y: float, radius_x: float, radius_y: float,
            points: int = 80, matrix: Transform | None = None) -> None:
    """Trace an ellipse starting at its top, closing with the seam rule."""
    points = max(1, int(points))
    interval = math.pi * 2 / points
    first = transform_point(x, y - radius_y, matrix)
    tracer.move_to(first.x, first.y)
    for i in range(1, points):
        t = i * interval
        p = transform_point(x - radius_x * math.sin(t), y - radius_y * math.cos(t), matrix)
        tracer.line_to(p.x, p.y)
    tracer.line_to(first.x, first.y, close_path=True)


def poly(tracer: DashLine, points: Iterable[Point | tuple[float, float]],
         matrix: Transform | None = None) -> None:
    """Trace a polyline; the last edge closes the subpath if it ends at the start.

    Flat ``[x0, y0, x1, y1, ...]`` input goes through
    ``geometry.points_from_flat`` first.
    """
    pts = [transform_point(p.x, p.y, matrix) for p in as_points(points)]
    if not pts:
        return
    tracer.move_to(pts[0].x, pts[0].y)
    last = len(pts) - 1
    for i in range(1, len(pts)):
        tracer.line_to(pts[i].x, pts[i].y, close_path=(i == last))


def rect(tracer: DashLine, x: float, y: float, width: float, height: float,
         matrix: Transform | None = None) -> None:
    corners = [
        transform_point(x, y, matrix),
        transform_point(x + width, y, matrix),
        transform_point(x + width, y + height, matrix),
        transform_point(x, y + height, matrix),
    ]
    tracer.move_to(corners[0].x, corners[0].y)
    for corner in corners[1:]:
        tracer.line_to(corner.x, corner.y)
    tracer.line_to(corners[0].x, corners[0].y, close_path=True)


def round_rect(tracer: DashLine, x: float, y: float, width: float, height: float,
               corner_radius: float = 10, matrix: Transform | None = None) -> None:
    """Trace a rectangle with quarter-circle corners.

    The radius is clamped to half the smaller side.
    """
    r = max(0.0, min(corner_radius, min(width, height) / 2))
    if r == 0:
        rect(tracer, x, y, width, height, matrix)
        return
    half_pi = math.pi / 2

    start = transform_point(x + r, y, matrix)
    tracer.move_to(start.x, start.y)

    # top edge, top-right corner
    end = transform_point(x + width - r, y, matrix)
    tracer.line_to(end.x, end.y)
    arc(tracer, x + width - r, y + r, r, -half_pi, 0.0, CORNER_SEGMENTS, matrix, connect=False)

    # right edge, bottom-right corner
    end = transform_point(x + width, y + height - r, matrix)
    tracer.line_to(end.x, end.y)
    arc(tracer, x + width - r, y + height - r, r, 0.0, half_pi, CORNER_SEGMENTS, matrix, connect=False)

    # bottom edge, bottom-left corner
    end = transform_point(x + r, y + height, matrix)
    tracer.line_to(end.x, end.y)
    arc(tracer, x + r, y + height - r, r, half_pi, math.pi, CORNER_SEGMENTS, matrix, connect=False)

    # left edge, top-left corner
    end = transform_point(x, y + r, matrix)
    tracer.line_to(end.x, end.y)
    # the last sample of this corner is the start point; finish on it exactly
    # so the closing edge is recognised
    corner = arc_points(x + r, y + r, r, math.pi, 3 * half_pi, CORNER_SEGMENTS, matrix)
    for p in corner[:-1]:
        tracer.line_to(p.x, p.y)
    tracer.line_to(start.x, start.y, close_path=True)
