# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Point value type and small planar helpers.

Affine transforms are duck-typed: anything exposing
``transform_point(x, y) -> (x, y)`` works, which is exactly the
interface of ``cairo.Matrix``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol


class Transform(Protocol):
    def transform_point(self, x: float, y: float) -> tuple[float, float]: ...


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> Point:
        return Point(self.x * s, self.y * s)

    def __rmul__(self, s: float) -> Point:
        return self.__mul__(s)

    def length(self) -> float:
        return math.hypot(self.x, self.y)


def points_from_flat(coords: Sequence[float]) -> list[Point]:
    """Convert ``[x0, y0, x1, y1, ...]`` into a list of Points.

    Raises:
        ValueError: If *coords* has an odd number of values.
    """
    if len(coords) % 2:
        raise ValueError(f"expected an even number of coordinates, got {len(coords)}")
    return [Point(coords[i], coords[i + 1]) for i in range(0, len(coords), 2)]


def as_points(points: Iterable[Point | tuple[float, float]]) -> list[Point]:
    """Normalise Points or ``(x, y)`` pairs to Points."""
    return [p if isinstance(p, Point) else Point(p[0], p[1]) for p in points]


def distance(a: Point, b: Point) -> float:
    return (b - a).length()


def transform_point(x: float, y: float, matrix: Transform | None = None) -> Point:
    """Return ``(x, y)`` as a Point, passed through *matrix* when one is given."""
    if matrix is None:
        return Point(x, y)
    tx, ty = matrix.transform_point(x, y)
    return Point(tx, ty)
